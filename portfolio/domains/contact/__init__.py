"""
Contact Domain - Contact form submissions.

This domain handles:
- Required-field validation
- Recording submissions to the operator log
- Handing submissions to a delivery channel
"""

from .contracts import ContactNotifier
from .models import ContactReceipt, ContactRecord, ContactSubmission
from .service import ContactService, SimulatedNotifier

__all__ = [
    # Contracts
    "ContactNotifier",
    # Models
    "ContactSubmission",
    "ContactRecord",
    "ContactReceipt",
    # Implementations
    "ContactService",
    "SimulatedNotifier",
]
