"""
Contact Contracts - Interfaces for contact domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import ContactRecord


@runtime_checkable
class ContactNotifier(Protocol):
    """Contract for delivering a contact submission to the site owner."""

    async def deliver(self, record: ContactRecord) -> None:
        """Deliver the record. Raises on failure."""
        ...
