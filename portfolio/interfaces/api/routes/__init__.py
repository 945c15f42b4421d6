"""
API Routes.
"""

from . import catalog, contact, health

__all__ = ["health", "contact", "catalog"]
