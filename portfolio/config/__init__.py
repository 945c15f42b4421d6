"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    ErrorCode,
    InternalError,
    NotFoundError,
    PortfolioError,
    ValidationError,
    error_code_to_status,
)
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "PortfolioError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
    "error_code_to_status",
]
