"""
API Interface - FastAPI REST API for the portfolio site.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
