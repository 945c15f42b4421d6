"""
CLI Interface - Command-line tools for the portfolio backend.

Provides commands for:
- Running the API server
- Inspecting the project and skill catalogs
- Sending a test contact submission
"""

from .main import app

__all__ = ["app"]
