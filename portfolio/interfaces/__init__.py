"""
Interfaces - User-facing applications.

- api: FastAPI REST API
- cli: Command-line interface
- landing: Static landing page and browser script
"""

__all__ = ["api", "cli", "landing"]
