"""
Portfolio - Personal portfolio website backend and landing page.

Example:
    >>> from portfolio.interfaces.api import create_app
    >>> app = create_app()
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
