"""
API Dependencies - Dependency injection for FastAPI routes.

Settings are attached to ``app.state`` by ``create_app``; everything else
is built from them here.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from portfolio.config import Settings
from portfolio.domains.catalog import CatalogSource, StaticCatalog
from portfolio.domains.contact import ContactService, SimulatedNotifier


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


@lru_cache
def get_catalog() -> CatalogSource:
    """Get static catalog singleton."""
    return StaticCatalog()


def get_contact_service(
    settings: Settings = Depends(get_app_settings),
) -> ContactService:
    """Contact service using the simulated delivery channel."""
    return ContactService(SimulatedNotifier(settings.contact_delay_seconds))
