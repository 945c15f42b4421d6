"""
Catalog Contracts - Interfaces for catalog domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Project, SkillCatalog


@runtime_checkable
class CatalogSource(Protocol):
    """Contract for read-only catalog providers."""

    def projects(self) -> list[Project]:
        """All projects, in display order."""
        ...

    def skills(self) -> SkillCatalog:
        """Skills grouped by category."""
        ...
