"""
Catalog Domain - Compiled-in project and skill listings.
"""

from .contracts import CatalogSource
from .models import Project, ProjectStatus, SkillCatalog
from .store import StaticCatalog

__all__ = [
    "CatalogSource",
    "Project",
    "ProjectStatus",
    "SkillCatalog",
    "StaticCatalog",
]
