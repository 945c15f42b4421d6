"""
Catalog Models - Data types for catalog domain.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

# Category name -> ordered skill names
SkillCatalog = dict[str, list[str]]


class ProjectStatus(str, Enum):
    """Delivery state of a portfolio project."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"


class Project(BaseModel):
    """A portfolio project entry."""

    id: int = Field(..., ge=1)
    title: str
    description: str
    technologies: tuple[str, ...] = ()
    github: str
    status: ProjectStatus

    model_config = {"frozen": True}
