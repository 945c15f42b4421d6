"""
Catalog Routes - Project and skill listings.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from portfolio.domains.catalog import CatalogSource, Project, SkillCatalog
from portfolio.interfaces.api.deps import get_catalog

router = APIRouter()


class ProjectsResponse(BaseModel):
    """Project listing response."""

    success: bool = True
    data: list[Project]


class SkillsResponse(BaseModel):
    """Skill catalog response."""

    success: bool = True
    data: SkillCatalog


@router.get("/projects", response_model=ProjectsResponse)
async def list_projects(catalog: CatalogSource = Depends(get_catalog)):
    """List portfolio projects in display order."""
    return ProjectsResponse(data=catalog.projects())


@router.get("/skills", response_model=SkillsResponse)
async def list_skills(catalog: CatalogSource = Depends(get_catalog)):
    """List skills grouped by category."""
    return SkillsResponse(data=catalog.skills())
