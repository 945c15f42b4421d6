"""
Static Catalog - The projects and skills shown on the portfolio.

Data lives in module-level tuples owned by the catalog; every accessor
returns a fresh copy so no caller can change what the next request sees.
"""

from __future__ import annotations

from .models import Project, ProjectStatus, SkillCatalog

__all__ = ["StaticCatalog"]

_PROJECTS: tuple[Project, ...] = (
    Project(
        id=1,
        title="E-Commerce Microservices",
        description="Kubernetes-based microservices platform on AWS with Docker containers",
        technologies=("Node.js", "Docker", "Kubernetes", "AWS EKS", "PostgreSQL"),
        github="https://github.com/yourusername/aws-k8s-ecommerce-app",
        status=ProjectStatus.COMPLETED,
    ),
    Project(
        id=2,
        title="CI/CD Pipeline",
        description="Automated deployment pipeline with AWS CodePipeline and Infrastructure as Code",
        technologies=("AWS CodePipeline", "CloudFormation", "S3", "CloudFront"),
        github="https://github.com/yourusername/aws-cicd-web-pipeline",
        status=ProjectStatus.IN_PROGRESS,
    ),
)

_SKILLS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("cloud", ("AWS", "Azure", "Google Cloud")),
    ("containers", ("Docker", "Kubernetes", "EKS")),
    ("programming", ("Node.js", "JavaScript", "Python")),
    ("infrastructure", ("Terraform", "CloudFormation", "CI/CD")),
    ("databases", ("PostgreSQL", "Redis", "MongoDB")),
)


class StaticCatalog:
    """Read-only catalog backed by compiled-in data."""

    def __init__(
        self,
        projects: tuple[Project, ...] = _PROJECTS,
        skills: tuple[tuple[str, tuple[str, ...]], ...] = _SKILLS,
    ) -> None:
        ids = [project.id for project in projects]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate project ids: {ids}")
        self._projects = projects
        self._skills = skills

    def projects(self) -> list[Project]:
        return list(self._projects)

    def skills(self) -> SkillCatalog:
        return {category: list(names) for category, names in self._skills}
