"""Models package - Import all models for SQLAlchemy registration."""
from craftfolio.models.user import User
from craftfolio.models.project import Project, ProjectStatus

__all__ = [
    "User",
    "Project",
    "ProjectStatus",
]
