"""
Project catalog service backed by the database.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from craftfolio.core.errors import ForbiddenError, NotFoundError
from craftfolio.core.utils import utcnow
from craftfolio.models.project import Project, ProjectStatus
from craftfolio.schemas.project import ProjectCreate, ProjectUpdate
from craftfolio.services.user_service import get_user
from craftfolio.services.validation import require_text

logger = logging.getLogger(__name__)


def create_project(owner_id: str, data: ProjectCreate, db: Session) -> Project:
    """Create a project owned by an existing user."""
    title = require_text(data.title, "title")
    description = require_text(data.description, "description")
    get_user(owner_id, db)
    
    project = Project(
        owner_id=owner_id,
        title=title,
        description=description,
        repo_url=data.repo_url,
        demo_url=data.demo_url,
        screenshot=data.screenshot,
        tags=data.tags or [],
        status=data.status or ProjectStatus.PLANNED
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    
    logger.info(f"Created project {project.id} for user {owner_id}")
    return project


def list_projects(db: Session) -> List[Project]:
    """All projects in creation order."""
    return db.query(Project).order_by(Project.created_at, Project.id).all()


def list_projects_by_owner(owner_id: str, db: Session) -> List[Project]:
    return db.query(Project).filter(
        Project.owner_id == owner_id
    ).order_by(Project.created_at, Project.id).all()


def get_project(project_id: str, db: Session) -> Optional[Project]:
    return db.query(Project).filter(Project.id == project_id).first()


def get_owned_project(project_id: str, user_id: str, db: Session) -> Project:
    """Get a project the user is allowed to modify."""
    project = get_project(project_id, db)
    if not project:
        raise NotFoundError("Project not found")
    if project.owner_id != user_id:
        raise ForbiddenError("Only the owner can modify this project")
    return project


def update_project(project_id: str, patch: ProjectUpdate, db: Session) -> Project:
    """Apply a project patch; the owner reference never changes."""
    project = get_project(project_id, db)
    if not project:
        raise NotFoundError("Project not found")
    
    changes = patch.changes()
    if "title" in changes:
        changes["title"] = require_text(changes["title"], "title")
    if "description" in changes:
        changes["description"] = require_text(changes["description"], "description")
    if "tags" in changes:
        changes["tags"] = changes["tags"] or []
    if "status" in changes and changes["status"] is None:
        changes["status"] = ProjectStatus.PLANNED
    
    for field, value in changes.items():
        setattr(project, field, value)
    project.updated_at = utcnow()
    
    db.commit()
    db.refresh(project)
    return project


def delete_project(project_id: str, db: Session) -> None:
    """Delete a project permanently."""
    project = get_project(project_id, db)
    if not project:
        raise NotFoundError("Project not found")
    db.delete(project)
    db.commit()
    logger.info(f"Deleted project {project_id}")
