"""
Project catalog routes.
"""
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
from craftfolio.db.session import get_db
from craftfolio.core.errors import NotFoundError
from craftfolio.models.user import User
from craftfolio.models.project import ProjectStatus
from craftfolio.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from craftfolio.api.dependencies import get_current_user
from craftfolio.services import project_service
from craftfolio.services.filters import filter_projects

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    owner_id: Optional[str] = None,
    q: Optional[str] = None,
    project_status: Optional[ProjectStatus] = Query(None, alias="status"),
    tags: List[str] = Query(default=[]),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List projects, optionally narrowed by owner, text, status and tags."""
    if owner_id:
        projects = project_service.list_projects_by_owner(owner_id, db)
    else:
        projects = project_service.list_projects(db)
    return filter_projects(projects, query=q, status=project_status, tags=tags)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a project owned by the current user."""
    return project_service.create_project(current_user.id, project_data, db)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get project details."""
    project = project_service.get_project(project_id, db)
    if not project:
        raise NotFoundError("Project not found")
    return project


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    patch: ProjectUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a project; only its owner may do so."""
    project_service.get_owned_project(project_id, current_user.id, db)
    return project_service.update_project(project_id, patch, db)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a project; only its owner may do so."""
    project_service.get_owned_project(project_id, current_user.id, db)
    project_service.delete_project(project_id, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
