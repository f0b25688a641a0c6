"""
Project catalog over the local key-value store.
"""
import logging
from typing import List, Optional
from craftfolio.core.errors import NotFoundError
from craftfolio.core.utils import new_id, utcnow
from craftfolio.local.store import KeyValueStore, PROJECTS_KEY, USERS_KEY
from craftfolio.models.project import ProjectStatus
from craftfolio.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from craftfolio.services.validation import require_text

logger = logging.getLogger(__name__)


class LocalProjectCatalog:
    """CRUD over the ``projects`` slot."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _load(self) -> List[ProjectResponse]:
        return [ProjectResponse(**item) for item in self.store.read_json(PROJECTS_KEY, [])]

    def _save(self, projects: List[ProjectResponse]) -> None:
        self.store.write_json(PROJECTS_KEY, [p.model_dump(mode="json") for p in projects])

    def _user_exists(self, user_id: str) -> bool:
        return any(u.get("id") == user_id for u in self.store.read_json(USERS_KEY, []))

    def create(self, owner_id: str, data: ProjectCreate) -> ProjectResponse:
        title = require_text(data.title, "title")
        description = require_text(data.description, "description")
        if not self._user_exists(owner_id):
            raise NotFoundError("User not found")
        
        now = utcnow()
        project = ProjectResponse(
            id=new_id(),
            owner_id=owner_id,
            title=title,
            description=description,
            repo_url=data.repo_url,
            demo_url=data.demo_url,
            screenshot=data.screenshot,
            tags=data.tags or [],
            status=data.status or ProjectStatus.PLANNED,
            created_at=now,
            updated_at=now
        )
        projects = self._load()
        projects.append(project)
        self._save(projects)
        logger.info(f"Created local project {project.id}")
        return project

    def list(self) -> List[ProjectResponse]:
        return self._load()

    def list_by_owner(self, owner_id: str) -> List[ProjectResponse]:
        return [p for p in self._load() if p.owner_id == owner_id]

    def get_by_id(self, project_id: str) -> Optional[ProjectResponse]:
        for project in self._load():
            if project.id == project_id:
                return project
        return None

    def update(self, project_id: str, patch: ProjectUpdate) -> ProjectResponse:
        """Apply a project patch; the owner reference never changes."""
        projects = self._load()
        for index, project in enumerate(projects):
            if project.id == project_id:
                break
        else:
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
        
        updated = project.model_copy(update={**changes, "updated_at": utcnow()})
        projects[index] = updated
        self._save(projects)
        return updated

    def delete(self, project_id: str) -> None:
        projects = self._load()
        remaining = [p for p in projects if p.id != project_id]
        if len(remaining) == len(projects):
            raise NotFoundError("Project not found")
        self._save(remaining)
        logger.info(f"Deleted local project {project_id}")
