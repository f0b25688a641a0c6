"""
Pydantic schemas for Project entity.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime
from craftfolio.core.utils import clean_optional_text, dedupe
from craftfolio.models.project import ProjectStatus


class ProjectFields(BaseModel):
    """Shared validators for project payloads."""

    @field_validator("repo_url", "demo_url", "screenshot", mode="before", check_fields=False)
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            return clean_optional_text(v)
        return v

    @field_validator("tags", check_fields=False)
    @classmethod
    def dedupe_tags(cls, v):
        return dedupe(v)


class ProjectCreate(ProjectFields):
    """
    Schema for project creation.

    Title and description are checked by the service so that a missing
    and an empty value are reported the same way.
    """
    title: str = ""
    description: str = ""
    repo_url: Optional[str] = None
    demo_url: Optional[str] = None
    screenshot: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[ProjectStatus] = None


class ProjectUpdate(ProjectFields):
    """Schema for project patches. The owner is not patchable."""
    title: Optional[str] = None
    description: Optional[str] = None
    repo_url: Optional[str] = None
    demo_url: Optional[str] = None
    screenshot: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[ProjectStatus] = None

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller."""
        return self.model_dump(exclude_unset=True)


class ProjectResponse(BaseModel):
    """Schema for project response."""
    id: str
    owner_id: str
    title: str
    description: str
    repo_url: Optional[str] = None
    demo_url: Optional[str] = None
    screenshot: Optional[str] = None
    tags: List[str] = []
    status: ProjectStatus = ProjectStatus.PLANNED
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
