"""
Project model for showcased portfolio work.
"""
from sqlalchemy import Column, String, Text, JSON, Enum as SQLEnum, ForeignKey
from sqlalchemy.orm import relationship
from craftfolio.db.base import BaseModel
import enum


class ProjectStatus(str, enum.Enum):
    """Project status enumeration."""
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Project(BaseModel):
    """Project owned by a single user."""
    __tablename__ = "projects"
    
    owner_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    repo_url = Column(String(500), nullable=True)
    demo_url = Column(String(500), nullable=True)
    screenshot = Column(String(500), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    status = Column(SQLEnum(ProjectStatus), default=ProjectStatus.PLANNED, nullable=False)
    
    # Relationships
    owner = relationship("User", back_populates="projects")
