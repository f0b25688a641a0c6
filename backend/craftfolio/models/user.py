"""
User model for authentication and profile data.
"""
from sqlalchemy import Column, String, Text, JSON
from sqlalchemy.orm import relationship
from craftfolio.db.base import BaseModel


class User(BaseModel):
    """User model with immutable username."""
    __tablename__ = "users"
    
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    avatar = Column(String(500), nullable=True)
    location = Column(String(200), nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    
    # Relationships
    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")
