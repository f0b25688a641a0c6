"""
Declarative base and common columns for all models.
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from craftfolio.core.utils import new_id, utcnow

Base = declarative_base()


class BaseModel(Base):
    """Abstract model with opaque string id and timestamps."""
    __abstract__ = True

    id = Column(String(32), primary_key=True, default=new_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
