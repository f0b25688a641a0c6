"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, field_validator
from typing import List, Optional
from datetime import datetime
from craftfolio.core.utils import clean_optional_text, dedupe


class UserBase(BaseModel):
    """Base user schema."""
    username: str
    email: Optional[EmailStr] = None


class UserUpdate(BaseModel):
    """
    Schema for profile patches.

    Only fields present in the payload are applied. An explicit null (or a
    blank string) clears a text field; a null skill list clears the skills.
    """
    bio: Optional[str] = None
    avatar: Optional[str] = None
    location: Optional[str] = None
    skills: Optional[List[str]] = None
    email: Optional[EmailStr] = None

    @field_validator("bio", "avatar", "location", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            return clean_optional_text(v)
        return v

    @field_validator("skills")
    @classmethod
    def dedupe_skills(cls, v):
        return dedupe(v)

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller."""
        return self.model_dump(exclude_unset=True)


class UserResponse(UserBase):
    """Public projection of a user; never carries the credential."""
    id: str
    bio: Optional[str] = None
    avatar: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = []
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class StoredUser(UserResponse):
    """User record as persisted by the local backend."""
    hashed_password: str

    def public(self) -> UserResponse:
        return UserResponse(**self.model_dump(exclude={"hashed_password"}))
