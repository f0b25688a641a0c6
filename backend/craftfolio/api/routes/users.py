"""
Profile routes for the authenticated user.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from craftfolio.db.session import get_db
from craftfolio.schemas.user import UserResponse, UserUpdate
from craftfolio.models.user import User
from craftfolio.api.dependencies import get_current_user
from craftfolio.services import user_service

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/me", response_model=UserResponse)
async def get_my_profile(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user


@router.put("/me", response_model=UserResponse)
async def update_my_profile(
    patch: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the current user's profile with the supplied fields."""
    return user_service.update_profile(current_user.id, patch, db)
