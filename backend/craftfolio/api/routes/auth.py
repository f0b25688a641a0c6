"""
Authentication routes for registration and login.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from craftfolio.db.session import get_db
from craftfolio.core.security import create_access_token
from craftfolio.services import user_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_class=PlainTextResponse)
async def register(
    username: str,
    password: str,
    email: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Register a new user."""
    user_service.register_user(username, password, email=email, db=db)
    return "User registered successfully"


@router.post("/login", response_class=PlainTextResponse)
async def login(username: str, password: str, db: Session = Depends(get_db)):
    """Login and get a JWT token as plain text."""
    user = user_service.authenticate_user(username, password, db)
    return create_access_token(data={"sub": user.username, "user_id": user.id})
