"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from craftfolio.api.routes import auth, users, projects

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(projects.router)
