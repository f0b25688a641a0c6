"""
FastAPI entrypoint for the Craftfolio backend application.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from craftfolio.core.config import settings
from craftfolio.core.errors import AuthError, CraftfolioError
from craftfolio.core.utils import configure_logging, format_error
from craftfolio.api.router import api_router
from craftfolio.db.session import init_db

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.APP_NAME} API started")
    yield


app = FastAPI(
    title="Craftfolio API",
    description="Backend API for portfolio and project showcases",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CraftfolioError)
async def craftfolio_error_handler(request: Request, exc: CraftfolioError):
    """Convert domain errors into JSON error bodies."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    details = {"field": exc.field} if getattr(exc, "field", None) else None
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error(exc.message, details),
        headers=headers
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Craftfolio API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
