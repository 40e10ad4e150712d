"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lexitrack.config import configure_logging, get_settings
from lexitrack.database import create_tables, dispose_engine, initialize_database
from lexitrack.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    InsufficientDataError,
)
from lexitrack.exceptions import LexitrackError
from lexitrack.infrastructure.learning.routers import modules, progress, quiz, review, vocabulary

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Set up logging and the database on startup; release the engine on shutdown."""
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    create_tables()
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LexitrackError)
async def lexitrack_error_handler(request: Request, exc: LexitrackError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "request_failed", method=request.method, path=request.url.path, error=exc.message
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors: 422 for too little data, 409 for rule violations, else 400."""
    if isinstance(exc, InsufficientDataError):
        status_code = status.HTTP_422_UNPROCESSABLE_CONTENT
    elif isinstance(exc, BusinessRuleViolationError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    logger.warning(
        "domain_error",
        method=request.method,
        path=request.url.path,
        error=exc.message,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


app.include_router(modules.router, prefix=settings.API_V1_PREFIX)
app.include_router(quiz.router, prefix=settings.API_V1_PREFIX)
app.include_router(vocabulary.router, prefix=settings.API_V1_PREFIX)
app.include_router(review.router, prefix=settings.API_V1_PREFIX)
app.include_router(progress.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }
