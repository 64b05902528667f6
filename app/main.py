from fastapi import FastAPI, HTTPException, Request
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import os
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

# Import core components
from app.core.logging_config import setup_logging
from app.core.settings import settings
from app.middleware.logging import LoggingMiddleware

# Import configuration
from app.config import init_firebase
from app.db import Base, engine

# Import route modules
from app.routes import health, catalog, organizations, assessments, ministry_opportunities, matching
from app.exceptions import (
    UnauthorizedException, ForbiddenException,
    NotFoundException, ValidationException
)

# Set up logging first
logger = setup_logging()

_docs_enabled = settings.is_development or os.getenv("SHOW_DOCS", "").lower() in ("1", "true", "yes")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    from app.core.gifts import GIFT_KEYS
    from app.core.natural_abilities import NATURAL_ABILITIES
    if not settings.is_test:
        Base.metadata.create_all(bind=engine)
    logger.info("=" * 50)
    logger.info("Kingdom Gifts API starting up")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"CORS origins: {settings.cors_origins}")
    logger.info(f"Catalogs: {len(GIFT_KEYS)} gifts, {len(NATURAL_ABILITIES)} natural abilities")
    logger.info(f"Result TTL: {settings.result_ttl_days} days")
    logger.info("=" * 50)
    yield
    # Shutdown logic
    logger.info("Kingdom Gifts API shutting down gracefully")

app = FastAPI(
    title="Kingdom Gifts API",
    description="Spiritual gifts assessment and ministry placement for churches",
    version="1.0.0",
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    lifespan=lifespan,
)

# Add middleware in correct order (last added = first executed)
app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_origins != ["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)

# Initialize Firebase (skip in test environment)
if not settings.is_test:
    init_firebase()

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(catalog.router)
app.include_router(organizations.router)
app.include_router(assessments.router)
app.include_router(ministry_opportunities.router)
app.include_router(matching.router)


# Exception handlers
_HANDLED_ERRORS = {
    UnauthorizedException: "Unauthorized access attempt",
    ForbiddenException: "Forbidden access attempt",
    ValidationException: "Validation error",
    NotFoundException: "Not found error",
}


async def domain_exception_handler(request: Request, exc: HTTPException):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    label = _HANDLED_ERRORS.get(type(exc), "Request error")
    logger.warning(f"[{correlation_id}] {label} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "correlation_id": correlation_id}
    )


for _exc_class in _HANDLED_ERRORS:
    app.add_exception_handler(_exc_class, domain_exception_handler)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    logger.error(f"[{correlation_id}] Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)

    if settings.is_development:
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "error": str(exc),
                "correlation_id": correlation_id,
                "type": type(exc).__name__
            }
        )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "correlation_id": correlation_id
        }
    )


# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Kingdom Gifts API",
        "version": "1.0.0",
        "environment": settings.environment,
        "docs_url": "/docs" if _docs_enabled else None,
        "health_check": "/health",
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info" if settings.is_development else "warning"
    )
