"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.dependencies import get_record_store
from app.api.routes import health, libraries
from app.core.config import settings
from app.core.logging import setup_logging, get_logger
from app.models.schemas import ErrorResponse
from app.services.exceptions import ServiceError
from app.services.policy import FAULT_POLICY, NOT_FOUND_POLICY

# Setup logging
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan."""
    # Startup
    setup_logging()
    logger.info("Logging initialized successfully")

    record_store = get_record_store()
    if record_store.health_check():
        logger.info(f"Record store '{settings.record_store}' is ready")
    else:
        logger.error(f"Record store '{settings.record_store}' is not reachable")

    yield

    # Shutdown
    logger.info("API shut down")


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    docs_url=settings.docs_url,
    redoc_url=settings.redoc_url,
    openapi_url=settings.openapi_url,
    lifespan=lifespan,
)


def _error_response(status_code: int, message: str, detail=None, headers=None) -> JSONResponse:
    if not settings.is_development:
        detail = None
    body = ErrorResponse(status=status_code, message=message, detail=detail)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError):
    """Handle collaborator faults raised below the request handler."""
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error_response(
        exc.status_code, exc.message, exc.detail, FAULT_POLICY.headers
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors in the API error envelope."""
    policy = NOT_FOUND_POLICY if exc.status_code == 404 else FAULT_POLICY
    headers = {**(exc.headers or {}), **policy.headers}
    return _error_response(exc.status_code, str(exc.detail), headers=headers)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(500, "Internal server error", str(exc), FAULT_POLICY.headers)


# Include routers
app.include_router(health.router)
app.include_router(libraries.router)
