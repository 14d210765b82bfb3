"""
FastAPI application for the SPAC Compliance Engine.

Routes:
- GET  /health              : liveness check
- /api/compliance/*         : compliance engine endpoints (see compliance_api)

Error mapping:
- InvalidInputError      -> 400
- StageTransitionError   -> 409
- Other ComplianceError -> 500
- Request validation     -> 422
"""

import logging
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import Settings, get_settings
from domain.exceptions import (
    ComplianceError,
    InvalidInputError,
    StageTransitionError,
)
from services.logging_config import configure_logging

from .compliance_api import router as compliance_router

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def invalid_input_handler(request: Request, exc: InvalidInputError):
    """Unknown enum values, malformed dates and out-of-range fields."""
    logger.warning(f"Invalid input on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content=exc.to_dict())


async def stage_transition_handler(request: Request, exc: StageTransitionError):
    logger.warning(f"Stage transition rejected: {exc.current_status} -> {exc.target_status}")
    return JSONResponse(status_code=409, content=exc.to_dict())


async def compliance_error_handler(request: Request, exc: ComplianceError):
    """Configuration errors and any other engine failure."""
    logger.error(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=500, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic request validation errors with readable messages."""
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")

    return JSONResponse(
        status_code=422,
        content={
            "error_type": "RequestValidationError",
            "message": "Invalid request data",
            "details": {"validation_errors": errors},
        },
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}\n{traceback.format_exc()}")
    return JSONResponse(
        status_code=500,
        content={
            "error_type": "InternalError",
            "message": "An unexpected error occurred",
            "details": {"type": type(exc).__name__},
        },
    )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (defaults to the cached settings)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_output=settings.log_json,
        log_file=Path(settings.log_file) if settings.log_file else None,
    )

    app = FastAPI(title=settings.name, version=settings.version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Resolved along the exception MRO
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(StageTransitionError, stage_transition_handler)
    app.add_exception_handler(ComplianceError, compliance_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(compliance_router)

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "service": settings.name,
            "version": settings.version,
            "environment": settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    logger.info(f"{settings.name} {settings.version} started ({settings.environment})")
    return app


app = create_app()
