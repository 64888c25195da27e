"""FastAPI REST API for the registration pipeline.

Provides endpoints for user registration and health checks. Failed
registrations return ``{"detail": {"code", "message"}}`` with a 409, 422 or
503 status.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from src.railway.error import Error
from src.registration import errors
from src.registration.config import RegistrationConfig
from src.registration.service import UserRegistrationService

logger = logging.getLogger(__name__)


# --- Request/Response Models ---


class RegisterRequest(BaseModel):
    """Request body for registration."""

    email: Optional[str] = Field(default=None, description="Email address")
    password: Optional[str] = Field(default=None, description="Password")


class RegisterResponse(BaseModel):
    """Response for a successful registration."""

    email: str
    created_at: datetime


class ErrorResponse(BaseModel):
    """Serialized Error record."""

    code: str
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    registered_users: int
    version: str = "0.1.0"


# Codes that are not plain input validation problems
_STATUS_BY_CODE: dict[str, int] = {
    errors.USER_ALREADY_EXISTS.code: 409,
    errors.EMAIL_SERVICE_UNAVAILABLE.code: 503,
    errors.EMAIL_TEMPLATE_INVALID.code: 503,
}


def status_for(error: Error) -> int:
    """Map a registration error to an HTTP status code."""
    return _STATUS_BY_CODE.get(error.code, 422)


# --- Application ---

_service: Optional[UserRegistrationService] = None


def get_service() -> UserRegistrationService:
    """Get or create the global service instance."""
    global _service
    if _service is None:
        _service = UserRegistrationService(RegistrationConfig())
    return _service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    get_service()
    yield


def create_app(config: Optional[RegistrationConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Optional RegistrationConfig. Defaults to environment-based config.
    """
    app = FastAPI(
        title="Railway Registration",
        description="Fail-fast user registration built on Result chaining",
        version="0.1.0",
        lifespan=lifespan,
    )

    if config is not None:
        global _service
        _service = UserRegistrationService(config)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            registered_users=get_service().registered_count,
        )

    @app.post(
        "/register",
        response_model=RegisterResponse,
        status_code=201,
        responses={
            409: {"model": ErrorResponse},
            422: {"model": ErrorResponse},
            503: {"model": ErrorResponse},
        },
    )
    async def register(request: RegisterRequest) -> RegisterResponse:
        """Register a new user."""
        result = get_service().register_user(request.email, request.password)
        if result.is_failure():
            error = result.error
            logger.warning("Registration failed with %s", error.code)  # type: ignore[union-attr]
            raise HTTPException(
                status_code=status_for(error),  # type: ignore[arg-type]
                detail=ErrorResponse(code=error.code, message=error.message).model_dump(),  # type: ignore[union-attr]
            )

        user = result.value
        return RegisterResponse(email=user.email, created_at=user.created_at)  # type: ignore[union-attr]

    return app


# Default app instance for uvicorn
app = create_app()
