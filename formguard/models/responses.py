"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime

from formguard.validators.models import FieldError


class SubmissionResponse(BaseModel):
    """A stored, sanitized submission."""

    submission_id: str
    name: str
    email: str
    created_at: datetime


class ErrorResponse(BaseModel):
    """Error envelope shared by every handler."""

    error: str
    message: str
    details: Optional[list[FieldError]] = None


class HealthDependency(BaseModel):
    """Health status of a single dependency."""

    status: Literal["healthy", "unhealthy", "degraded"]
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    validators: list[str] = []
    dependencies: dict[str, HealthDependency]
