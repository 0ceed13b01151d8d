"""Health Schemas — liveness and readiness payloads."""

from datetime import datetime

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    application: str


class ReadinessResponse(BaseModel):
    status: str
    checks: dict[str, str]
