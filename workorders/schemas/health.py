"""Health check API schemas."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness plus whether a SQL database is configured (no connection is attempted)."""

    status: Literal["ok"] = "ok"
    version: str
    database: Literal["configured", "not_configured"]
