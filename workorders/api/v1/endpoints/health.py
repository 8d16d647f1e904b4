"""Liveness endpoint. Unauthenticated; never touches the database."""

from fastapi import APIRouter

from workorders.core.config import get_settings
from workorders.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        version=settings.app_version,
        database="configured" if settings.database_configured else "not_configured",
    )
