"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Callable, Optional, Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_record_store
from app.core.config import settings
from app.models.schemas import HealthCheckResponse
from app.services.policy import HEALTH_POLICY
from app.stores.base import RecordStore

router = APIRouter()


HealthEvaluator = Callable[[], Union[bool, tuple[bool, Optional[str]]]]


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Health check with details",
    description="Get the health status with detailed checks for all services",
)
def health_check(record_store: RecordStore = Depends(get_record_store)):
    """Health check endpoint with detailed checks."""

    checks: dict = {}
    overall_status = "healthy"

    def add_check(name: str, evaluator: HealthEvaluator) -> None:
        nonlocal overall_status
        try:
            result = evaluator()
            detail: Optional[str] = None
            if isinstance(result, tuple):
                healthy, detail = result
            else:
                healthy = result
            status = "healthy" if healthy else "unhealthy"
        except Exception as exc:
            status = "error"
            detail = str(exc)

        if status != "healthy":
            overall_status = "unhealthy"

        entry = {"status": status}
        if detail:
            entry["detail"] = detail
        checks[name] = entry

    add_check("record_store", record_store.health_check)

    checks["service_info"] = {
        "status": "informational",
        "name": settings.app_name,
        "version": settings.app_version,
        "record_store": settings.record_store,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    payload = HealthCheckResponse(status=overall_status, checks=checks)
    return JSONResponse(content=payload.model_dump(), headers=HEALTH_POLICY.headers)
