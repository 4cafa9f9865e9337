"""System endpoints exposing service health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from scoring_stage.application.dtos.scoring_dto import HealthDTO
from scoring_stage.application.use_cases.scoring_use_cases import (
    GetHealthStatusUseCase,
)
from scoring_stage.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> HealthDTO:
    """Return liveness and the identity of the served model."""
    try:
        health_status = get_health_status_use_case.execute()
        logger.debug("health.check.success", model=health_status.model_name)
        return health_status
    except Exception as exc:  # pragma: no cover - defensive logging path
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve service health",
        ) from exc
