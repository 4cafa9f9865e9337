"""
Presentation Layer - Scoring Controller

Request adapter: converts query strings and JSON bodies into input
records and returns prediction records. Record errors are reported as
422 responses carrying the error code and the offending field.
"""

from typing import Any, Dict

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request

from scoring_stage.application.dtos.scoring_dto import (
    BatchScoreRequestDTO,
    BatchScoreResponseDTO,
    PredictionDTO,
    ScoreRequestDTO,
    SpecificationDTO,
)
from scoring_stage.application.use_cases.scoring_use_cases import (
    GetSpecificationUseCase,
    ScoreBatchUseCase,
    ScoreRecordUseCase,
)
from scoring_stage.domain.entities.errors import InvalidRecordError
from scoring_stage.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Scoring"])


def _score(use_case: ScoreRecordUseCase, record: Dict[str, Any]) -> PredictionDTO:
    try:
        return use_case.execute(record)
    except InvalidRecordError as exc:
        logger.info("scoring.request_rejected", code=exc.code, field=exc.field)
        raise HTTPException(status_code=422, detail=exc.to_dict())
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error("scoring.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/predict",
    response_model=PredictionDTO,
    response_model_exclude_none=True,
    summary="Score the record given as query parameters",
    description="""
    Each query parameter is one input field, e.g.
    `/predict?year=2000&plurality=1&mother_married=true`.
    Values are coerced to numbers using the declared field types.
    """,
)
@inject
async def predict_from_query(
    request: Request,
    use_case: ScoreRecordUseCase = Depends(
        Provide[AppContainer.score_record_use_case]
    ),
) -> PredictionDTO:
    return _score(use_case, dict(request.query_params))


@router.post(
    "/predict",
    response_model=PredictionDTO,
    response_model_exclude_none=True,
    summary="Score one record",
)
@inject
async def predict(
    payload: ScoreRequestDTO,
    use_case: ScoreRecordUseCase = Depends(
        Provide[AppContainer.score_record_use_case]
    ),
) -> PredictionDTO:
    return _score(use_case, payload.record)


@router.post(
    "/predict/batch",
    response_model=BatchScoreResponseDTO,
    response_model_exclude_none=True,
    summary="Score a batch of records",
    description="""
    Records are scored independently. A record that cannot be scored is
    reported in its own result entry and does not fail the request.
    """,
)
@inject
async def predict_batch(
    payload: BatchScoreRequestDTO,
    use_case: ScoreBatchUseCase = Depends(Provide[AppContainer.score_batch_use_case]),
) -> BatchScoreResponseDTO:
    return use_case.execute(payload.records)


@router.get(
    "/specification",
    response_model=SpecificationDTO,
    summary="Describe the loaded model specification",
)
@inject
async def get_specification(
    use_case: GetSpecificationUseCase = Depends(
        Provide[AppContainer.get_specification_use_case]
    ),
) -> SpecificationDTO:
    return use_case.execute()
