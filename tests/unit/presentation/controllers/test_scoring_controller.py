from __future__ import annotations

from typing import cast

import pytest
from fastapi import HTTPException, Request

from scoring_stage.application.dtos.scoring_dto import (
    BatchScoreRequestDTO,
    ScoreRequestDTO,
)
from scoring_stage.application.use_cases.scoring_use_cases import (
    GetSpecificationUseCase,
    ScoreBatchUseCase,
    ScoreRecordUseCase,
)
from scoring_stage.presentation.controllers.scoring_controller import (
    get_specification,
    predict,
    predict_batch,
    predict_from_query,
)


def _request(query_string: bytes) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/predict",
        "headers": [],
        "query_string": query_string,
        "server": ("test", 80),
    }
    return Request(scope)


@pytest.mark.asyncio
async def test_predict_from_query_coerces_strings(babyweight_stage) -> None:
    request = _request(b"year=2000&plurality=1&mother_married=true")

    dto = await predict_from_query(
        request, use_case=ScoreRecordUseCase(babyweight_stage)
    )

    assert dto.predicted == pytest.approx(6.52806, abs=1e-3)
    assert dto.actual is None


@pytest.mark.asyncio
async def test_predict_returns_prediction(babyweight_stage, babyweight_record):
    babyweight_record["weight_pounds"] = 6.9

    dto = await predict(
        ScoreRequestDTO(record=babyweight_record),
        use_case=ScoreRecordUseCase(babyweight_stage),
    )

    assert dto.actual == 6.9
    assert dto.model_name == "babyweight"


@pytest.mark.asyncio
async def test_predict_maps_record_errors_to_422(babyweight_stage) -> None:
    with pytest.raises(HTTPException) as exc:
        await predict(
            ScoreRequestDTO(record={"year": 2000, "plurality": "twins"}),
            use_case=ScoreRecordUseCase(babyweight_stage),
        )

    assert exc.value.status_code == 422
    assert exc.value.detail["code"] == "non_numeric_value"
    assert exc.value.detail["field"] == "plurality"


@pytest.mark.asyncio
async def test_predict_maps_unexpected_errors_to_500() -> None:
    class _BrokenUseCase:
        def execute(self, record):
            raise RuntimeError("boom")

    with pytest.raises(HTTPException) as exc:
        await predict(
            ScoreRequestDTO(record={}),
            use_case=cast(ScoreRecordUseCase, _BrokenUseCase()),
        )

    assert exc.value.status_code == 500


@pytest.mark.asyncio
async def test_predict_batch_reports_each_record(babyweight_stage, babyweight_record):
    payload = BatchScoreRequestDTO(records=[babyweight_record, {"year": 2000}])

    dto = await predict_batch(payload, use_case=ScoreBatchUseCase(babyweight_stage))

    assert dto.succeeded == 1
    assert dto.failed == 1
    assert dto.results[1].error.code == "missing_field"


@pytest.mark.asyncio
async def test_get_specification(babyweight_stage) -> None:
    dto = await get_specification(use_case=GetSpecificationUseCase(babyweight_stage))

    assert dto.name == "babyweight"
    assert [predictor.field for predictor in dto.predictors] == [
        "year",
        "plurality",
        "mother_married",
    ]
