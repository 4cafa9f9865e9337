from __future__ import annotations

import pytest

from scoring_stage.infrastructure.adapters.message_adapter import (
    InvalidMessageError,
    MessageScoringAdapter,
)


def test_handle_scores_record(babyweight_stage, babyweight_record) -> None:
    babyweight_record["weight_pounds"] = 7.3
    adapter = MessageScoringAdapter(babyweight_stage)

    result = adapter.handle({"id": "msg-1", "record": babyweight_record})

    assert result["id"] == "msg-1"
    assert result["status"] == "ok"
    assert result["model"] == {"name": "babyweight", "version": "1"}
    assert result["prediction"]["predicted"] == pytest.approx(6.52806, abs=1e-3)
    assert result["prediction"]["actual"] == 7.3


def test_handle_reports_record_error(babyweight_stage) -> None:
    adapter = MessageScoringAdapter(babyweight_stage)

    result = adapter.handle({"id": 7, "record": {"year": "later"}})

    assert result["status"] == "error"
    assert result["error"] == {
        "code": "non_numeric_value",
        "message": "Field 'year' has non-numeric value 'later'",
        "field": "year",
    }
    assert "prediction" not in result


@pytest.mark.parametrize("payload", [{"id": "x"}, {"record": [1, 2]}, "record"])
def test_handle_reports_invalid_message(babyweight_stage, payload) -> None:
    result = MessageScoringAdapter(babyweight_stage).handle(payload)

    assert result["status"] == "error"
    assert result["error"]["code"] == "invalid_message"
    assert result["error"]["field"] is None


def test_extract_record_requires_mapping() -> None:
    with pytest.raises(InvalidMessageError):
        MessageScoringAdapter.extract_record({"record": None})
