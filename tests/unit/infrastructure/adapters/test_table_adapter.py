from __future__ import annotations

import json

import pandas as pd
import pytest

from scoring_stage.application.use_cases.scoring_use_cases import ScoreBatchUseCase
from scoring_stage.infrastructure.adapters.table_adapter import (
    ACTUAL_COLUMN,
    ERROR_COLUMN,
    ERROR_FIELD_COLUMN,
    PREDICTED_COLUMN,
    frame_to_records,
    read_table,
    score_dataframe,
    write_table,
)


@pytest.fixture()
def frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "row_id": ["a", "b", "c"],
            "year": [2000, 2001, float("nan")],
            "plurality": [1, 2, 1],
            "mother_married": [True, False, True],
            "weight_pounds": [7.1, 5.9, 8.0],
        }
    )


def test_frame_to_records_drops_empty_cells(frame) -> None:
    records = frame_to_records(frame)

    assert len(records) == 3
    assert "year" not in records[2]
    assert records[0]["row_id"] == "a"


def test_score_dataframe_keeps_row_alignment(babyweight_stage, frame) -> None:
    use_case = ScoreBatchUseCase(babyweight_stage, max_workers=2)

    result = score_dataframe(use_case, frame, key_columns=["row_id"])

    assert list(result.columns) == [
        "row_id",
        PREDICTED_COLUMN,
        ACTUAL_COLUMN,
        ERROR_COLUMN,
        ERROR_FIELD_COLUMN,
    ]
    assert list(result.index) == list(frame.index)
    assert result.loc[0, PREDICTED_COLUMN] == pytest.approx(6.52806, abs=1e-3)
    assert result.loc[1, ACTUAL_COLUMN] == pytest.approx(5.9)
    assert pd.isna(result.loc[0, ERROR_COLUMN])
    assert pd.isna(result.loc[2, PREDICTED_COLUMN])
    assert result.loc[2, ERROR_COLUMN] == "missing_field"
    assert result.loc[2, ERROR_FIELD_COLUMN] == "year"
    assert result.loc[2, "row_id"] == "c"


def test_score_dataframe_rejects_unknown_key_column(babyweight_stage, frame):
    with pytest.raises(KeyError):
        score_dataframe(ScoreBatchUseCase(babyweight_stage), frame, ["missing"])


def test_read_table_formats(tmp_path, frame) -> None:
    csv_path = tmp_path / "rows.csv"
    frame.to_csv(csv_path, index=False)
    jsonl_path = tmp_path / "rows.jsonl"
    jsonl_path.write_text(
        "\n".join(json.dumps({"year": 2000, "plurality": n}) for n in (1, 2)),
        encoding="utf-8",
    )

    assert len(read_table(csv_path)) == 3
    assert list(read_table(jsonl_path)["plurality"]) == [1, 2]


def test_read_table_errors(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "absent.csv")

    parquet = tmp_path / "rows.parquet"
    parquet.write_bytes(b"")
    with pytest.raises(ValueError):
        read_table(parquet)


def test_write_table_creates_parent_directories(tmp_path, frame) -> None:
    target = tmp_path / "out" / "predictions.json"

    write_table(frame, target)

    rows = json.loads(target.read_text(encoding="utf-8"))
    assert rows[0]["row_id"] == "a"
    with pytest.raises(ValueError):
        write_table(frame, tmp_path / "predictions.xlsx")
