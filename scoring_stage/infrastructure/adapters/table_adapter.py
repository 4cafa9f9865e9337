"""
Infrastructure Adapter - Table Rows

Batch row adapter: converts table rows (a pandas DataFrame read from a
warehouse export, CSV or JSON file) into input records, scores them
through the batch use case and returns a frame ready to be written back.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd
import structlog

from scoring_stage.application.use_cases.scoring_use_cases import ScoreBatchUseCase

logger = structlog.get_logger(__name__)

PREDICTED_COLUMN = "predicted"
ACTUAL_COLUMN = "actual"
ERROR_COLUMN = "error"
ERROR_FIELD_COLUMN = "error_field"


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is pd.NA or value is pd.NaT


def frame_to_records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    """Turn rows into records, dropping empty cells so they read as absent."""
    return [
        {key: value for key, value in row.items() if not _is_missing(value)}
        for row in frame.to_dict(orient="records")
    ]


def score_dataframe(
    use_case: ScoreBatchUseCase,
    frame: pd.DataFrame,
    key_columns: Sequence[str] = (),
) -> pd.DataFrame:
    """Score every row of a frame.

    Args:
        use_case: Batch use case wrapping the scoring stage.
        frame: Input rows, one column per field.
        key_columns: Columns copied to the output to identify each row.

    Returns:
        A frame aligned with the input index, holding the key columns plus
        predicted, actual, error and error_field. Failed rows keep their
        position with an empty prediction.
    """
    missing = [column for column in key_columns if column not in frame.columns]
    if missing:
        raise KeyError(f"Key columns not found in input: {', '.join(missing)}")

    outcomes = use_case.run(frame_to_records(frame))

    rows = []
    for outcome in outcomes:
        if outcome.prediction is not None:
            rows.append(
                {
                    PREDICTED_COLUMN: outcome.prediction.predicted,
                    ACTUAL_COLUMN: outcome.prediction.actual,
                    ERROR_COLUMN: None,
                    ERROR_FIELD_COLUMN: None,
                }
            )
        else:
            rows.append(
                {
                    PREDICTED_COLUMN: None,
                    ACTUAL_COLUMN: None,
                    ERROR_COLUMN: outcome.error.code if outcome.error else None,
                    ERROR_FIELD_COLUMN: outcome.error.field if outcome.error else None,
                }
            )

    result = pd.DataFrame(
        rows,
        index=frame.index,
        columns=[PREDICTED_COLUMN, ACTUAL_COLUMN, ERROR_COLUMN, ERROR_FIELD_COLUMN],
    )
    if key_columns:
        result = pd.concat([frame[list(key_columns)], result], axis=1)
    return result


def read_table(path: Path) -> pd.DataFrame:
    """Read CSV, JSON or JSON-lines rows."""
    if not path.exists():
        raise FileNotFoundError(f"Input file not found at {path}")
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix in {".jsonl", ".ndjson"}:
        return pd.read_json(path, lines=True)
    if suffix == ".json":
        return pd.read_json(path)
    raise ValueError("Unsupported file format; use CSV, JSON or JSON lines")


def write_table(frame: pd.DataFrame, path: Path) -> None:
    """Write rows using the format implied by the file suffix."""
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        frame.to_csv(path, index=False)
    elif suffix in {".jsonl", ".ndjson"}:
        frame.to_json(path, orient="records", lines=True)
    elif suffix == ".json":
        frame.to_json(path, orient="records")
    else:
        raise ValueError("Unsupported file format; use CSV, JSON or JSON lines")
    logger.info("table.written", path=str(path), rows=len(frame))
