"""Domain entities for scoring results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from scoring_stage.domain.entities.errors import InvalidRecordError


@dataclass(frozen=True)
class PredictionRecord:
    """Prediction for one input record, handed over to the downstream sink."""

    predicted: float
    actual: Optional[Any] = None
    model_name: Optional[str] = None
    model_version: Optional[str] = None

    @property
    def has_actual(self) -> bool:
        return self.actual is not None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"predicted": self.predicted}
        if self.has_actual:
            payload["actual"] = self.actual
        return payload


@dataclass(frozen=True)
class ScoreOutcome:
    """Result of scoring one record of a bulk run: a prediction or an error."""

    index: int
    prediction: Optional[PredictionRecord] = None
    error: Optional[InvalidRecordError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
