"""
Application - Model Scoring Stage

One ScoringStage owns exactly one loaded ModelSpecification. Adapters
(table rows, HTTP requests, queue messages) receive the stage explicitly
and call it per record; a different specification means a new stage.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

import structlog

from scoring_stage.domain.entities.errors import InvalidRecordError
from scoring_stage.domain.entities.prediction import PredictionRecord, ScoreOutcome
from scoring_stage.domain.entities.specification import ModelSpecification
from scoring_stage.domain.services import evaluator

logger = structlog.get_logger(__name__)


class ScoringStage:
    """Stateless scorer bound to a single read-only specification."""

    __slots__ = ("_specification",)

    def __init__(self, specification: ModelSpecification):
        self._specification = specification

    @classmethod
    def from_source(cls, source: Any) -> "ScoringStage":
        """Load a specification and build a stage around it.

        Load errors propagate; there is no partially initialized stage.
        """
        from scoring_stage.infrastructure.loaders import load_specification

        return cls(load_specification(source))

    @property
    def specification(self) -> ModelSpecification:
        return self._specification

    def evaluate(self, record: Mapping[str, Any]) -> float:
        return evaluator.evaluate(self._specification, record)

    def score(self, record: Mapping[str, Any]) -> PredictionRecord:
        return evaluator.score(self._specification, record)

    def outcome(self, index: int, record: Mapping[str, Any]) -> ScoreOutcome:
        """Score one record of a bulk run, capturing record errors."""
        try:
            return ScoreOutcome(index=index, prediction=self.score(record))
        except InvalidRecordError as exc:
            logger.warning(
                "scoring.record_failed",
                index=index,
                code=exc.code,
                field=exc.field,
                model=self._specification.name,
            )
            return ScoreOutcome(index=index, error=exc)

    def score_many(
        self, records: Iterable[Mapping[str, Any]], start: int = 0
    ) -> Iterator[ScoreOutcome]:
        """Yield one outcome per record; a bad record never stops the run."""
        for index, record in enumerate(records, start=start):
            yield self.outcome(index, record)

    def __repr__(self) -> str:
        spec = self._specification
        return f"ScoringStage(name={spec.name!r}, version={spec.version!r})"
