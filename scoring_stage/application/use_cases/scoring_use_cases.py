"""
Application Use Cases - Scoring

Use cases shared by the three adapters. Scoring is synchronous CPU work;
none of these methods suspend.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Sequence

import structlog

from scoring_stage.application.dtos.scoring_dto import (
    BatchScoreResponseDTO,
    HealthDTO,
    PredictionDTO,
    ScoreOutcomeDTO,
    SpecificationDTO,
)
from scoring_stage.application.scoring_stage import ScoringStage
from scoring_stage.domain.entities.prediction import ScoreOutcome

logger = structlog.get_logger(__name__)


class ScoreRecordUseCase:
    """Score a single record, letting record errors reach the caller."""

    def __init__(self, stage: ScoringStage) -> None:
        self._stage = stage

    def execute(self, record: Mapping[str, Any]) -> PredictionDTO:
        prediction = self._stage.score(record)
        logger.debug(
            "scoring.record_scored",
            model=prediction.model_name,
            predicted=prediction.predicted,
        )
        return PredictionDTO.from_domain(prediction)


class ScoreBatchUseCase:
    """Score a bounded collection of records, one outcome per record."""

    def __init__(self, stage: ScoringStage, max_workers: int = 1) -> None:
        self._stage = stage
        self._max_workers = max(1, max_workers)

    def run(self, records: Sequence[Mapping[str, Any]]) -> List[ScoreOutcome]:
        """Return domain outcomes in input order."""
        if self._max_workers == 1 or len(records) < 2:
            outcomes = list(self._stage.score_many(records))
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                outcomes = list(
                    pool.map(self._stage.outcome, range(len(records)), records)
                )

        failed = sum(1 for outcome in outcomes if not outcome.ok)
        logger.info(
            "scoring.batch_completed",
            model=self._stage.specification.name,
            total=len(outcomes),
            failed=failed,
            workers=self._max_workers,
        )
        return outcomes

    def execute(self, records: Sequence[Mapping[str, Any]]) -> BatchScoreResponseDTO:
        outcomes = self.run(records)
        failed = sum(1 for outcome in outcomes if not outcome.ok)
        return BatchScoreResponseDTO(
            total=len(outcomes),
            succeeded=len(outcomes) - failed,
            failed=failed,
            results=[ScoreOutcomeDTO.from_domain(outcome) for outcome in outcomes],
        )


class GetSpecificationUseCase:
    """Describe the specification the stage was built with."""

    def __init__(self, stage: ScoringStage) -> None:
        self._stage = stage

    def execute(self) -> SpecificationDTO:
        return SpecificationDTO.from_domain(self._stage.specification)


class GetHealthStatusUseCase:
    """Report liveness together with the identity of the served model."""

    def __init__(self, stage: ScoringStage) -> None:
        self._stage = stage

    def execute(self) -> HealthDTO:
        spec = self._stage.specification
        return HealthDTO(
            model_name=spec.name,
            model_version=spec.version,
            details={
                "kind": spec.kind.value,
                "predictors": len(spec.predictors),
            },
        )
