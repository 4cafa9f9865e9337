"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
request adapter.
"""

from .scoring_dto import (
    BatchScoreRequestDTO,
    BatchScoreResponseDTO,
    FieldDTO,
    HealthDTO,
    PredictionDTO,
    PredictorDTO,
    RecordErrorDTO,
    ScoreOutcomeDTO,
    ScoreRequestDTO,
    SpecificationDTO,
)

__all__ = [
    "ScoreRequestDTO",
    "BatchScoreRequestDTO",
    "PredictionDTO",
    "RecordErrorDTO",
    "ScoreOutcomeDTO",
    "BatchScoreResponseDTO",
    "FieldDTO",
    "PredictorDTO",
    "SpecificationDTO",
    "HealthDTO",
]
