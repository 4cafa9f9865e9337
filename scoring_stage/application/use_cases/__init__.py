"""
Use Cases Package - Application Layer

Use cases wrap the scoring stage for the request, table and message
adapters and map domain results to DTOs.
"""

from .scoring_use_cases import (
    GetHealthStatusUseCase,
    GetSpecificationUseCase,
    ScoreBatchUseCase,
    ScoreRecordUseCase,
)

__all__ = [
    "ScoreRecordUseCase",
    "ScoreBatchUseCase",
    "GetSpecificationUseCase",
    "GetHealthStatusUseCase",
]
