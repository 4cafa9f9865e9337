"""
Application DTOs - Scoring

Data Transfer Objects exchanged between the scoring use cases and the
request adapter.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from scoring_stage.domain.entities.errors import InvalidRecordError
from scoring_stage.domain.entities.prediction import PredictionRecord, ScoreOutcome
from scoring_stage.domain.entities.specification import (
    CategoricalPredictor,
    ModelSpecification,
    Predictor,
)


class ScoreRequestDTO(BaseModel):
    """A single input record to score."""

    record: Dict[str, Any] = Field(
        description="Mapping of field name to value; extra fields are ignored"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "record": {
                    "year": 2000,
                    "plurality": 1,
                    "mother_married": True,
                    "weight_pounds": 7.2,
                }
            }
        }
    }


class BatchScoreRequestDTO(BaseModel):
    """A bounded collection of input records."""

    records: List[Dict[str, Any]] = Field(
        min_length=1, description="Input records, scored independently"
    )


class PredictionDTO(BaseModel):
    """Serializable prediction record."""

    predicted: float = Field(description="Predicted value")
    actual: Optional[Any] = Field(
        default=None, description="Label value carried over from the input"
    )
    model_name: Optional[str] = None
    model_version: Optional[str] = None

    model_config = {"protected_namespaces": ()}

    @classmethod
    def from_domain(cls, prediction: PredictionRecord) -> "PredictionDTO":
        return cls(
            predicted=prediction.predicted,
            actual=prediction.actual,
            model_name=prediction.model_name,
            model_version=prediction.model_version,
        )


class RecordErrorDTO(BaseModel):
    """Why a record could not be scored."""

    code: str
    message: str
    field: str

    @classmethod
    def from_domain(cls, error: InvalidRecordError) -> "RecordErrorDTO":
        return cls(code=error.code, message=error.message, field=error.field)


class ScoreOutcomeDTO(BaseModel):
    """Per-record entry of a batch response."""

    index: int
    status: Literal["ok", "error"]
    prediction: Optional[PredictionDTO] = None
    error: Optional[RecordErrorDTO] = None

    @classmethod
    def from_domain(cls, outcome: ScoreOutcome) -> "ScoreOutcomeDTO":
        if outcome.error is not None:
            return cls(
                index=outcome.index,
                status="error",
                error=RecordErrorDTO.from_domain(outcome.error),
            )
        return cls(
            index=outcome.index,
            status="ok",
            prediction=PredictionDTO.from_domain(
                outcome.prediction  # type: ignore[arg-type]
            ),
        )


class BatchScoreResponseDTO(BaseModel):
    """Outcomes of a batch request, in input order."""

    total: int
    succeeded: int
    failed: int
    results: List[ScoreOutcomeDTO]


class FieldDTO(BaseModel):
    name: str
    type: str


class PredictorDTO(BaseModel):
    field: str
    coefficient: float
    exponent: Optional[int] = None
    value: Optional[str] = None

    @classmethod
    def from_domain(cls, predictor: Predictor) -> "PredictorDTO":
        if isinstance(predictor, CategoricalPredictor):
            return cls(
                field=predictor.field,
                coefficient=predictor.coefficient,
                value=predictor.value,
            )
        return cls(
            field=predictor.field,
            coefficient=predictor.coefficient,
            exponent=predictor.exponent,
        )


class SpecificationDTO(BaseModel):
    """Description of the loaded model specification."""

    name: str
    version: str
    kind: str
    target: str
    label: str
    intercept: float
    fields: List[FieldDTO]
    predictors: List[PredictorDTO]

    @classmethod
    def from_domain(cls, spec: ModelSpecification) -> "SpecificationDTO":
        return cls(
            name=spec.name,
            version=spec.version,
            kind=spec.kind.value,
            target=spec.target,
            label=spec.label_field,
            intercept=spec.intercept,
            fields=[FieldDTO(name=f.name, type=f.type.value) for f in spec.fields],
            predictors=[PredictorDTO.from_domain(p) for p in spec.predictors],
        )


class HealthDTO(BaseModel):
    """Liveness payload identifying the model being served."""

    status: str = "up"
    model_name: str
    model_version: str
    details: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"protected_namespaces": ()}
