"""
Domain Entities Package

Model specification, prediction records and the error taxonomy.
"""

from .errors import (
    DomainError,
    InvalidRecordError,
    MalformedSpecificationError,
    MissingFieldError,
    NonNumericValueError,
    SpecificationError,
    UnsupportedModelKindError,
)
from .prediction import PredictionRecord, ScoreOutcome
from .specification import (
    CategoricalPredictor,
    DataField,
    FieldType,
    ModelKind,
    ModelSpecification,
    NumericPredictor,
    Predictor,
)

__all__ = [
    "ModelSpecification",
    "ModelKind",
    "FieldType",
    "DataField",
    "NumericPredictor",
    "CategoricalPredictor",
    "Predictor",
    "PredictionRecord",
    "ScoreOutcome",
    "DomainError",
    "SpecificationError",
    "MalformedSpecificationError",
    "UnsupportedModelKindError",
    "InvalidRecordError",
    "MissingFieldError",
    "NonNumericValueError",
]
