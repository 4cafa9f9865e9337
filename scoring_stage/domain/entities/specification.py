"""
Domain Entities - Model Specification

Immutable description of a regression model: declared input fields,
the calculation table and the kind of output transform. Instances are
shared read-only between every concurrent evaluation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class ModelKind(str, Enum):
    """Calculation implemented by the evaluator."""

    LINEAR = "linear"
    LOGISTIC = "logistic"


class FieldType(str, Enum):
    """Declared type of an input field."""

    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class DataField:
    """Named input field with its declared type."""

    name: str
    type: FieldType


@dataclass(frozen=True)
class NumericPredictor:
    """Linear term: coefficient * value ** exponent."""

    field: str
    coefficient: float
    exponent: int = 1


@dataclass(frozen=True)
class CategoricalPredictor:
    """Indicator term: coefficient when the input equals value, else 0."""

    field: str
    value: str
    coefficient: float


Predictor = Union[NumericPredictor, CategoricalPredictor]


@dataclass(frozen=True)
class ModelSpecification:
    """A loaded, versioned regression model."""

    name: str
    kind: ModelKind
    target: str
    intercept: float
    fields: Tuple[DataField, ...]
    predictors: Tuple[Predictor, ...]
    version: str = "1"
    label: Optional[str] = None
    _field_types: Dict[str, FieldType] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_field_types", {item.name: item.type for item in self.fields}
        )

    @property
    def label_field(self) -> str:
        """Input field carrying the actual value, defaulting to the target."""
        return self.label or self.target

    @property
    def predictor_fields(self) -> Tuple[str, ...]:
        seen: Dict[str, None] = {}
        for predictor in self.predictors:
            seen.setdefault(predictor.field, None)
        return tuple(seen)

    def field_type(self, name: str) -> Optional[FieldType]:
        return self._field_types.get(name)
