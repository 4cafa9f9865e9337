"""
Domain Service - Evaluator

Pure functions applying a ModelSpecification to one input record.
They read nothing but their arguments and keep no state, so any number
of threads may call them with the same specification.
"""

import math
from numbers import Real
from typing import Any, Mapping

from scoring_stage.domain.entities.errors import (
    MissingFieldError,
    NonNumericValueError,
)
from scoring_stage.domain.entities.prediction import PredictionRecord
from scoring_stage.domain.entities.specification import (
    CategoricalPredictor,
    FieldType,
    ModelKind,
    ModelSpecification,
)

_TRUE_STRINGS = frozenset({"true", "t", "yes", "y", "1"})
_FALSE_STRINGS = frozenset({"false", "f", "no", "n", "0"})


def _read(record: Mapping[str, Any], name: str) -> Any:
    value = record.get(name)
    if value is None:
        raise MissingFieldError(name)
    return value


def coerce_number(name: str, value: Any, field_type: FieldType) -> float:
    """Coerce a raw input value to a finite float; booleans map to 0/1."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, Real):
        try:
            number = float(value)
        except (OverflowError, ValueError) as exc:
            raise NonNumericValueError(name, value) from exc
    elif isinstance(value, str):
        text = value.strip()
        if field_type is FieldType.BOOLEAN:
            lowered = text.lower()
            if lowered in _TRUE_STRINGS:
                return 1.0
            if lowered in _FALSE_STRINGS:
                return 0.0
        try:
            number = float(text)
        except ValueError as exc:
            raise NonNumericValueError(name, value) from exc
    else:
        raise NonNumericValueError(name, value)

    if not math.isfinite(number):
        raise NonNumericValueError(name, value)
    return number


def category_of(value: Any) -> str:
    """Render a raw input value the way categorical predictors spell it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        return value.strip()
    return str(value)


def logistic(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def linear_predictor(spec: ModelSpecification, record: Mapping[str, Any]) -> float:
    """Return intercept + sum of predictor terms, before any output transform.

    A term or running total that leaves the float range is reported as a
    NonNumericValueError on the field that produced it.
    """
    total = spec.intercept
    for predictor in spec.predictors:
        raw = _read(record, predictor.field)
        if isinstance(predictor, CategoricalPredictor):
            if category_of(raw) == predictor.value:
                total += predictor.coefficient
            continue

        value = coerce_number(
            predictor.field, raw, spec.field_type(predictor.field) or FieldType.NUMERIC
        )
        try:
            if predictor.exponent != 1:
                value = value**predictor.exponent
        except OverflowError as exc:
            raise NonNumericValueError(predictor.field, raw) from exc
        total += predictor.coefficient * value
        if not math.isfinite(total):
            raise NonNumericValueError(predictor.field, raw)
    return total


def evaluate(spec: ModelSpecification, record: Mapping[str, Any]) -> float:
    """Compute the prediction for one record.

    Raises:
        MissingFieldError: A predictor field is absent or null.
        NonNumericValueError: A numeric predictor value cannot be coerced.
    """
    total = linear_predictor(spec, record)
    if spec.kind is ModelKind.LOGISTIC:
        return logistic(total)
    return total


def score(spec: ModelSpecification, record: Mapping[str, Any]) -> PredictionRecord:
    """Evaluate a record and attach its label value, when present, as actual."""
    predicted = evaluate(spec, record)
    return PredictionRecord(
        predicted=predicted,
        actual=record.get(spec.label_field),
        model_name=spec.name,
        model_version=spec.version,
    )
