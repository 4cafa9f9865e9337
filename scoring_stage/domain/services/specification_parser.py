"""Domain service that turns a decoded specification document into an entity."""

import math
from typing import Any, Dict, List, Mapping, Optional, Tuple

from scoring_stage.domain.entities.errors import (
    MalformedSpecificationError,
    UnsupportedModelKindError,
)
from scoring_stage.domain.entities.specification import (
    CategoricalPredictor,
    DataField,
    FieldType,
    ModelKind,
    ModelSpecification,
    NumericPredictor,
    Predictor,
)
from scoring_stage.domain.services.evaluator import category_of

_KIND_ALIASES: Dict[str, ModelKind] = {
    "linear": ModelKind.LINEAR,
    "regression": ModelKind.LINEAR,
    "logistic": ModelKind.LOGISTIC,
    "logit": ModelKind.LOGISTIC,
}

_FIELD_TYPE_ALIASES: Dict[str, FieldType] = {
    "numeric": FieldType.NUMERIC,
    "double": FieldType.NUMERIC,
    "float": FieldType.NUMERIC,
    "integer": FieldType.NUMERIC,
    "int": FieldType.NUMERIC,
    "boolean": FieldType.BOOLEAN,
    "bool": FieldType.BOOLEAN,
    "categorical": FieldType.CATEGORICAL,
    "string": FieldType.CATEGORICAL,
}

_NUMERIC_TYPES = (FieldType.NUMERIC, FieldType.BOOLEAN)
_CATEGORICAL_TYPES = (FieldType.CATEGORICAL, FieldType.BOOLEAN)


def _finite_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def _resolve_kind(raw: Any, errors: List[str]) -> Optional[ModelKind]:
    if raw is None:
        errors.append("Model kind must be provided.")
        return None
    if not isinstance(raw, str) or not raw.strip():
        errors.append("Model kind must be a non-empty string.")
        return None
    kind = _KIND_ALIASES.get(raw.strip().lower())
    if kind is None:
        raise UnsupportedModelKindError(
            raw, details={"supported": sorted(_KIND_ALIASES)}
        )
    return kind


def _parse_fields(raw: Any, errors: List[str]) -> Tuple[DataField, ...]:
    if raw is None:
        errors.append("Field declarations must be provided.")
        return ()
    if not isinstance(raw, list) or not raw:
        errors.append("Field declarations must be a non-empty list.")
        return ()

    fields: List[DataField] = []
    seen = set()
    for idx, item in enumerate(raw, start=1):
        prefix = f"Field #{idx}"
        if not isinstance(item, Mapping):
            errors.append(f"{prefix} must be an object with 'name' and 'type'.")
            continue
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"{prefix} must have a non-empty name.")
            continue
        raw_type = item.get("type")
        if raw_type is None:
            errors.append(f"Field '{name}' has no declared type.")
            continue
        field_type = _FIELD_TYPE_ALIASES.get(str(raw_type).strip().lower())
        if field_type is None:
            errors.append(f"Field '{name}' has unknown type '{raw_type}'.")
            continue
        if name in seen:
            errors.append(f"Field '{name}' is declared more than once.")
            continue
        seen.add(name)
        fields.append(DataField(name=name, type=field_type))
    return tuple(fields)


def _parse_predictor(
    idx: int, item: Any, types: Dict[str, FieldType], errors: List[str]
) -> Optional[Predictor]:
    prefix = f"Predictor #{idx}"
    if not isinstance(item, Mapping):
        errors.append(f"{prefix} must be an object.")
        return None

    name = item.get("field")
    if not isinstance(name, str) or not name.strip():
        errors.append(f"{prefix} must reference a field.")
        return None
    if name not in types:
        errors.append(f"Predictor field '{name}' has no declared type.")
        return None

    coefficient = _finite_number(item.get("coefficient"))
    if coefficient is None:
        errors.append(f"Predictor '{name}' coefficient must be a finite number.")
        return None

    if "value" in item:
        if types[name] not in _CATEGORICAL_TYPES:
            errors.append(
                f"Predictor '{name}' matches a category but the field is "
                f"declared {types[name].value}."
            )
            return None
        return CategoricalPredictor(
            field=name, value=category_of(item["value"]), coefficient=coefficient
        )

    if types[name] not in _NUMERIC_TYPES:
        errors.append(
            f"Predictor '{name}' is numeric but the field is declared categorical."
        )
        return None

    exponent = item.get("exponent", 1)
    if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent < 1:
        errors.append(f"Predictor '{name}' exponent must be a positive integer.")
        return None

    return NumericPredictor(field=name, coefficient=coefficient, exponent=exponent)


def _parse_predictors(
    raw: Any, fields: Tuple[DataField, ...], errors: List[str]
) -> Tuple[Predictor, ...]:
    if raw is None:
        errors.append("Predictor table must be provided.")
        return ()

    if isinstance(raw, Mapping):
        items = [{"field": name, "coefficient": coef} for name, coef in raw.items()]
    elif isinstance(raw, list):
        items = raw
    else:
        errors.append("Predictor table must be a list or an object.")
        return ()

    if not items:
        errors.append("Predictor table must declare at least one predictor.")
        return ()

    types = {item.name: item.type for item in fields}
    predictors: List[Predictor] = []
    for idx, item in enumerate(items, start=1):
        predictor = _parse_predictor(idx, item, types, errors)
        if predictor is not None:
            predictors.append(predictor)
    return tuple(predictors)


def parse_specification(document: Any) -> ModelSpecification:
    """Build a ModelSpecification from a decoded document.

    Raises:
        UnsupportedModelKindError: If the declared kind has no evaluator.
        MalformedSpecificationError: If one or more structural rules fail.
    """

    if not isinstance(document, Mapping):
        raise MalformedSpecificationError(
            ["Specification document must be an object."]
        )

    errors: List[str] = []

    kind = _resolve_kind(document.get("kind"), errors)

    name = document.get("name", "model")
    if not isinstance(name, str) or not name.strip():
        errors.append("Model name must be a non-empty string when provided.")

    version = document.get("version", "1")
    if isinstance(version, bool) or not isinstance(version, (str, int, float)):
        errors.append("Model version must be a string or a number.")

    target = document.get("target")
    if not isinstance(target, str) or not target.strip():
        errors.append("Target field must be provided.")

    label = document.get("label")
    if label is not None and (not isinstance(label, str) or not label.strip()):
        errors.append("Label field must be a non-empty string when provided.")

    if "intercept" not in document:
        errors.append("Intercept must be provided.")
        intercept = None
    else:
        intercept = _finite_number(document["intercept"])
        if intercept is None:
            errors.append("Intercept must be a finite number.")

    fields = _parse_fields(document.get("fields"), errors)
    predictors = _parse_predictors(document.get("predictors"), fields, errors)

    if errors:
        raise MalformedSpecificationError(errors)

    return ModelSpecification(
        name=name,
        version=str(version),
        kind=kind,  # type: ignore[arg-type]
        target=target,  # type: ignore[arg-type]
        label=label,
        intercept=intercept,  # type: ignore[arg-type]
        fields=fields,
        predictors=predictors,
    )
