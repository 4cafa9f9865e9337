from __future__ import annotations

import copy
import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

from scoring_stage.application.scoring_stage import ScoringStage
from scoring_stage.domain.entities.specification import ModelSpecification
from scoring_stage.domain.services.specification_parser import parse_specification

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


BABYWEIGHT_DOCUMENT: Dict[str, Any] = {
    "name": "babyweight",
    "version": "1",
    "kind": "linear",
    "target": "weight_pounds",
    "fields": [
        {"name": "year", "type": "numeric"},
        {"name": "plurality", "type": "numeric"},
        {"name": "mother_married", "type": "boolean"},
    ],
    "intercept": 7.5619,
    "predictors": [
        {"field": "year", "coefficient": 0.00036683},
        {"field": "plurality", "coefficient": -2.0459},
        {"field": "mother_married", "coefficient": 0.2784},
    ],
}

CHURN_DOCUMENT: Dict[str, Any] = {
    "name": "churn",
    "version": "3",
    "kind": "logistic",
    "target": "churn_probability",
    "label": "churned",
    "fields": [
        {"name": "tenure_months", "type": "numeric"},
        {"name": "support_calls", "type": "numeric"},
        {"name": "plan", "type": "categorical"},
    ],
    "intercept": -1.5,
    "predictors": [
        {"field": "tenure_months", "coefficient": -0.05},
        {"field": "support_calls", "coefficient": 0.4},
        {"field": "plan", "value": "premium", "coefficient": -0.7},
    ],
}


@pytest.fixture()
def babyweight_document() -> Dict[str, Any]:
    return copy.deepcopy(BABYWEIGHT_DOCUMENT)


@pytest.fixture()
def churn_document() -> Dict[str, Any]:
    return copy.deepcopy(CHURN_DOCUMENT)


@pytest.fixture()
def babyweight_spec(babyweight_document) -> ModelSpecification:
    return parse_specification(babyweight_document)


@pytest.fixture()
def churn_spec(churn_document) -> ModelSpecification:
    return parse_specification(churn_document)


@pytest.fixture()
def babyweight_stage(babyweight_spec) -> ScoringStage:
    return ScoringStage(babyweight_spec)


@pytest.fixture()
def babyweight_record() -> Dict[str, Any]:
    return {"year": 2000, "plurality": 1, "mother_married": True}


@pytest.fixture()
def specification_file(tmp_path, babyweight_document) -> Path:
    path = tmp_path / "specification.json"
    path.write_text(json.dumps(babyweight_document), encoding="utf-8")
    return path
