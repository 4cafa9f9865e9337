from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from scoring_stage.main.app import create_app


@pytest.fixture()
def client(monkeypatch, specification_file):
    monkeypatch.setenv("SCORING_SPECIFICATION_PATH", str(specification_file))
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def test_health_endpoint(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "up"
    assert body["model_name"] == "babyweight"
    assert body["details"]["kind"] == "linear"


def test_predict_from_query_string(client) -> None:
    response = client.get(
        "/predict", params={"year": 2000, "plurality": 1, "mother_married": "true"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["predicted"] == pytest.approx(6.52806, abs=1e-3)
    assert "actual" not in body


def test_predict_from_body_carries_actual(client) -> None:
    record = {"year": 2000, "plurality": 1, "mother_married": True, "weight_pounds": 7}

    response = client.post("/predict", json={"record": record})

    assert response.status_code == 200
    assert response.json()["actual"] == 7


def test_predict_rejects_bad_record(client) -> None:
    response = client.post("/predict", json={"record": {"year": 2000}})

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "code": "missing_field",
        "message": "Required field 'plurality' is missing",
        "field": "plurality",
    }


def test_predict_batch(client) -> None:
    records = [
        {"year": 2000, "plurality": 1, "mother_married": True},
        {"year": 2000, "plurality": "twins", "mother_married": True},
    ]

    response = client.post("/predict/batch", json={"records": records})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["results"][0]["status"] == "ok"
    assert "error" not in body["results"][0]
    assert body["results"][1]["error"]["code"] == "non_numeric_value"


def test_specification_endpoint(client) -> None:
    response = client.get("/specification")

    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "linear"
    assert body["intercept"] == 7.5619
    assert len(body["predictors"]) == 3


def test_startup_fails_without_specification(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SCORING_SPECIFICATION_PATH", str(tmp_path / "absent.json"))
    app = create_app()

    with pytest.raises(OSError):
        with TestClient(app):
            pass


@pytest.mark.parametrize("year", ["nan", "inf", "1e400"])
def test_predict_from_query_rejects_non_finite(client, year) -> None:
    response = client.get(
        "/predict", params={"year": year, "plurality": 1, "mother_married": "true"}
    )

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "non_numeric_value"
    assert response.json()["detail"]["field"] == "year"


def test_predict_batch_counts_non_finite_as_failed(client) -> None:
    records = [
        {"year": 2000, "plurality": 1, "mother_married": True},
        {"year": "inf", "plurality": 1, "mother_married": True},
    ]

    response = client.post("/predict/batch", json={"records": records})

    body = response.json()
    assert response.status_code == 200
    assert (body["succeeded"], body["failed"]) == (1, 1)
    assert body["results"][1]["error"]["field"] == "year"
