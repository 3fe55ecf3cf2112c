"""Tests for the validation API."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from backend.app import app


@pytest.fixture
def client():
    return TestClient(app)


TEXT_BLOCK = {
    "key": "name",
    "type": "text",
    "config": {"label": "Name", "minLength": 3, "maxLength": 10},
}


class TestInfoEndpoints:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_block_types(self, client):
        data = client.get("/block-types").json()
        assert "phone" in data["field"]
        assert "divider" in data["presentational"]


class TestValidateBlock:
    def test_valid_value(self, client):
        response = client.post("/validate/block", json={"block": TEXT_BLOCK, "value": " John "})
        assert response.status_code == 200
        data = response.json()
        assert data == {"has_validator": True, "ok": True, "value": "John", "issues": []}

    def test_invalid_value(self, client):
        response = client.post("/validate/block", json={"block": TEXT_BLOCK, "value": "J"})
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert data["issues"][0]["message"] == "Must contain at least 3 character(s)"
        assert data["issues"][0]["code"] == "constraint"

    def test_allow_nullish(self, client):
        response = client.post(
            "/validate/block",
            json={"block": TEXT_BLOCK, "value": None, "allow_nullish": True},
        )
        assert response.json()["ok"] is True

    def test_presentational_block(self, client):
        response = client.post(
            "/validate/block",
            json={"block": {"key": "d", "type": "divider"}, "value": "x"},
        )
        data = response.json()
        assert data["has_validator"] is False
        assert data["ok"] is True

    def test_malformed_block(self, client):
        response = client.post(
            "/validate/block",
            json={"block": {"key": "name", "type": "text", "config": {}}, "value": "John"},
        )
        assert response.status_code == 422


class TestValidateForm:
    def test_form(self, client, sample_form):
        response = client.post(
            "/validate/form",
            json={
                "blocks": sample_form,
                "values": {"name": "Mark", "email": "mark@gmail.com", "terms": True},
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert list(data["errors"]) == ["email"]
        assert data["values"]["name"] == "Mark"
        assert data["values"]["phone"] is None

    def test_malformed_form(self, client):
        response = client.post(
            "/validate/form",
            json={"blocks": [{"key": "p", "type": "phone", "config": {"label": "P", "allowedCountries": ["XX"]}}]},
        )
        assert response.status_code == 422
