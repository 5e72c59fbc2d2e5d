# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

API_KEY = "test-key"
OTHER_KEY = "other-key"


def make_settings(tmp_path, **overrides) -> Settings:
    values = dict(
        _env_file=None,
        app_base_url="http://testserver",
        internal_file_dir=str(tmp_path / "files"),
        api_key_allowlist=f"{API_KEY}, {OTHER_KEY}",
        supabase_url="",
        supabase_service_role="",
        supabase_bucket="",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"x-api-key": API_KEY}


@pytest.fixture
def render_payload():
    """The minimal render request from the API docs"""
    return {
        "job": {
            "company": "Acme Co",
            "task": "Roof repair",
            "date": "2024-05-01",
            "location": "123 Main St",
        },
        "hazards": [
            {
                "category": "Fall",
                "specific_risk": "Edge fall",
                "recommended_controls": ["Guardrails"],
                "required_PPE": ["Harness"],
            }
        ],
    }


@pytest.fixture
def full_payload(render_payload):
    payload = dict(render_payload)
    payload["job"] = dict(
        render_payload["job"], supervisor="Dana Reyes", crew=["Sam", "Lee"]
    )
    payload["hazards"] = [
        {
            "category": "Fall",
            "specific_risk": "Edge fall from low-slope roof",
            "likelihood": "medium",
            "potential_severity": "high",
            "recommended_controls": ["Guardrails", "Warning line at 6 ft"],
            "required_PPE": ["Harness", "Hard hat"],
            "references": ["29 CFR 1926.501", "29 CFR 1926.502"],
        },
        {
            "category": "Electrical",
            "specific_risk": "Contact with overhead service drop",
            "recommended_controls": ["Maintain 10 ft clearance"],
            "required_PPE": ["Insulated gloves"],
        },
    ]
    payload["verificationChecklist"] = ["Anchors inspected", "Ladder tied off"]
    payload["notes"] = "Wind forecast above 25 mph after 2pm. Stop work if exceeded."
    return payload
