# tests/test_api.py
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from api.main import app
from services.settings import Settings


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        settings = Settings()
        settings.google_maps.api_key = "maps-key"
        app.state.settings = settings
        yield test_client


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200


def test_health_reports_credentials(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "credentials": {"google_maps": True, "screening_list": False},
    }


def test_tools_are_listed(client):
    response = client.get("/tools/")

    assert response.status_code == 200
    names = [tool["name"] for tool in response.json()]
    assert "get_researcher_profile" in names
    assert len(names) == 9


def test_tool_call_returns_result_text(client):
    with patch("services.tool_service.maps_agent.calculate_distance", new=AsyncMock(side_effect=RuntimeError("boom"))):
        response = client.post("/tools/compute_distance", json={"arguments": {"origin": "A", "destination": "B"}})

    assert response.status_code == 200
    assert response.json() == {"name": "compute_distance", "result": "Error: compute_distance failed: boom"}


def test_unknown_tool_is_404(client):
    response = client.post("/tools/launch_rockets", json={"arguments": {}})

    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown tool: launch_rockets"
