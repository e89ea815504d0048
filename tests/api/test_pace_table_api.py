"""
Tests for the Pace Table API routes.

Tests cover:
- Distance and pace listings
- Time, format and color endpoints
- Full table assembly
- Preferences endpoints
- Error handling
"""

import pytest
from fastapi.testclient import TestClient

from pace_table.api.deps import get_preferences_service
from pace_table.config import Settings
from pace_table.main import app
from pace_table.services.preferences_service import InMemoryStore, PreferencesService

BASE = "/api/v1/pace-table"


# ============================================================================
# Test Client Setup
# ============================================================================

@pytest.fixture
def client():
    """Create a test client with an in-memory preferences store."""
    service = PreferencesService(InMemoryStore(), settings=Settings())
    app.dependency_overrides[get_preferences_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def table_request():
    return {
        "mode": "official",
        "pace_config": {"max_seconds": 420, "min_seconds": 180, "interval_seconds": 15},
        "vma": 15,
        "color_enabled": True,
    }


# ============================================================================
# Distances & Paces
# ============================================================================

class TestDistancesEndpoint:
    """Tests for GET /distances."""

    def test_official(self, client):
        response = client.get(f"{BASE}/distances")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert len(data["distances"]) == 7
        assert data["distances"][0]["min_soutien"] is not None

    def test_interval(self, client):
        data = client.get(f"{BASE}/distances", params={"mode": "interval"}).json()
        assert len(data["distances"]) == 12

    def test_intermediate_awaiting_selection(self, client):
        data = client.get(f"{BASE}/distances", params={"mode": "intermediate"}).json()
        assert data["status"] == "awaiting_selection"
        assert data["distances"] == []

    def test_intermediate_splits(self, client):
        params = {"mode": "intermediate", "race_key": "10km", "split_interval": 1000}
        data = client.get(f"{BASE}/distances", params=params).json()
        assert len(data["distances"]) == 10
        assert data["distances"][-1]["label"] == "10km"

    def test_status_matches_table(self, client, table_request):
        table_request["mode"] = "intermediate"
        table_request["selection"] = {"race_key": None, "split_interval_meters": 1000}
        table = client.post(f"{BASE}/table", json=table_request).json()
        data = client.get(f"{BASE}/distances", params={"mode": "intermediate"}).json()
        assert data["status"] == table["status"] == "awaiting_selection"

    def test_unknown_race(self, client):
        params = {"mode": "intermediate", "race_key": "ultra"}
        response = client.get(f"{BASE}/distances", params=params)
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "DISTANCE_NOT_FOUND"
        assert response.json()["error"]["details"] == {
            "catalog": "official",
            "resource_type": "Distance",
            "resource_id": "ultra",
        }

    def test_invalid_mode(self, client):
        response = client.get(f"{BASE}/distances", params={"mode": "sprint"})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        fields = [error["field"] for error in response.json()["error"]["details"]["errors"]]
        assert fields == ["query.mode"]


class TestPacesEndpoint:
    """Tests for GET /paces."""

    def test_valid_range(self, client):
        params = {"max_seconds": 420, "min_seconds": 180, "interval_seconds": 15}
        data = client.get(f"{BASE}/paces", params=params).json()
        assert data["status"] == "ready"
        assert len(data["paces"]) == 17
        assert data["paces"][0] == {"label": "7:00", "seconds": 420}

    def test_inverted_range(self, client):
        params = {"max_seconds": 180, "min_seconds": 420, "interval_seconds": 15}
        data = client.get(f"{BASE}/paces", params=params).json()
        assert data["status"] == "invalid_pace_config"
        assert data["paces"] == []


# ============================================================================
# Arithmetic
# ============================================================================

class TestArithmeticEndpoints:
    """Tests for GET /time, /format and /color."""

    def test_time(self, client):
        data = client.get(f"{BASE}/time", params={"meters": 5000, "pace_seconds": 240}).json()
        assert data["seconds"] == 1200
        assert data["formatted"] == "20:00"

    def test_time_undefined(self, client):
        data = client.get(f"{BASE}/time", params={"meters": 5000, "pace_seconds": 0}).json()
        assert data["seconds"] is None
        assert data["formatted"] == "--:--"

    def test_format(self, client):
        assert client.get(f"{BASE}/format", params={"seconds": 3661}).json()["formatted"] == "01:01:01"
        assert client.get(f"{BASE}/format").json()["formatted"] == "--:--"

    def test_color(self, client):
        params = {"pace_seconds": 270, "distance_key": "10km", "vma": 15}
        data = client.get(f"{BASE}/color", params=params).json()
        assert data["color"] is not None
        assert data["css"].startswith("rgb(")

    def test_color_training_distance(self, client):
        params = {"pace_seconds": 200, "distance_key": "400m", "vma": 15}
        data = client.get(f"{BASE}/color", params=params).json()
        assert data["color"] is None
        assert data["css"] is None

    def test_color_unknown_distance(self, client):
        params = {"pace_seconds": 200, "distance_key": "ultra", "vma": 15}
        assert client.get(f"{BASE}/color", params=params).status_code == 404

    @pytest.mark.parametrize("pace", ["nan", "inf"])
    def test_color_non_finite_pace(self, client, pace):
        params = {"pace_seconds": pace, "distance_key": "10km", "vma": 15}
        response = client.get(f"{BASE}/color", params=params)
        assert response.status_code == 200
        assert response.json()["color"] is None
        assert response.json()["css"] is None


# ============================================================================
# Table
# ============================================================================

class TestTableEndpoint:
    """Tests for POST /table."""

    def test_official_colored(self, client, table_request):
        response = client.post(f"{BASE}/table", json=table_request)
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["color_enabled"] is True
        assert data["vma_pace"] == "04:00"
        assert len(data["rows"]) == 17
        colors = [cell["color"] for row in data["rows"] for cell in row["cells"]]
        assert any(color is not None for color in colors)

    def test_awaiting_selection(self, client, table_request):
        table_request["mode"] = "intermediate"
        data = client.post(f"{BASE}/table", json=table_request).json()
        assert data["status"] == "awaiting_selection"
        assert data["message"]

    def test_unknown_race(self, client, table_request):
        table_request["mode"] = "intermediate"
        table_request["selection"] = {"race_key": "ultra"}
        assert client.post(f"{BASE}/table", json=table_request).status_code == 404

    def test_missing_pace_config(self, client):
        response = client.post(f"{BASE}/table", json={"mode": "official"})
        assert response.status_code == 422


# ============================================================================
# Preferences & health
# ============================================================================

class TestPreferencesEndpoints:
    """Tests for /api/v1/preferences."""

    def test_get_defaults(self, client):
        data = client.get("/api/v1/preferences").json()
        assert data["max_pace_seconds"] == 420
        assert data["theme"] == "light"

    def test_update(self, client):
        response = client.put("/api/v1/preferences", json={"vma": "17", "theme": "dark"})
        assert response.status_code == 200
        assert response.json()["vma"] == "17"
        assert client.get("/api/v1/preferences").json()["theme"] == "dark"

    def test_invalid_theme(self, client):
        response = client.put("/api/v1/preferences", json={"theme": "purple"})
        assert response.status_code == 422


class TestHealth:
    """Tests for root endpoints."""

    def test_root(self, client):
        data = client.get("/").json()
        assert data["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
