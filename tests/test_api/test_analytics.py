"""
Tests for the analytics dashboard endpoint.
"""

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.core.rate_limit import limiter
from app.dependencies import get_analytics_service
from app.main import app
from app.services.analytics_service import AnalyticsService
from app.services.clinic_data import InMemoryClinicDataSource


class UnavailableDataSource(InMemoryClinicDataSource):
    """Data source that cannot reach storage."""

    async def count_patients(self, *args, **kwargs):
        raise ConnectionError("storage offline")


@pytest.fixture
def override_analytics():
    """Point the dashboard at a given data source, without Redis."""

    def _override(source):
        app.dependency_overrides[get_analytics_service] = lambda: AnalyticsService(source)

    yield _override
    app.dependency_overrides.pop(get_analytics_service, None)


def test_dashboard_requires_auth(test_client: TestClient):
    """Test dashboard endpoint requires API key."""
    response = test_client.get("/api/v1/analytics/dashboard")

    assert response.status_code == 401


def test_dashboard_rejects_invalid_key(test_client: TestClient):
    """Test dashboard endpoint rejects a wrong API key."""
    response = test_client.get(
        "/api/v1/analytics/dashboard",
        headers={"X-API-Key": "invalid-key"}
    )

    assert response.status_code == 403


def test_dashboard_report(
    test_client: TestClient,
    api_key_headers: dict,
    override_analytics,
    sample_data_source
):
    """Test dashboard returns ranked conditions and medicines."""
    override_analytics(sample_data_source)

    response = test_client.get("/api/v1/analytics/dashboard", headers=api_key_headers)

    assert response.status_code == 200
    data = response.json()

    assert data["top_conditions"] == [
        {"name": "Headache", "count": 2},
        {"name": "Fever", "count": 1},
        {"name": "Hypertension", "count": 1},
    ]
    assert data["top_medicines"][0] == {"name": "Paracetamol", "count": 3}
    assert data["visits_analyzed"] == 3
    assert data["overview"]["total_patients"] == 5
    assert set(data["age_groups"]) == {"0-18", "19-35", "36-50", "51-65", "65+"}
    assert len(data["weekly_registrations"]) == 8


def test_dashboard_storage_failure(
    test_client: TestClient,
    api_key_headers: dict,
    override_analytics
):
    """Test storage failures surface as 503 without a partial report."""
    override_analytics(UnavailableDataSource())

    response = test_client.get("/api/v1/analytics/dashboard", headers=api_key_headers)

    assert response.status_code == 503
    assert "top_conditions" not in response.json()


class SingleEntryCache:
    """Connected cache stand-in holding one cached report."""

    is_connected = True

    def __init__(self):
        self.store = {"clinic:analytics:abc": {}}

    async def clear_pattern(self, prefix: str) -> int:
        keys = [key for key in self.store if key.startswith(f"clinic:{prefix}:")]
        for key in keys:
            del self.store[key]
        return len(keys)


def test_clear_dashboard_cache_requires_auth(test_client: TestClient):
    """Test cache invalidation requires API key."""
    response = test_client.post("/api/v1/analytics/cache/clear")

    assert response.status_code == 401


def test_clear_dashboard_cache(
    test_client: TestClient,
    api_key_headers: dict,
    sample_data_source
):
    """Test cached dashboard reports are flushed."""
    cache = SingleEntryCache()
    app.dependency_overrides[get_analytics_service] = (
        lambda: AnalyticsService(sample_data_source, cache=cache)
    )
    try:
        response = test_client.post("/api/v1/analytics/cache/clear", headers=api_key_headers)
    finally:
        app.dependency_overrides.pop(get_analytics_service, None)

    assert response.status_code == 200
    assert response.json() == {"cleared": 1}
    assert cache.store == {}


@pytest.fixture
def fresh_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


def test_dashboard_rate_limit_follows_settings(
    test_client: TestClient,
    api_key_headers: dict,
    override_analytics,
    fresh_rate_limits
):
    """Test the dashboard allows RATE_LIMIT_REQUESTS calls per window, then 429."""
    override_analytics(InMemoryClinicDataSource())
    allowed = get_settings().RATE_LIMIT_REQUESTS

    statuses = [
        test_client.get("/api/v1/analytics/dashboard", headers=api_key_headers).status_code
        for _ in range(allowed + 1)
    ]

    assert statuses[:allowed] == [200] * allowed
    assert statuses[-1] == 429
