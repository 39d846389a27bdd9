"""
API Tests

Tests for the FastAPI service using an in-memory holiday source and a
fixed clock.
"""
import json
import logging
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from workingdays import __version__
from workingdays.api.main import JSONFormatter, create_app
from workingdays.clock import COLOMBIA_CLOCK, ColombiaClock
from workingdays.config import Settings
from workingdays.exceptions import HolidaySourceError
from workingdays.holidays import HolidayOracle, StaticHolidaySource

from tests.conftest import HOLIDAYS_2025

# Thursday 10 April 2025, 10:00 in Bogota
FIXED_NOW = datetime(2025, 4, 10, 15, 0, tzinfo=timezone.utc)


class FailingSource:
    async def fetch(self):
        raise HolidaySourceError(message="Holiday source returned 502 Bad Gateway")


class ExplodingCalculator:
    """Calculator stand-in that fails with an unexpected error."""
    clock = COLOMBIA_CLOCK

    async def run(self, request):
        raise RuntimeError("unexpected")


def make_client(source=None, **settings) -> TestClient:
    app = create_app(
        settings=Settings(holiday_source="computed", **settings),
        oracle=HolidayOracle(source or StaticHolidaySource(HOLIDAYS_2025)),
        clock=ColombiaClock(now_fn=lambda: FIXED_NOW),
    )
    return TestClient(app)


@pytest.fixture
def client():
    return make_client()


# =============================================================================
# Working Days Endpoint
# =============================================================================

class TestWorkingDaysEndpoint:
    """GET /working-days."""

    def test_holy_week_scenario(self, client):
        response = client.get(
            "/working-days", params={"date": "2025-04-10T15:00:00Z", "days": "5", "hours": "4"}
        )
        assert response.status_code == 200
        assert response.json() == {"date": "2025-04-21T20:00:00Z"}

    def test_friday_evening_plus_one_hour(self, client):
        # Friday 10 January 2025, 17:00 in Bogota
        response = client.get("/working-days", params={"date": "2025-01-10T22:00:00Z", "hours": "1"})
        assert response.json() == {"date": "2025-01-13T14:00:00Z"}

    def test_saturday_plus_one_day(self, client):
        response = client.get("/working-days", params={"date": "2025-01-11T15:00:00Z", "days": "1"})
        assert response.json() == {"date": "2025-01-13T22:00:00Z"}

    def test_milliseconds_accepted(self, client):
        response = client.get("/working-days", params={"date": "2025-01-13T13:00:00.000Z", "hours": "1"})
        assert response.json() == {"date": "2025-01-13T14:00:00Z"}

    def test_defaults_to_now(self, client):
        """Without date, the injected clock's now is used."""
        response = client.get("/working-days", params={"hours": "1"})
        assert response.status_code == 200
        assert response.json() == {"date": "2025-04-10T16:00:00Z"}

    def test_empty_days_with_hours(self, client):
        response = client.get("/working-days?days=&hours=1&date=2025-01-13T13:00:00Z")
        assert response.json() == {"date": "2025-01-13T14:00:00Z"}

    def test_response_has_only_date(self, client):
        response = client.get("/working-days", params={"days": "1"})
        body = response.json()
        assert list(body.keys()) == ["date"]
        assert body["date"].endswith("Z")

    @pytest.mark.parametrize("params", [
        {},
        {"date": "2025-01-13T13:00:00Z"},
        {"days": "", "hours": ""},
        {"days": "0"},
        {"hours": "-1"},
        {"hours": "1.5"},
        {"days": "01"},
        {"days": "abc"},
        {"days": "1", "date": "2025-01-13T13:00:00"},
        {"days": "1", "date": "2025-01-13"},
        {"days": "1", "date": "2025-02-30T10:00:00Z"},
        {"hours": "1", "date": "２０２５-01-13T13:00:00Z"},
        {"days": "10001"},
        {"hours": "80001"},
        {"days": "99999999999999999999"},
        {"days": "1", "date": "9999-12-31T15:00:00Z"},
    ])
    def test_invalid_parameters(self, client, params):
        response = client.get("/working-days", params=params)
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "InvalidParameters"
        assert body["message"]
        assert set(body.keys()) == {"error", "message"}

    def test_holiday_source_failure(self):
        client = make_client(source=FailingSource())
        response = client.get("/working-days", params={"days": "1"})
        assert response.status_code == 503
        assert response.json() == {
            "error": "ServiceUnavailable",
            "message": "Holiday source returned 502 Bad Gateway",
        }

    def test_validation_runs_before_holiday_fetch(self):
        """Bad input is rejected without touching the holiday source."""
        client = make_client(source=FailingSource())
        response = client.get("/working-days", params={"days": "x"})
        assert response.status_code == 400

    def test_unexpected_error_is_503(self, client):
        client.app.state.calculator = ExplodingCalculator()
        response = client.get("/working-days", params={"days": "1"})
        assert response.status_code == 503
        assert response.json() == {"error": "ServiceUnavailable", "message": "Internal server error"}

    def test_holidays_loaded_once(self):
        source = StaticHolidaySource(HOLIDAYS_2025)
        client = make_client(source=source)
        client.get("/working-days", params={"days": "1"})
        client.get("/working-days", params={"hours": "3"})
        assert source.fetch_count == 1


# =============================================================================
# Service Endpoints
# =============================================================================

class TestServiceEndpoints:

    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Working Days API - Colombia"
        assert "/working-days" in body["endpoints"]["workingDays"]

    def test_health_before_and_after_load(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == __version__
        assert body["holidays_loaded"] is False

        client.get("/working-days", params={"days": "1"})
        assert client.get("/health").json()["holidays_loaded"] is True

    def test_request_id_header(self, client):
        response = client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 8

    def test_docs_toggle(self):
        assert make_client(docs_enabled=True).get("/docs").status_code == 200
        assert make_client(docs_enabled=False).get("/docs").status_code == 404


# =============================================================================
# Logging
# =============================================================================

class TestJSONFormatter:

    def test_formats_extra_fields(self):
        record = logging.LogRecord("workingdays", logging.INFO, __file__, 1, "GET /health 200", None, None)
        record.request_id = "abcd1234"
        record.status_code = 200

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["message"] == "GET /health 200"
        assert entry["request_id"] == "abcd1234"
        assert entry["status_code"] == 200
        assert "duration_ms" not in entry
