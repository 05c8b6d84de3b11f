"""End-to-end tests for the /votes, /settings and page routes.

The aggregator talks to the relay routes in-process, so only the upstream
government feeds are mocked.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from vote_tracker.main import app
from vote_tracker.services.relay import relay_client


@pytest.fixture
def upstream(monkeypatch, senate_menu, house_rolls):
    """Mock both government feeds for the 118th Congress, session 2."""
    calls: list[str] = []
    responses = {
        relay_client.senate_menu_url(118, 2): lambda: httpx.Response(200, json=senate_menu),
        relay_client.house_rolls_url(2024): lambda: httpx.Response(200, text=house_rolls),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        build = responses.get(str(request.url))
        if build is None:
            return httpx.Response(404, content=b"Not Found")
        return build()

    monkeypatch.setattr(relay_client, "transport", httpx.MockTransport(handler))
    return calls


@pytest.fixture
def client(settings_file):
    """Test client with an isolated settings store."""
    return TestClient(app)


class TestGetVotes:
    """Tests for GET /votes."""

    def test_merged_votes_json(self, client, upstream):
        """Both chambers are merged newest first."""
        response = client.get("/votes")

        assert response.status_code == 200
        body = response.json()
        assert body["error"] is None
        assert body["count"] == 4
        assert [v["key"] for v in body["votes"]] == [
            "h-2024-10",
            "s-118-2-5",
            "h-2024-9",
            "s-118-2-4",
        ]
        assert body["votes"][1] == {
            "chamber": "Senate",
            "number": 5,
            "date": "2024-03-01",
            "title": "HR1: On Passage",
            "result": "Agreed to (60-40)",
            "key": "s-118-2-5",
        }

    def test_no_chamber_is_400_without_upstream_calls(self, client, upstream):
        """Turning off both chambers fails before any request."""
        response = client.get("/votes", params={"include_house": False, "include_senate": False})

        assert response.status_code == 400
        assert response.json()["votes"] == []
        assert "at least one chamber" in response.json()["error"]
        assert upstream == []

    def test_upstream_failure_is_502(self, client, upstream):
        """A missing House roll list fails the whole fetch."""
        response = client.get("/votes", params={"congress": 118, "session": 1, "include_senate": False})

        assert response.status_code == 502
        body = response.json()
        assert body["votes"] == []
        assert body["error"].startswith("House Votes failed (HTTP 404).")

    def test_query_params_override_saved_settings(self, client, upstream):
        """Query parameters take precedence over saved settings."""
        client.put("/settings", json={"congress": 118, "session": 2, "includeHouse": False, "includeSenate": True})

        response = client.get("/votes", params={"include_house": True, "include_senate": False})

        assert response.json()["settings"]["includeHouse"] is True
        assert {v["chamber"] for v in response.json()["votes"]} == {"House"}

    def test_saved_settings_used_by_default(self, client, upstream):
        """Without query parameters the saved selection applies."""
        client.put("/settings", json={"congress": 118, "session": 2, "includeHouse": False, "includeSenate": True})

        response = client.get("/votes")

        assert {v["chamber"] for v in response.json()["votes"]} == {"Senate"}
        assert all("/ROLLS.xml" not in url for url in upstream)

    def test_invalid_session_rejected(self, client, upstream):
        """Session must be 1 or 2."""
        assert client.get("/votes", params={"session": 3}).status_code == 422

    def test_htmx_request_gets_partial(self, client, upstream):
        """HTMX requests receive the rendered vote list."""
        response = client.get("/votes", headers={"HX-Request": "true"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "HR1: On Passage" in response.text
        assert "Passed (200-150)" in response.text
        assert "Mar 2, 2024, 2:00 PM" in response.text

    def test_htmx_error_partial(self, client, upstream):
        """HTMX requests receive the error message as HTML."""
        response = client.get(
            "/votes",
            params={"include_house": False, "include_senate": False},
            headers={"HX-Request": "true"},
        )

        assert response.status_code == 400
        assert "at least one chamber" in response.text


class TestSettingsRoutes:
    """Tests for GET/PUT /settings."""

    def test_defaults_when_nothing_saved(self, client):
        """GET /settings returns defaults initially."""
        assert client.get("/settings").json() == {
            "congress": 118,
            "session": 2,
            "includeHouse": True,
            "includeSenate": True,
        }

    def test_put_then_get(self, client):
        """Saved settings are returned afterwards."""
        payload = {"congress": 117, "session": 1, "includeHouse": True, "includeSenate": False}

        assert client.put("/settings", json=payload).json() == payload
        assert client.get("/settings").json() == payload

    def test_put_accepts_snake_case(self, client):
        """Snake-case field names are accepted."""
        response = client.put("/settings", json={"congress": 116, "session": 2, "include_house": False})
        assert response.json()["includeHouse"] is False

    @pytest.mark.parametrize("payload", [{"congress": 0}, {"session": 3}, {"congress": "x"}])
    def test_put_validates(self, client, payload):
        """Out-of-range values are rejected."""
        assert client.put("/settings", json=payload).status_code == 422


class TestPages:
    """Tests for the HTML page and health check."""

    def test_index_renders_form(self, client):
        """The homepage shows the settings form with saved values."""
        client.put("/settings", json={"congress": 117, "session": 1, "includeHouse": True, "includeSenate": True})

        response = client.get("/")

        assert response.status_code == 200
        assert "Congress Vote Tracker" in response.text
        assert 'value="117"' in response.text

    def test_health(self, client):
        """Health check answers healthy."""
        assert client.get("/health").json() == {"status": "healthy"}
