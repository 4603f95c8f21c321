"""Tests for the FastAPI dashboard server."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from demoday import server
from demoday.events import LiveEventType, make_event
from demoday.store import DemoDayStore


@pytest.fixture
def client(monkeypatch):
    """Create test client with a fresh mock-data store."""
    monkeypatch.setattr(server, "store", DemoDayStore.from_mock_data())
    return TestClient(server.app)


class FakeSocket:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    async def send_json(self, message):
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(message)


def test_health_endpoint(client):
    """Test health endpoint."""
    response = client.get("/health")
    data = response.json()

    assert response.status_code == 200
    assert data["status"] == "ok"
    assert "timestamp" in data


def test_gallery_lists_startups_with_heat(client):
    """Test live gallery cards."""
    response = client.get("/startups")
    cards = {c["startup"]["id"]: c for c in response.json()}

    assert response.status_code == 200
    assert len(cards) == 6
    assert cards["startup-1"]["heat"] == "hot"
    assert cards["startup-1"]["interests"] == 2
    assert cards["startup-4"]["heat"] == "warm"
    assert cards["startup-5"]["heat"] == "cool"


def test_get_startup_detail(client):
    """Test startup detail with its interested investors."""
    data = client.get("/startups/startup-2").json()

    assert data["startup"]["name"] == "GreenGrid"
    assert data["stats"]["heat"] == "hot"
    assert [i["investor_id"] for i in data["interested_investors"]] == ["investor-2"]


def test_get_startup_not_found(client):
    """Test unknown startup id."""
    response = client.get("/startups/nope")
    assert response.status_code == 404


def test_investor_matched_view(client):
    """Test matched view keeps scores of 60 and up in listing order."""
    response = client.get("/investors/investor-1/startups", params={"view": "matched"})
    results = response.json()

    assert response.status_code == 200
    assert [r["startup"]["id"] for r in results] == ["startup-1", "startup-3", "startup-6"]
    assert [r["match"]["score"] for r in results] == [100, 60, 100]
    assert results[0]["label"] == "TOP MATCH"
    assert results[0]["interest_level"] == "STRONGLY_INTERESTED"
    assert results[1]["interest_level"] is None


def test_investor_interested_view(client):
    """Test interested view only shows this investor's interests."""
    response = client.get("/investors/investor-1/startups", params={"view": "interested"})
    assert [r["startup"]["id"] for r in response.json()] == ["startup-1", "startup-6"]


def test_investor_invalid_view(client):
    """Test unknown view mode."""
    response = client.get("/investors/investor-1/startups", params={"view": "nope"})
    assert response.status_code == 400


def test_investor_summary(client):
    """Test portal header counts."""
    data = client.get("/investors/investor-1/summary").json()

    assert data["total_startups"] == 6
    assert data["matched"] == 3
    assert data["top_matches"] == 2
    assert data["interests"] == 2


def test_match_breakdown(client):
    """Test a single match explanation."""
    response = client.get("/investors/investor-1/matches/startup-3")
    data = response.json()

    assert response.status_code == 200
    assert data["score"] == 60
    assert data["compatibility"] == {"sector": 0, "stage": 30, "check_size": 30}


def test_express_interest_creates_then_updates(client):
    """Test a portal interest upserts on the startup/investor pair."""
    response = client.post(
        "/investors/investor-1/interests",
        json={"startup_id": "startup-3", "level": "WANT_TO_LEARN_MORE"},
    )
    assert response.status_code == 200
    assert response.json()["type"] == "interest"

    client.post(
        "/investors/investor-1/interests",
        json={"startup_id": "startup-3", "level": "STRONGLY_INTERESTED"},
    )

    interests = server.store.get_interests(startup_id="startup-3", investor_id="investor-1")
    assert len(interests) == 1
    assert interests[0].level.value == "STRONGLY_INTERESTED"


def test_express_interest_invalid_level(client):
    """Test invalid interest level is rejected."""
    response = client.post(
        "/investors/investor-1/interests",
        json={"startup_id": "startup-3", "level": "OBSESSED"},
    )
    assert response.status_code == 400


def test_express_interest_unknown_investor(client):
    """Test unknown investor id."""
    response = client.post(
        "/investors/nobody/interests",
        json={"startup_id": "startup-3", "level": "MAYBE_LATER"},
    )
    assert response.status_code == 404


def test_founder_dashboard(client):
    """Test founder dashboard for NeuralFlow."""
    response = client.get("/founders/startup-1/dashboard")
    data = response.json()

    assert response.status_code == 200
    stats = data["stats"]
    assert stats["total_interests"] == 2
    assert stats["strong_interests"] == 1
    assert stats["unique_investors"] == 2
    assert stats["confirmed_meetings"] == 1
    assert stats["document_views"] == 3
    assert stats["average_engagement"] == 75
    assert stats["momentum"]["rank"] == 1
    assert len(data["leaderboard"]) == 5
    assert len(data["updates"]) == 1


def test_scan_resolve_and_capture(client):
    """Test QR lookup and scan interest capture."""
    response = client.get("/scan/DEMO-MEDISYNC")
    assert response.status_code == 200
    assert response.json()["id"] == "startup-3"

    response = client.post(
        "/scan/DEMO-MEDISYNC/interest",
        json={"investor_id": "investor-1", "level": "STRONGLY_INTERESTED", "notes": "Follow up"},
    )
    assert response.status_code == 200
    assert response.json()["type"] == "scan"

    interest = server.store.get_interests(startup_id="startup-3", investor_id="investor-1")[0]
    assert interest.scanned_via_qr is True
    assert interest.notes == "Follow up"


def test_scan_unknown_code(client):
    """Test unknown QR code."""
    assert client.get("/scan/DEMO-NOPE").status_code == 404
    response = client.post(
        "/scan/DEMO-NOPE/interest",
        json={"investor_id": "investor-1", "level": "MAYBE_LATER"},
    )
    assert response.status_code == 404


def test_admin_overview(client):
    """Test command center numbers over the mock data."""
    data = client.get("/admin/overview").json()

    assert data["total_interests"] == 6
    assert data["strong_interests"] == 3
    assert data["conversion_rate"] == 50
    assert data["total_meetings"] == 2
    assert data["stuck_connections"] == 4
    assert data["average_momentum_score"] == 75


def test_admin_stuck_connections(client):
    """Test stuck connections carry startup names and elapsed hours."""
    stuck = client.get("/admin/stuck-connections").json()

    assert len(stuck) == 4
    first = stuck[0]
    assert first["interest"]["id"] == "interest-2"
    assert first["startup_name"] == "NeuralFlow AI"
    assert first["hours_without_follow_up"] >= 29


def test_admin_momentum_ranked(client):
    """Test momentum ranking endpoint."""
    ranked = client.get("/admin/momentum").json()

    assert [m["rank"] for m in ranked] == [1, 2, 3, 4, 5, 6]
    assert ranked[0]["startup_id"] == "startup-1"


def test_admin_tabs(client):
    """Test startups, investors and analytics tabs."""
    startups = client.get("/admin/startups").json()
    investors = client.get("/admin/investors").json()
    analytics = client.get("/admin/analytics").json()

    assert len(startups) == 6
    assert len(investors) == 4
    assert analytics["stats"]["total_interests"] == 6
    assert analytics["event_counts"]["profile_view"] == 2


def test_publish_broadcasts_and_updates_feed(client, monkeypatch):
    """Test interests are pushed to sockets and the feed."""
    good, bad = FakeSocket(), FakeSocket(fail=True)
    monkeypatch.setattr(server.manager, "active_connections", {good, bad})

    client.post(
        "/investors/investor-2/interests",
        json={"startup_id": "startup-6", "level": "MAYBE_LATER"},
    )

    assert good.sent[0]["type"] == "live_event"
    assert good.sent[0]["data"]["startup_id"] == "startup-6"
    assert bad not in server.manager.active_connections

    feed = client.get("/feed").json()
    assert feed[0]["investor_id"] == "investor-2"


def test_feed_rejects_negative_limit(client):
    """Test a negative feed limit is a validation error."""
    assert client.get("/feed", params={"limit": -1}).status_code == 422
    assert client.get("/feed", params={"limit": 0}).json() == []


def test_websocket_ping(client):
    """Test WebSocket keepalive."""
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text("ping")
        assert websocket.receive_text() == "pong"


class FlakySource:
    """Fails on the first call, then emits one profile view"""

    def __init__(self, event):
        self.event = event
        self.calls = 0

    def next_event(self, now=None):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("source unavailable")
        return self.event


def test_background_feed_survives_errors_and_stops_on_cancel(monkeypatch):
    """Test the feed loop logs a source error, keeps emitting and exits on cancel."""
    fresh = DemoDayStore.from_mock_data()
    monkeypatch.setattr(server, "store", fresh)
    monkeypatch.setattr(server.manager, "active_connections", set())

    event = make_event(
        LiveEventType.VIEW, fresh.get_startup("startup-2"), fresh.get_investor("investor-3")
    )
    source = FlakySource(event)
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)
        if len(sleeps) == 2:
            raise asyncio.CancelledError()

    monkeypatch.setattr(server.asyncio, "sleep", fake_sleep)

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(server.background_live_feed(source))

    assert source.calls == 2
    assert len(sleeps) == 2
    assert fresh.feed[0].id == event.id
    assert fresh.get_analytics(startup_id="startup-2")[-1].investor_id == "investor-3"


def test_lifespan_starts_and_stops_feed(monkeypatch):
    """Test the app serves requests with the live feed running."""
    monkeypatch.setattr(server, "store", DemoDayStore.from_mock_data())

    with TestClient(server.app) as live_client:
        assert live_client.get("/health").status_code == 200
