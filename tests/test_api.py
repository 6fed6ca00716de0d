"""Exercise the /search endpoints with a fake profile store and a mocked agent."""

from __future__ import annotations

import json
from typing import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_profile_store
from app.main import create_app
from app.schemas.search import SearchOutcome


class Agent:
    """Scripted hospital search agent; records what it was sent."""

    def __init__(self, payload: dict) -> None:
        self.reply(200, json=payload)
        self.requests: list[dict] = []
        self.before_reply = None

    def reply(self, status_code: int, **kwargs) -> None:
        self._status_code = status_code
        self._kwargs = kwargs

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.before_reply is not None:
            self.before_reply()
        return httpx.Response(self._status_code, **self._kwargs)


@pytest.fixture
def agent(agent_payload) -> Agent:
    return Agent(agent_payload())


@pytest.fixture
def client(agent, store, make_search_client) -> Iterator[TestClient]:
    app = create_app(search_client=make_search_client(agent))
    app.dependency_overrides[get_profile_store] = lambda: store
    with TestClient(app) as c:
        yield c


def search(client: TestClient, **body) -> httpx.Response:
    payload = {"user_id": "u-1", "symptoms": "chest pain", "lat": 40.71427, "lng": -74.00597}
    payload.update(body)
    return client.post("/search", json=payload)


def test_health(client) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_search_returns_cards_and_stores_latest(client, agent) -> None:
    resp = search(client)
    assert resp.status_code == 200
    data = resp.json()

    assert data["generation"] == 1
    assert data["superseded"] is False
    assert data["error_message"] is None
    assert data["used_mock_data"] is False
    assert len(data["hospitals"]) == 6
    assert data["hospitals"][0]["tel_url"] == "tel:2125624141"
    assert data["cost_analysis"]["coverage_percentage"] == 80
    assert data["response"]["total_found"] == 6

    (sent,) = agent.requests
    assert sent["symptoms"] == "chest pain"
    assert sent["tradingPartnerServiceId"] == "62308"
    assert sent["payer"]["name"] == "CIGNA HEALTH"
    assert sent["planDateInformation"]["planEnd"].endswith("1231")

    latest = client.get("/search/u-1/latest")
    assert latest.status_code == 200
    assert latest.json() == data


def test_second_search_bumps_generation(client) -> None:
    search(client)
    assert search(client, symptoms="headache").json()["generation"] == 2


def test_missing_location(client, agent) -> None:
    data = search(client, lat=None, lng=None).json()
    assert data["error_message"] == "Unable to determine your location. Please ensure location services are enabled."
    assert data["hospitals"] == []
    assert agent.requests == []


def test_missing_eligibility(client, agent) -> None:
    data = search(client, user_id="no-elig").json()
    assert data["error_message"] == "Unable to retrieve your insurance information."
    assert agent.requests == []


def test_missing_profile(client, agent) -> None:
    data = search(client, user_id="no-profile").json()
    assert data["error_message"] == "Unable to retrieve your profile information."
    assert agent.requests == []


def test_blank_symptoms_rejected(client) -> None:
    assert search(client, symptoms="").status_code == 422


def test_expired_coverage_shows_alert_with_mock_results(client, agent) -> None:
    agent.reply(400, text="insurance validation failed: Coverage expired, plan ended 20231231")

    data = search(client).json()

    assert data["expiry_message"] == "Your insurance plan expired on 12/31/2023."
    assert data["error_message"] is None
    assert data["used_mock_data"] is True
    assert len(data["hospitals"]) == 6


def test_server_error_is_reported(client, agent) -> None:
    agent.reply(500, text="upstream timeout")

    data = search(client).json()

    assert data["error_message"] == "Error searching for hospitals: upstream timeout"
    assert data["expiry_message"] is None
    assert data["used_mock_data"] is True


def test_agent_with_no_hospitals(client, agent, agent_payload) -> None:
    agent.reply(200, json=agent_payload(symptoms="hiccups", hospitals=[], cost_analysis=None, total_found=0))

    data = search(client, symptoms="hiccups").json()

    assert data["hospitals"] == []
    assert data["cost_analysis"] is None
    assert data["error_message"] == "No hospitals found for 'hiccups'. Try a different symptom or condition."


def test_latest_without_search_is_404(client) -> None:
    assert client.get("/search/nobody/latest").status_code == 404


def test_superseded_search_keeps_newer_result(client, agent) -> None:
    sessions = client.app.state.search_sessions

    def newer_search_finishes_first() -> None:
        generation = sessions.begin("u-1")
        sessions.complete("u-1", generation, SearchOutcome(user_id="u-1", symptoms="rash", generation=generation))

    agent.before_reply = newer_search_finishes_first

    data = search(client).json()

    assert data["generation"] == 1
    assert data["superseded"] is True
    assert data["symptoms"] == "chest pain"
    assert len(data["hospitals"]) == 6

    latest = client.get("/search/u-1/latest").json()
    assert latest["generation"] == 2
    assert latest["symptoms"] == "rash"
    assert latest["superseded"] is False
