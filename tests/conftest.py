"""Pytest configuration and fixtures for the roster tests."""

import json
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from rosterapp.core.config import Settings
from rosterapp.deps import get_controller
from rosterapp.main import app
from rosterapp.services.roster import RosterController

API_BASE = "https://puppy.test/api"
COHORT = "TEST-COHORT"
PLAYERS_URL = f"{API_BASE}/{COHORT}/players"

NOT_JSON = object()


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> MagicMock:
    """A stand-in for requests.Response with just what the client reads."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    if body is NOT_JSON:
        resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", text or "", 0)
        resp.text = text or ""
    else:
        resp.json.return_value = body
        resp.text = text if text is not None else json.dumps(body)
    return resp


class FakeUpstream:
    """
    Deterministic in-memory Puppy Bowl API behind a mocked requests.Session.
    Individual (method, url) pairs can be overridden with a response or an
    exception via ``override``.
    """

    def __init__(self, players: Optional[List[Dict[str, Any]]] = None):
        self.players: List[Dict[str, Any]] = [dict(p) for p in players or []]
        self.calls: List[tuple] = []
        self.overrides: Dict[tuple, Any] = {}
        self.next_id = max((p["id"] for p in self.players), default=0) + 1

    def override(self, method: str, url: str, result: Any) -> None:
        self.overrides[(method, url)] = result

    def count(self, method: str, url: Optional[str] = None) -> int:
        return sum(1 for m, u, _ in self.calls if m == method and (url is None or u == url))

    def request(self, method: str, url: str, **kwargs):
        self.calls.append((method, url, kwargs))

        forced = self.overrides.get((method, url))
        if isinstance(forced, BaseException):
            raise forced
        if forced is not None:
            return forced

        tail = url[len(PLAYERS_URL):].strip("/")
        if method == "GET" and not tail:
            return make_response(200, {"success": True, "data": {"players": [dict(p) for p in self.players]}})
        if method == "GET":
            found = self._find(int(tail))
            if found is None:
                return make_response(404, {"success": False, "error": {"name": "NotFound", "message": "No player"}})
            return make_response(200, {"success": True, "data": {"player": dict(found)}})
        if method == "POST":
            row = {"id": self.next_id, "status": "bench", "cohortId": 1, **kwargs["json"]}
            row.pop("description", None)
            self.next_id += 1
            self.players.append(row)
            return make_response(200, {"success": True, "data": {"newPlayer": dict(row)}})
        if method == "DELETE":
            found = self._find(int(tail))
            if found is None:
                return make_response(404, {"success": False, "error": {"message": "No player"}})
            self.players.remove(found)
            return make_response(204, NOT_JSON)
        return make_response(405, {"success": False})

    def _find(self, player_id: int) -> Optional[Dict[str, Any]]:
        return next((p for p in self.players if p["id"] == player_id), None)


@pytest.fixture
def sample_players():
    return [
        {
            "id": 1,
            "name": "Fido",
            "breed": "Beagle",
            "status": "bench",
            "imageUrl": "https://img.test/fido.png",
            "teamId": None,
            "cohortId": 1,
        },
        {
            "id": 2,
            "name": "Rex",
            "breed": "Boxer",
            "status": "field",
            "imageUrl": "https://img.test/rex.png",
            "teamId": 7,
            "teamName": "Ruff",
            "cohortId": 1,
        },
    ]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(API_BASE=API_BASE, COHORT_NAME=COHORT, FETCH_ON_STARTUP=False, _env_file=None)


@pytest.fixture
def upstream(sample_players) -> FakeUpstream:
    return FakeUpstream(sample_players)


@pytest.fixture
def session(upstream) -> MagicMock:
    s = MagicMock(spec=requests.Session)
    s.request.side_effect = upstream.request
    return s


@pytest.fixture
def controller(session, test_settings) -> RosterController:
    return RosterController(session, test_settings)


@pytest.fixture
def client(controller):
    """TestClient wired to the fake upstream; lifespan is not run."""
    app.dependency_overrides[get_controller] = lambda: controller
    yield TestClient(app)
    app.dependency_overrides.clear()
