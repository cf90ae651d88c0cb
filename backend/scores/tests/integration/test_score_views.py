from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

from scores.server.app import create_app
from scores.server.settings import ScoreServerSettings
from shared.league import Player
from shared.league.mock import StubPlayerStore


def _client(store: StubPlayerStore) -> TestClient:
    return TestClient(create_app(settings=ScoreServerSettings(), player_store=store))


class TestGetPlayerScore:
    @pytest.fixture
    def client(self):
        return _client(StubPlayerStore({"Pepper": 20, "Floyd": 10}))

    def test_returns_peppers_score(self, client):
        response = client.get("/players/Pepper")

        assert response.status_code == 200
        assert response.text == "20"
        assert response.headers["content-type"].startswith("text/plain")

    def test_returns_floyds_score(self, client):
        response = client.get("/players/Floyd")

        assert response.status_code == 200
        assert response.text == "10"

    def test_returns_404_on_missing_player(self, client):
        response = client.get("/players/Apollo")

        assert response.status_code == 404


class TestRecordWin:
    def test_records_win_on_post(self):
        store = StubPlayerStore()
        client = _client(store)

        response = client.post("/players/Pepper")

        assert response.status_code == 202
        assert store.win_calls == ["Pepper"]

    def test_returns_500_when_store_fails(self):
        store = StubPlayerStore()
        client = _client(store)

        with patch.object(store, "record_win", side_effect=OSError("disk full")):
            response = client.post("/players/Pepper")

        assert response.status_code == 500
        assert response.text == "Failed to record win"

    def test_other_methods_not_allowed(self):
        response = _client(StubPlayerStore()).delete("/players/Pepper")

        assert response.status_code == 405


class TestLeague:
    def test_returns_league_table_as_json(self):
        wanted = [
            Player(name="Cleo", wins=32),
            Player(name="Chris", wins=20),
            Player(name="Tiest", wins=14),
        ]
        client = _client(StubPlayerStore(league=wanted))

        response = client.get("/league")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == [
            {"Name": "Cleo", "Wins": 32},
            {"Name": "Chris", "Wins": 20},
            {"Name": "Tiest", "Wins": 14},
        ]

    def test_empty_league_is_empty_array(self):
        response = _client(StubPlayerStore()).get("/league")

        assert response.status_code == 200
        assert response.json() == []


class TestHealth:
    def test_health_ok(self):
        response = _client(StubPlayerStore()).get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
