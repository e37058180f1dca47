from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from user_service.main import app, create_app
from user_service.settings import Settings

from payloads import parse_timestamp, parse_uptime


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


def test_status_endpoint_returns_expected_keys(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    payload = response.json()
    assert set(payload) == {"name", "version", "status", "message", "timestamp", "uptime"}
    assert payload["name"] == "user-service"
    assert payload["status"] == "running"
    assert payload["message"] == "User service is running"
    assert all(isinstance(value, str) for value in payload.values())


def test_status_timestamp_is_rfc3339_and_current(client: TestClient) -> None:
    before = datetime.now(timezone.utc).replace(microsecond=0)
    response = client.get("/")
    after = datetime.now(timezone.utc)

    stamp = parse_timestamp(response.json()["timestamp"])
    assert before <= stamp <= after
    assert (after - stamp).total_seconds() < 2.0


def test_uptime_never_decreases(client: TestClient) -> None:
    first = parse_uptime(client.get("/").json()["uptime"])
    second = parse_uptime(client.get("/").json()["uptime"])

    assert first >= 0
    assert second >= first


def test_static_fields_are_stable_across_requests(client: TestClient) -> None:
    payloads = [client.get("/").json() for _ in range(5)]

    static = {(p["name"], p["version"], p["status"], p["message"]) for p in payloads}
    assert len(static) == 1


@pytest.mark.parametrize("env_value", [None, ""])
def test_version_defaults_to_dev(monkeypatch: pytest.MonkeyPatch, env_value) -> None:
    if env_value is None:
        monkeypatch.delenv("VERSION", raising=False)
    else:
        monkeypatch.setenv("VERSION", env_value)

    with TestClient(create_app(Settings(_env_file=None))) as client:
        payload = client.get("/").json()

    assert payload["version"] == "dev"


def test_version_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VERSION", "1.2.3")

    with TestClient(create_app(Settings(_env_file=None))) as client:
        payload = client.get("/").json()

    assert payload["version"] == "1.2.3"


def test_unknown_path_returns_not_found(client: TestClient) -> None:
    assert client.get("/users").status_code == 404
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_wrong_method_on_root_is_rejected(client: TestClient) -> None:
    assert client.post("/").status_code == 405
