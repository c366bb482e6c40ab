"""
Tests for the health check, CORS handling and the environment logger.

The environment log path is redirected to a temporary directory with
``monkeypatch`` so the tests never touch the real ``logs`` directory.
"""

import json
import sys
from datetime import datetime
from pathlib import Path

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.main import app  # type: ignore
from app.services.environment_log import append_environment  # type: ignore

ORIGIN = "http://localhost:3000"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def log_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "env.log"
    monkeypatch.setenv("ENV_LOG_FILE", str(path))
    return path


def _read_records(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_cors_echoes_origin(client: TestClient) -> None:
    resp = client.get("/health", headers={"Origin": ORIGIN})
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == ORIGIN
    assert resp.headers["access-control-allow-credentials"] == "true"


@pytest.mark.parametrize(
    "path, method", [("/health", "GET"), ("/environments", "POST"), ("/api/planet/generate", "POST")]
)
def test_cors_preflight(client: TestClient, path: str, method: str) -> None:
    resp = client.options(
        path,
        headers={
            "Origin": ORIGIN,
            "Access-Control-Request-Method": method,
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == ORIGIN
    assert resp.headers["access-control-allow-credentials"] == "true"
    assert method in resp.headers["access-control-allow-methods"]
    assert resp.headers["access-control-allow-headers"]
    assert resp.headers["access-control-max-age"] == "86400"


def test_unknown_route_still_has_cors_headers(client: TestClient) -> None:
    resp = client.get("/nonexistent", headers={"Origin": ORIGIN})
    assert resp.status_code == 404
    assert resp.headers["access-control-allow-origin"] == ORIGIN


@pytest.mark.parametrize(
    "body, key, value",
    [
        ({"foo": "bar"}, "foo", "bar"),
        ({"nested": {"key": "value"}}, "nested", {"key": "value"}),
    ],
)
def test_save_environment_appends_record(
    client: TestClient, log_path: Path, body: dict, key: str, value
) -> None:
    resp = client.post("/environments", json=body)
    assert resp.status_code == 201
    assert resp.json() == {"status": "saved"}

    records = _read_records(log_path)
    assert len(records) == 1
    assert records[0]["environment"][key] == value
    timestamp = records[0]["timestamp"]
    assert timestamp.endswith("Z")
    datetime.strptime(timestamp, "%Y-%m-%dT%H:%M:%SZ")


def test_records_accumulate(client: TestClient, log_path: Path) -> None:
    for i in range(3):
        assert client.post("/environments", json={"n": i}).status_code == 201
    assert [r["environment"]["n"] for r in _read_records(log_path)] == [0, 1, 2]


def test_missing_parent_directory_is_created(
    client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "nested" / "deeper" / "env.log"
    monkeypatch.setenv("ENV_LOG_FILE", str(path))
    assert client.post("/environments", json={"a": 1}).status_code == 201
    assert path.exists()


def test_missing_content_type_is_accepted(client: TestClient, log_path: Path) -> None:
    resp = client.post("/environments", content=b"{}")
    assert resp.status_code == 201
    assert log_path.exists()


def test_json_with_charset_is_accepted(client: TestClient, log_path: Path) -> None:
    resp = client.post(
        "/environments",
        content=b'{"a": 1}',
        headers={"Content-Type": "application/json; charset=utf-8"},
    )
    assert resp.status_code == 201


def test_unsupported_content_type(client: TestClient, log_path: Path) -> None:
    resp = client.post(
        "/environments", content=b"{}", headers={"Content-Type": "text/plain"}
    )
    assert resp.status_code == 415
    assert "Content-Type must be application/json" in resp.text
    assert not log_path.exists()


@pytest.mark.parametrize(
    "content, message",
    [
        (b"", "empty request body"),
        (b"{invalid", "invalid JSON"),
        (b"[1, 2, 3]", "invalid JSON"),
        (b'"text"', "invalid JSON"),
        (b'{"a": NaN}', "invalid JSON"),
        (b'{"a": Infinity}', "invalid JSON"),
        (b'{"a": [1, -Infinity]}', "invalid JSON"),
    ],
)
def test_bad_bodies_are_rejected(
    client: TestClient, log_path: Path, content: bytes, message: str
) -> None:
    resp = client.post(
        "/environments", content=content, headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert message in resp.json()["detail"]
    assert not log_path.exists()


def test_log_directory_failure(
    client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    monkeypatch.setenv("ENV_LOG_FILE", str(blocker / "env.log"))
    resp = client.post("/environments", json={"a": 1})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "failed to prepare log directory"


def test_log_open_failure(
    client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "is_a_directory"
    target.mkdir()
    monkeypatch.setenv("ENV_LOG_FILE", str(target))
    resp = client.post("/environments", json={"a": 1})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "failed to open log"


@pytest.mark.skipif(not Path("/dev/full").exists(), reason="/dev/full is not available")
def test_log_write_failure(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """Writes that fail when flushed to disk must still report a JSON error."""
    monkeypatch.setenv("ENV_LOG_FILE", "/dev/full")
    resp = client.post("/environments", json={"a": 1})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "failed to write log"


def test_non_finite_values_are_never_logged(tmp_path: Path) -> None:
    path = tmp_path / "env.log"
    with pytest.raises(HTTPException) as excinfo:
        append_environment({"a": float("nan")}, log_path=path)
    assert excinfo.value.status_code == 400
    assert "invalid JSON" in excinfo.value.detail
    assert not path.exists()
