import logging

from fastapi.testclient import TestClient

from fleet_manager_api.app.core.errors import InternalError
from fleet_manager_api.app.core.logging_config import setup_logging
from fleet_manager_api.app.main import create_app


def test_root_describes_resources(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.json()
    assert body["message"]
    assert body["version"]
    assert body["endpoints"]["vessels"] == "/api/vessels"
    assert set(body["endpoints"]) == {"vessels", "crew", "maintenance", "bookings", "inventory", "analytics"}


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"]["ok"] is True
    assert "ts" in body["data"]


def test_healthz_is_plain_text(client):
    for path in ("/healthz", "/api/healthz"):
        res = client.get(path)
        assert res.status_code == 200
        assert res.text == "ok"


def test_unknown_route(client):
    res = client.get("/no-such-thing")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Endpoint not found", "path": "/no-such-thing"}


def test_unexpected_error_is_reported_without_traceback(db):
    app = create_app(db)

    @app.get("/explode")
    async def explode():
        raise RuntimeError("disk on fire")

    res = TestClient(app, raise_server_exceptions=False).get("/explode")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error", "message": "disk on fire"}


def test_internal_error(db):
    app = create_app(db)

    @app.get("/broken")
    async def broken():
        raise InternalError("store is inconsistent")

    res = TestClient(app).get("/broken")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error", "message": "store is inconsistent"}


def test_apps_do_not_share_state(db, empty_db):
    seeded = TestClient(create_app(db))
    empty = TestClient(create_app(empty_db))
    seeded.post("/vessels", json={"name": "Extra", "type": "Catamaran", "length": 40, "capacity": 6})
    assert seeded.get("/vessels").json()["count"] == 3
    assert empty.get("/vessels").json()["count"] == 0


def test_setup_logging_creates_log_directory(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "logs" / "fleet.log"

    setup_logging("debug", str(logfile))
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert logfile.exists()
        setup_logging("error")
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers:
            handler.close()
