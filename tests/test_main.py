"""Tests for the process entry point and application wiring."""

import warnings

import uvicorn
from fastapi.testclient import TestClient

from commu_api import config as config_module
from commu_api import main as main_module
from commu_api.main import create_application


def test_main_runs_uvicorn_with_configured_listener(monkeypatch, tmp_path):
    captured = {}

    def fake_run(application, host, port):
        captured.update(application=application, host=host, port=port)

    monkeypatch.setenv("COMMU_API_HOST", "127.0.0.1")
    monkeypatch.setenv("COMMU_API_PORT", "9123")
    monkeypatch.setenv("COMMU_API_LOG_DIR", str(tmp_path))
    monkeypatch.setattr(config_module, "_app_config", None)
    monkeypatch.setattr(uvicorn, "run", fake_run)

    main_module.main()

    assert captured == {"application": main_module.app, "host": "127.0.0.1", "port": 9123}


def test_lifecycle_hooks_do_not_use_deprecated_api(config):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        with TestClient(create_application(config)) as test_client:
            test_client.get("/api/v1/health")

    assert not [warning for warning in caught if "on_event" in str(warning.message)]


def test_trailing_slash_is_not_redirected(client):
    response = client.get("/api/v1/health/", follow_redirects=False)

    assert response.status_code == 404
