"""Tests for request access logging and failure reporting in the application middleware."""

import logging

from fastapi.testclient import TestClient

from commu_api.main import create_application


def _flush_logs():
    for logger in (logging.getLogger(), logging.getLogger("access")):
        for handler in logger.handlers:
            handler.flush()


def test_request_writes_access_record(client, config):
    client.get("/api/v1/health")
    _flush_logs()

    lines = config.logging_config.access_log_file.read_text(encoding="utf-8").splitlines()
    health_lines = [line for line in lines if "path=/api/v1/health" in line]
    assert len(health_lines) == 1
    assert "method=GET" in health_lines[0]
    assert "status=200" in health_lines[0]
    assert "response_time=" in health_lines[0]


def test_unknown_path_is_logged_with_404(client, config):
    client.get("/api/v1/unknown")
    _flush_logs()

    access_log = config.logging_config.access_log_file.read_text(encoding="utf-8")
    assert "path=/api/v1/unknown | status=404" in access_log


def test_startup_and_shutdown_are_logged(config):
    with TestClient(create_application(config)):
        pass
    _flush_logs()

    app_log = config.logging_config.app_log_file.read_text(encoding="utf-8")
    assert "Server started at" in app_log
    assert "Server stopped at" in app_log


def test_handler_failure_is_logged_and_returns_500(config):
    application = create_application(config)

    @application.get("/api/v1/boom")
    async def boom():
        raise RuntimeError("kaboom")

    with TestClient(application, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/v1/boom")
    _flush_logs()

    assert response.status_code == 500
    access_log = config.logging_config.access_log_file.read_text(encoding="utf-8")
    assert "path=/api/v1/boom | status=500" in access_log
    assert "error=kaboom" in access_log
    error_log = config.logging_config.error_log_file.read_text(encoding="utf-8")
    assert "GET /api/v1/boom failed: kaboom" in error_log
