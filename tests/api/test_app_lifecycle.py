"""Logging is configured at startup, not on import."""

from fastapi.testclient import TestClient

from mortgage_calc.api.app import app


class TestLoggingSetup:
    def test_configured_on_startup(self, monkeypatch):
        calls = []
        monkeypatch.setattr("mortgage_calc.api.app.configure_logging", lambda: calls.append(1))

        TestClient(app).get("/health")
        assert calls == []

        with TestClient(app) as client:
            assert calls == [1]
            assert client.get("/health").status_code == 200
