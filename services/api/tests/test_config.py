import pytest
from app.api.deps import get_query_service
from app.core.config import Settings
from app.main import app
from fastapi.testclient import TestClient
from pydantic import ValidationError


def test_defaults_do_not_expose_error_detail(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    assert Settings().is_dev is False


@pytest.mark.parametrize("env", ["dev", "Development", " local "])
def test_dev_environments(monkeypatch, env):
    monkeypatch.setenv("ENV", env)
    assert Settings().is_dev is True


@pytest.mark.parametrize(
    "name", ["RATE_LIMIT_WINDOW_SECONDS", "RATE_LIMIT_AVAILABILITY_PER_WINDOW"]
)
@pytest.mark.parametrize("value", ["0", "-5"])
def test_rate_limit_settings_must_be_positive(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


def _boom():
    raise RuntimeError("secret internals")


@pytest.mark.parametrize(("env", "has_detail"), [("production", False), ("dev", True)])
def test_unhandled_error_detail_follows_env(monkeypatch, env, has_detail):
    monkeypatch.setattr("app.api.errors.settings.env", env)
    app.dependency_overrides[get_query_service] = _boom
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            resp = c.get(
                "/api/available-homes",
                params={"startDate": "2025-07-01", "endDate": "2025-07-05"},
            )
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    body = resp.json()
    assert body["title"] == "An unexpected error occurred."
    assert ("secret internals" in (body["detail"] or "")) is has_detail
