from app.api.errors import register_exception_handlers
from app.api.rate_limit import rate_limiter
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient


class FakeRedis:
    def __init__(self):
        self.counts: dict[str, int] = {}
        self.expiries: dict[str, int] = {}

    def incr(self, key):
        self.counts[key] = self.counts.get(key, 0) + 1
        return self.counts[key]

    def expire(self, key, seconds):
        self.expiries[key] = seconds


class BrokenRedis:
    def incr(self, key):
        raise ConnectionError("down")


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/limited", dependencies=[Depends(rate_limiter("t", limit=2, window_seconds=60))])
    def limited():
        return {"ok": True}

    return app


def test_blocks_after_limit(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: fake)

    with TestClient(_app()) as c:
        assert c.get("/limited").status_code == 200
        assert c.get("/limited").status_code == 200
        resp = c.get("/limited")

    assert resp.status_code == 429
    assert 1 <= int(resp.headers["Retry-After"]) <= 60
    assert resp.json()["title"] == "Rate limit exceeded"
    assert list(fake.expiries.values()) == [60]


def test_clients_are_counted_separately(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: fake)

    with TestClient(_app()) as c:
        for _ in range(2):
            c.get("/limited", headers={"X-Forwarded-For": "10.0.0.1"})
        resp = c.get("/limited", headers={"X-Forwarded-For": "10.0.0.2"})

    assert resp.status_code == 200


def test_fails_open_without_redis():
    with TestClient(_app()) as c:
        assert all(c.get("/limited").status_code == 200 for _ in range(5))


def test_fails_open_when_redis_errors(monkeypatch):
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: BrokenRedis())
    with TestClient(_app()) as c:
        assert all(c.get("/limited").status_code == 200 for _ in range(5))
