from __future__ import annotations

from dataclasses import replace

from fastapi import FastAPI
from fastapi.testclient import TestClient

from barbershop.core.rate_limiter import InMemoryRateLimiterService
from barbershop.main import create_app
from barbershop.middleware.rate_limit import ClientRateLimitMiddleware


class _FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_rate_limit_is_isolated_per_client() -> None:
    service = InMemoryRateLimiterService(limit=2, window_seconds=60)

    first_a = service.check(client_id="10.0.0.1")
    second_a = service.check(client_id="10.0.0.1")
    blocked_a = service.check(client_id="10.0.0.1")
    client_b_still_allowed = service.check(client_id="10.0.0.2")

    assert first_a.allowed is True
    assert second_a.allowed is True
    assert second_a.remaining == 0
    assert blocked_a.allowed is False
    assert blocked_a.retry_after_seconds >= 1
    assert client_b_still_allowed.allowed is True


def test_rate_limit_window_rolls_over() -> None:
    clock = _FakeClock()
    service = InMemoryRateLimiterService(limit=1, window_seconds=60, clock=clock)

    assert service.check(client_id="c").allowed is True
    clock.now += 30
    assert service.check(client_id="c").allowed is False
    clock.now += 31
    assert service.check(client_id="c").allowed is True


def test_middleware_returns_429_only_when_limit_exceeded() -> None:
    limiter = InMemoryRateLimiterService(limit=1, window_seconds=60)
    app = FastAPI()
    app.add_middleware(ClientRateLimitMiddleware, rate_limiter=limiter)

    @app.get("/health")
    def health():
        return {"ok": True}

    with TestClient(app) as client:
        ok = client.get("/health")
        blocked = client.get("/health")

    assert ok.status_code == 200
    assert ok.headers["X-RateLimit-Limit"] == "1"
    assert blocked.status_code == 429
    assert blocked.json() == {"error": "rate_limited"}
    assert int(blocked.headers["Retry-After"]) >= 1


def test_global_cap_applies_across_the_whole_api(settings) -> None:
    app = create_app(replace(settings, rate_limit_max=3))

    with TestClient(app) as client:
        statuses = [
            client.get("/health").status_code,
            client.get("/services").status_code,
            client.post("/contact", json={}).status_code,
            client.get("/team").status_code,
        ]

    assert statuses == [200, 200, 400, 429]


def test_idle_clients_are_dropped_after_a_window() -> None:
    clock = _FakeClock()
    service = InMemoryRateLimiterService(limit=5, window_seconds=60, clock=clock)

    service.check(client_id="idle")
    clock.now += 30
    service.check(client_id="active")
    clock.now += 31
    service.check(client_id="active")

    assert "idle" not in service._store
    assert "active" in service._store
