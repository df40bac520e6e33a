from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from barbershop.core.config import Settings
from barbershop.main import create_app
from tests.fixtures_data import ADMIN_EMAIL, ADMIN_PASSWORD, JWT_SECRET


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        db_file=str(tmp_path / "data" / "barbearia.db"),
        jwt_secret=JWT_SECRET,
        jwt_expire_hours=12,
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        cors_origins=["*"],
        rate_limit_max=10_000,
        rate_limit_window_seconds=60,
        seed_services=True,
        is_prod=False,
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client) -> str:
    response = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}
