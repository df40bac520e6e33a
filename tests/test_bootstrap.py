from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from barbershop.core.database import Base
from barbershop.main import create_app
from barbershop.models import Service, User
from barbershop.services.admin_bootstrap import AdminBootstrapConfig, BootstrapResult, ensure_admin_user
from barbershop.services.passwords import verify_password
from barbershop.services.seed import DEFAULT_SERVICES, seed_services_if_empty
from tests.fixtures_data import ADMIN_EMAIL, ADMIN_PASSWORD


def _build_session():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    return TestingSessionLocal()


def test_bootstrap_creates_admin_with_hashed_password():
    db = _build_session()

    result = ensure_admin_user(db, AdminBootstrapConfig(email=ADMIN_EMAIL, password=ADMIN_PASSWORD))

    assert result is BootstrapResult.CREATED
    admin = db.query(User).filter(User.email == ADMIN_EMAIL).one()
    assert admin.role == "admin"
    assert admin.password_hash != ADMIN_PASSWORD
    assert verify_password(ADMIN_PASSWORD, admin.password_hash)
    assert admin.created_at > 0


def test_bootstrap_is_a_noop_when_email_exists():
    db = _build_session()
    config = AdminBootstrapConfig(email=ADMIN_EMAIL, password=ADMIN_PASSWORD)
    ensure_admin_user(db, config)
    original_hash = db.query(User).one().password_hash

    result = ensure_admin_user(db, AdminBootstrapConfig(email=ADMIN_EMAIL, password="outra-senha"))

    assert result is BootstrapResult.EXISTS
    assert db.query(User).count() == 1
    assert db.query(User).one().password_hash == original_hash


def test_bootstrap_skips_without_email_or_password():
    db = _build_session()

    assert ensure_admin_user(db, AdminBootstrapConfig(email="", password=ADMIN_PASSWORD)) is BootstrapResult.SKIPPED
    assert ensure_admin_user(db, AdminBootstrapConfig(email=ADMIN_EMAIL, password="")) is BootstrapResult.SKIPPED
    assert db.query(User).count() == 0


def test_bootstrap_hashes_passwords_that_look_like_bcrypt_hashes():
    db = _build_session()
    literal_password = "$2b$10$" + "a" * 53

    ensure_admin_user(db, AdminBootstrapConfig(email=ADMIN_EMAIL, password=literal_password))

    stored = db.query(User).one().password_hash
    assert stored != literal_password
    assert verify_password(literal_password, stored)


def test_admin_with_bcrypt_like_password_can_log_in(settings):
    literal_password = "$2b$10$" + "a" * 53
    app = create_app(replace(settings, admin_password=literal_password))

    with TestClient(app) as client:
        response = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": literal_password})

    assert response.status_code == 200


def test_admin_email_is_matched_as_configured_on_login(settings):
    app = create_app(replace(settings, admin_email="Dono@Barbearia.COM"))

    with TestClient(app) as client:
        exact = client.post("/auth/login", json={"email": "Dono@Barbearia.COM", "password": ADMIN_PASSWORD})
        lowered = client.post("/auth/login", json={"email": "dono@barbearia.com", "password": ADMIN_PASSWORD})

    assert exact.status_code == 200
    assert lowered.status_code == 401
    assert lowered.json() == {"error": "invalid_credentials"}


def test_seed_inserts_default_services_only_once():
    db = _build_session()

    assert seed_services_if_empty(db) == len(DEFAULT_SERVICES)
    assert seed_services_if_empty(db) == 0
    titles = [service.title for service in db.query(Service).order_by(Service.id).all()]
    assert titles == [title for title, _, _ in DEFAULT_SERVICES]


def test_restarting_the_app_keeps_one_admin_and_the_seeded_services(settings):
    with TestClient(create_app(settings)) as client:
        first = client.get("/services").json()

    with TestClient(create_app(settings)) as client:
        second = client.get("/services").json()
        session = client.app.state.session_factory()
        try:
            admin_count = session.query(User).count()
        finally:
            session.close()

    assert admin_count == 1
    assert len(second) == 3
    assert second == first
    assert [row["price_cents"] for row in second] == [4000, 3000, 7000]


def test_startup_creates_missing_data_directory(settings):
    with TestClient(create_app(settings)) as client:
        assert client.get("/health").json() == {"ok": True}

    assert Path(settings.db_file).is_file()


def test_bootstrap_script_creates_then_reports_existing_admin(tmp_path, capsys):
    from scripts.bootstrap_admin import main

    db_file = str(tmp_path / "cli.db")
    argv = ["--db-file", db_file, "--email", ADMIN_EMAIL, "--password", ADMIN_PASSWORD]

    assert main(argv) == 0
    assert main(argv) == 0
    output = capsys.readouterr().out

    assert f"Admin created: email={ADMIN_EMAIL}" in output
    assert f"Admin exists: email={ADMIN_EMAIL}" in output


def test_bootstrap_script_fails_without_credentials(tmp_path):
    from scripts.bootstrap_admin import main

    assert main(["--db-file", str(tmp_path / "cli.db"), "--email", "", "--password", ""]) == 1
