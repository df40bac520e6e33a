import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barbershop.core.config import Settings, load_settings
from barbershop.core.database import build_engine, build_session_factory, create_tables
from barbershop.core.errors import register_exception_handlers
from barbershop.core.logging_setup import configure_logging
from barbershop.core.rate_limiter import InMemoryRateLimiterService
from barbershop.middleware.observability import ObservabilityMiddleware
from barbershop.middleware.rate_limit import ClientRateLimitMiddleware
from barbershop.middleware.security_headers import SecurityHeadersMiddleware
from barbershop.routers.admin_content import router as admin_content_router
from barbershop.routers.auth import router as auth_router
from barbershop.routers.inbox import admin_router as admin_inbox_router, router as inbox_router
from barbershop.routers.public_content import router as public_content_router
from barbershop.services.admin_bootstrap import AdminBootstrapConfig, ensure_admin_user
from barbershop.services.seed import seed_services_if_empty

logger = logging.getLogger(__name__)
STARTUP_PREFIX = "[STARTUP]"


def _startup_tasks(app: FastAPI) -> None:
    settings: Settings = app.state.settings
    engine = build_engine(settings.db_file)
    create_tables(engine)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    if not settings.jwt_secret:
        logger.warning("%s JWT_SECRET not configured; admin login will fail", STARTUP_PREFIX)

    db = app.state.session_factory()
    try:
        if settings.seed_services:
            seed_services_if_empty(db)
        ensure_admin_user(
            db,
            AdminBootstrapConfig(email=settings.admin_email, password=settings.admin_password),
        )
    except Exception:
        logger.exception("%s ERROR startup failed", STARTUP_PREFIX)
        raise
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    _startup_tasks(app)
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            engine.dispose()
            logger.info("%s database engine disposed", STARTUP_PREFIX)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="Barbearia API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    # o último middleware adicionado é o mais externo
    app.add_middleware(
        ClientRateLimitMiddleware,
        rate_limiter=InMemoryRateLimiterService(
            limit=settings.rate_limit_max,
            window_seconds=settings.rate_limit_window_seconds,
        ),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_prod)
    app.add_middleware(ObservabilityMiddleware)

    register_exception_handlers(app)

    # Routers
    app.include_router(auth_router)
    app.include_router(public_content_router)
    app.include_router(inbox_router)
    app.include_router(admin_content_router)
    app.include_router(admin_inbox_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


configure_logging()
app = create_app()
