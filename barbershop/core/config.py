from __future__ import annotations

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Carrega o .env da raiz do projeto
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}

DB_FILE = os.getenv("DB_FILE", "./data/barbearia.db")
PORT = int(os.getenv("PORT", "8080"))
ENV = os.getenv("ENV", "dev")
ENV_NORMALIZED = ENV.strip().lower()
IS_PROD = ENV_NORMALIZED in {"prod", "production"}
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Auth (JWT)
JWT_SECRET = os.getenv("JWT_SECRET", "")
JWT_ALGORITHM = "HS256"
JWT_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "12"))

# Admin bootstrap
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "").strip()
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")

# CORS
_cors_env = os.getenv("CLIENT_ORIGIN", "")
CORS_ORIGINS = [origin.strip() for origin in _cors_env.split(",") if origin.strip()] or ["*"]

# Rate limit global (por cliente)
RATE_LIMIT_MAX = int(os.getenv("RATE_LIMIT_MAX", "100"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

SEED_SERVICES = os.getenv("SEED_SERVICES", "1").strip().lower() in _TRUTHY


@dataclass
class Settings:
    db_file: str = DB_FILE
    jwt_secret: str = JWT_SECRET
    jwt_expire_hours: int = JWT_EXPIRE_HOURS
    admin_email: str = ADMIN_EMAIL
    admin_password: str = ADMIN_PASSWORD
    cors_origins: list[str] = field(default_factory=lambda: list(CORS_ORIGINS))
    rate_limit_max: int = RATE_LIMIT_MAX
    rate_limit_window_seconds: int = RATE_LIMIT_WINDOW_SECONDS
    seed_services: bool = SEED_SERVICES
    is_prod: bool = IS_PROD


def load_settings() -> Settings:
    return Settings()
