#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from barbershop.core.config import ADMIN_EMAIL, ADMIN_PASSWORD, DB_FILE  # noqa: E402
from barbershop.core.database import build_engine, build_session_factory, create_tables  # noqa: E402
from barbershop.services.admin_bootstrap import (  # noqa: E402
    AdminBootstrapConfig,
    BootstrapResult,
    ensure_admin_user,
)
from barbershop.services.seed import seed_services_if_empty  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cria as tabelas, o catálogo inicial e o admin.")
    parser.add_argument("--db-file", default=DB_FILE, help="Arquivo SQLite (default: DB_FILE)")
    parser.add_argument("--email", default=ADMIN_EMAIL, help="Email do admin (default: ADMIN_EMAIL)")
    parser.add_argument("--password", default=ADMIN_PASSWORD, help="Senha do admin (default: ADMIN_PASSWORD)")
    parser.add_argument("--no-seed", action="store_true", help="Não insere os serviços iniciais")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    engine = build_engine(args.db_file)
    create_tables(engine)
    db = build_session_factory(engine)()
    try:
        if not args.no_seed:
            seed_services_if_empty(db)
        result = ensure_admin_user(db, AdminBootstrapConfig(email=args.email, password=args.password))
    finally:
        db.close()
        engine.dispose()

    if result is BootstrapResult.SKIPPED:
        print("Admin não criado: informe --email e --password (ou ADMIN_EMAIL/ADMIN_PASSWORD).")
        return 1

    print(f"Admin {result.value}: email={args.email}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
