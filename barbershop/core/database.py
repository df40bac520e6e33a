from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def _ensure_parent_dir(db_file: str) -> None:
    if db_file == ":memory:":
        return
    Path(db_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def build_engine(db_file: str) -> Engine:
    """Abre o arquivo SQLite (criando o diretório se preciso) em modo WAL."""
    _ensure_parent_dir(db_file)
    engine = create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    logger.info("database engine ready file=%s", db_file)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(engine: Engine) -> None:
    # garante que os models estão registrados antes do create_all
    import barbershop.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    session_factory: sessionmaker = request.app.state.session_factory
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
