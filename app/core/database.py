"""Database engine and session management for the credential and product store."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings, settings


def _engine_kwargs(config: Settings) -> dict[str, Any]:
    """Driver-specific options: connect timeout for Postgres, thread sharing for SQLite."""
    if config.DATABASE_URL.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "connect_args": {"connect_timeout": config.DB_CONNECT_TIMEOUT_SEC},
        "pool_timeout": config.DB_POOL_TIMEOUT_SEC,
    }


def build_engine(config: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured DATABASE_URL."""
    return create_engine(
        config.DATABASE_URL,
        pool_pre_ping=True,
        echo=config.DEBUG,
        **_engine_kwargs(config),
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
