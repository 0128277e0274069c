"""Shared test helpers: in-memory database, settings and an API test case base."""

import unittest
from typing import Any
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import AuthGuard, get_auth_guard
from app.core.config import Settings
from app.core.database import get_db
from app.main import app
from app.models import Base

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def make_settings(**overrides: Any) -> Settings:
    """Settings independent of the process environment and any .env file."""
    values: dict[str, Any] = {"JWT_SECRET": TEST_SECRET, "DATABASE_URL": "sqlite://"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_session_factory() -> sessionmaker[Session]:
    """Fresh in-memory SQLite database with all tables; one shared connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


class FastHashMixin:
    """Use the minimum bcrypt cost so tests that hash passwords stay quick."""

    def setUp(self) -> None:
        super().setUp()  # type: ignore[misc]
        patcher = patch("app.core.security.BCRYPT_ROUNDS", 4)
        patcher.start()
        self.addCleanup(patcher.stop)  # type: ignore[attr-defined]


class DatabaseTestCase(FastHashMixin, unittest.TestCase):
    """Gives each test its own empty database session."""

    def setUp(self) -> None:
        super().setUp()
        self.session_factory = make_session_factory()
        self.db = self.session_factory()
        self.addCleanup(self.db.close)


class ApiTestCase(DatabaseTestCase):
    """TestClient against the app with get_db (and optionally the guard) overridden."""

    settings_overrides: dict[str, Any] = {}

    def setUp(self) -> None:
        super().setUp()
        self.settings = make_settings(**self.settings_overrides)

        def _get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_db
        app.dependency_overrides[get_auth_guard] = lambda: AuthGuard(self.settings)
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def register(self, email: str, password: str, role: str | None = None) -> Any:
        body: dict[str, Any] = {"email": email, "password": password}
        if role is not None:
            body["role"] = role
        return self.client.post("/api/register", json=body)

    def login(self, email: str, password: str) -> Any:
        return self.client.post("/api/login", json={"email": email, "password": password})

    def token_for(self, email: str, role: str) -> str:
        """Register (if needed) and log in; return the bearer token."""
        self.register(email, "pw-123456", role)
        response = self.login(email, "pw-123456")
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
