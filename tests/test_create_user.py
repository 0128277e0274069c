"""Tests for the create_user operator CLI."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from app.core.permissions import Role
from app.models import User
from app.scripts import create_user
from tests.support import DatabaseTestCase


class TestCreateUserCli(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        patcher = patch.object(create_user, "SessionLocal", self.session_factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_creates_super_admin(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            code = create_user.main(["owner@x.com", "pw", "SuperAdmin"])
        self.assertEqual(code, 0)
        self.assertIn("SuperAdmin", out.getvalue())
        user = self.db.query(User).filter(User.email == "owner@x.com").one()
        self.assertEqual(user.role, Role.SUPER_ADMIN)

    def test_default_role_is_agent(self) -> None:
        with redirect_stdout(io.StringIO()):
            create_user.main(["a@x.com", "pw"])
        user = self.db.query(User).one()
        self.assertEqual(user.role, Role.AGENT)

    def test_existing_email_returns_error_code(self) -> None:
        with redirect_stdout(io.StringIO()):
            create_user.main(["a@x.com", "pw"])
        err = io.StringIO()
        with redirect_stderr(err):
            code = create_user.main(["a@x.com", "pw"])
        self.assertEqual(code, 1)
        self.assertIn("Email already exists", err.getvalue())


if __name__ == "__main__":
    unittest.main()
