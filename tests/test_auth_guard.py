"""Unit tests for app.api.deps.AuthGuard: bypass, missing/malformed header, valid token."""

import unittest

from fastapi import HTTPException

from app.api.deps import AuthGuard, require_permission
from app.core.permissions import Permission, Role
from app.core.security import create_access_token
from app.schemas.auth import CurrentUser
from tests.support import make_settings


class TestAuthGuardBypass(unittest.TestCase):
    """BYPASS_AUTH short-circuits to the synthetic SuperAdmin without looking at the header."""

    def setUp(self) -> None:
        self.guard = AuthGuard(make_settings(BYPASS_AUTH=True))

    def test_no_header(self) -> None:
        user = self.guard.authenticate(None)
        self.assertEqual(user, CurrentUser(id="dev-user", role=Role.SUPER_ADMIN))

    def test_invalid_token_is_ignored(self) -> None:
        user = self.guard.authenticate("Bearer garbage")
        self.assertEqual(user.role, Role.SUPER_ADMIN)


class TestAuthGuard(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = make_settings()
        self.guard = AuthGuard(self.settings)

    def _assert_rejected(self, header: str | None, detail: str) -> None:
        with self.assertRaises(HTTPException) as ctx:
            self.guard.authenticate(header)
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.detail, detail)
        self.assertEqual(ctx.exception.headers, {"WWW-Authenticate": "Bearer"})

    def test_missing_header(self) -> None:
        self._assert_rejected(None, "Token missing")
        self._assert_rejected("", "Token missing")

    def test_scheme_without_token(self) -> None:
        self._assert_rejected("Bearer", "Invalid or expired token")

    def test_invalid_token(self) -> None:
        self._assert_rejected("Bearer abc.def.ghi", "Invalid or expired token")

    def test_valid_token_attaches_identity(self) -> None:
        token = create_access_token("user-42", Role.SUPERVISOR, config=self.settings)
        user = self.guard.authenticate(f"Bearer {token}")
        self.assertEqual(user, CurrentUser(id="user-42", role=Role.SUPERVISOR))

    def test_other_scheme_word_is_tolerated(self) -> None:
        token = create_access_token("user-42", Role.AGENT, config=self.settings)
        user = self.guard.authenticate(f"Token {token}")
        self.assertEqual(user.id, "user-42")


class TestRequirePermission(unittest.TestCase):
    def test_forbidden_role_gets_403(self) -> None:
        check = require_permission(Permission.VIEW_ADMIN_AREA)
        with self.assertRaises(HTTPException) as ctx:
            check(CurrentUser(id="u", role=Role.ADMIN))
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.detail, "Forbidden")

    def test_allowed_role_passes_through(self) -> None:
        check = require_permission(Permission.VIEW_ADMIN_AREA)
        user = CurrentUser(id="u", role=Role.SUPER_ADMIN)
        self.assertIs(check(user), user)


if __name__ == "__main__":
    unittest.main()
