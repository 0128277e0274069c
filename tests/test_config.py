"""Unit tests for app.core.config.Settings validation (fail fast on bad config)."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from app.core.config import Settings
from tests.support import make_settings


class TestJwtSecretRequired(unittest.TestCase):
    def test_missing_secret_fails(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_blank_secret_fails(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET="   ")


class TestDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {"JWT_SECRET": "x" * 32}, clear=True):
            s = Settings(_env_file=None)
        self.assertFalse(s.BYPASS_AUTH)
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(s.JWT_ALGORITHM, "HS256")
        self.assertEqual(s.API_PREFIX, "/api")
        self.assertEqual(s.PORT, 3000)

    def test_bypass_from_env(self) -> None:
        with patch.dict(os.environ, {"JWT_SECRET": "x" * 32, "BYPASS_AUTH": "true"}, clear=True):
            self.assertTrue(Settings(_env_file=None).BYPASS_AUTH)


class TestValidators(unittest.TestCase):
    def test_database_url_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://u:p@localhost/db")

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(make_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            make_settings(API_PREFIX="api")

    def test_port_range(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(PORT=0)

    def test_expire_minutes_range(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=0)


if __name__ == "__main__":
    unittest.main()
