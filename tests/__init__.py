"""Test package. Settings are read at import time, so the environment is fixed here first."""

import os

os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BYPASS_AUTH"] = "false"
os.environ.setdefault("APP_ENV", "dev")
