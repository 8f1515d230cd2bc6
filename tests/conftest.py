# tests/conftest.py
import os
# Make sure boto3 sees a region *before* test modules import handlers
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

import pytest

from src.handlers.config import load_settings

@pytest.fixture(autouse=True)
def _env(monkeypatch):
    # App-specific vars for all tests
    monkeypatch.setenv("WEBHOOK_SECRET", "whsec_test")
    monkeypatch.setenv("KV_TABLE_NAME", "edge-kv-staging")
    monkeypatch.delenv("KV_NAMESPACE", raising=False)
    monkeypatch.delenv("KV_GROUP", raising=False)
    # settings are cached per process; each test gets a fresh resolve
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
