import os
import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

# Cheap argon2 parameters for tests; must be set before credauth is imported.
os.environ.setdefault("AUTH_HASH_TIME_COST", "1")
os.environ.setdefault("AUTH_HASH_MEMORY_COST", "1024")
os.environ.setdefault("AUTH_HASH_PARALLELISM", "1")

import pytest
from fastapi.testclient import TestClient

from credauth.app import create_app
from credauth.auth.service import AuthService
from credauth.auth.store import CredentialStore


@pytest.fixture()
def store() -> CredentialStore:
    return CredentialStore()


@pytest.fixture()
def service(store: CredentialStore) -> AuthService:
    return AuthService(store)


@pytest.fixture()
def client(service: AuthService) -> TestClient:
    """Client over a fresh app; each test gets its own empty store."""
    return TestClient(create_app(service, expose_users=False))
