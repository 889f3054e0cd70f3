"""
Pytest configuration and shared fixtures for GymChain tests.
"""

import os
import sys
from datetime import date
from typing import Any, Callable, Dict, Iterator, List, Optional

import pytest

# Add the project root to the Python path for imports
root_path = os.path.join(os.path.dirname(__file__), "..")
if root_path not in sys.path:
    sys.path.insert(0, root_path)

from fastapi.testclient import TestClient  # noqa: E402

from gymchain_api.app.core.config import settings  # noqa: E402
from gymchain_api.app.core.db import init_db  # noqa: E402
from gymchain_api.app.core.security import (  # noqa: E402
    ALL_AUTHORITIES,
    SCOPE_READ,
    SCOPE_WRITE,
    create_access_token,
)


ADMIN_PRINCIPAL: Dict[str, Any] = {
    "sub": "tester",
    "authorities": list(ALL_AUTHORITIES),
    "scope": [SCOPE_READ, SCOPE_WRITE],
}


@pytest.fixture
def database(tmp_path, monkeypatch) -> str:
    """Point the app at a fresh, migrated SQLite file."""
    path = str(tmp_path / "gymchain-test.db")
    monkeypatch.setattr(settings, "database_url", path)
    init_db()
    return path


@pytest.fixture
def admin() -> Dict[str, Any]:
    """Claims granting every authority with both scopes."""
    return dict(ADMIN_PRINCIPAL)


@pytest.fixture
def make_headers() -> Callable[..., Dict[str, str]]:
    """Build an Authorization header for the given authorities and scopes."""

    def _make(
        authorities: Optional[List[str]] = None,
        scopes: Optional[List[str]] = None,
        **claims: Any,
    ) -> Dict[str, str]:
        payload = {
            "sub": "tester",
            "authorities": list(ALL_AUTHORITIES) if authorities is None else authorities,
            "scope": [SCOPE_READ, SCOPE_WRITE] if scopes is None else scopes,
            **claims,
        }
        return {"Authorization": f"Bearer {create_access_token(payload)}"}

    return _make


@pytest.fixture
def auth_headers(make_headers) -> Dict[str, str]:
    return make_headers()


@pytest.fixture
def client(database) -> Iterator[TestClient]:
    """A test client for a freshly built app backed by ``database``."""
    from gymchain_api.app.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def user_payload() -> Dict[str, Any]:
    return {
        "name": "Maria Souza",
        "email": "maria@gymchain.com",
        "password": "secret",
        "phone": "+55 11 91234-5678",
        "birth_date": "1990-04-12",
    }


@pytest.fixture
def workout_day() -> date:
    return date(2024, 3, 18)
