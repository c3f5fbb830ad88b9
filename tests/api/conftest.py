"""Fixtures for API tests."""

import pytest

from rolegate.interfaces.api.app import create_app


def as_user(user_id: str) -> dict[str, str]:
    """Headers the gateway would forward for user_id."""
    return {"X-User-Id": user_id}


@pytest.fixture
def app(seeded_resolver):
    """Falcon ASGI app around the seeded resolver."""
    return create_app(seeded_resolver)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
