"""Fixtures for API tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from falcon.testing import TestClient

from userdesk.main import Services, create_userdesk_app

from tests.conftest import FakeRoleRepository


@pytest.fixture
def role_repository() -> FakeRoleRepository:
    """Role repository seeded with the default roles."""
    repo = FakeRoleRepository()
    repo.add_role("admin", {"read", "write", "admin"})
    repo.add_role("viewer", {"read"})
    return repo


@pytest.fixture
def app(role_repository):
    """Falcon ASGI app from the composition root with fake adapters."""
    mongo_client = MagicMock()
    mongo_client.admin.command = AsyncMock(return_value={"ok": 1.0})
    services = Services(
        mongo_client=mongo_client,
        role_repository=role_repository,
        mail_gateway=AsyncMock(),
        send_email=AsyncMock(),
    )
    return create_userdesk_app(services)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
