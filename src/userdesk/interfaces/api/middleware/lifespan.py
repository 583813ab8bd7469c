"""Lifespan middleware - prepares the store on startup, closes clients on shutdown."""

from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient

from userdesk.infrastructure.mail.mailgun_gateway import MailgunGateway
from userdesk.infrastructure.persistence.mongo.role_repository import MongoRoleRepository


class LifespanMiddleware:
    """Middleware that owns the Mongo client and the Mailgun HTTP client."""

    def __init__(
        self,
        mongo_client: AsyncIOMotorClient,
        role_repository: MongoRoleRepository,
        mail_gateway: MailgunGateway,
    ) -> None:
        self._mongo_client = mongo_client
        self._roles = role_repository
        self._gateway = mail_gateway

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Create indexes when ASGI server starts."""
        await self._roles.ensure_indexes()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close clients when ASGI server shuts down."""
        await self._gateway.close()
        self._mongo_client.close()
