"""Health check endpoints."""

import logging

import falcon.asgi
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class HealthResource:
    """Liveness of the process and readiness of the role store."""

    def __init__(self, mongo_client: AsyncIOMotorClient) -> None:
        self._mongo_client = mongo_client

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - MongoDB answers a ping."""
        try:
            await self._mongo_client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", e)
            resp.media = {"status": "unavailable", "mongodb": str(e)}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "mongodb": "ok"}
        resp.status = falcon.HTTP_200
