"""MongoDB async client."""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

ROLES_COLLECTION = "roles"


def create_client(url: str) -> AsyncIOMotorClient:
    """Create Motor client.

    Motor connects lazily on the first operation, so the client can be built
    in the composition root before the event loop serves requests.
    """
    return AsyncIOMotorClient(url)


def get_roles_collection(
    client: AsyncIOMotorClient, database: str
) -> AsyncIOMotorCollection:
    return client[database][ROLES_COLLECTION]
