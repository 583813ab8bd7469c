"""MongoDB role repository implementation."""

import logging
from dataclasses import replace

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection

from userdesk.domain.entities import Role
from userdesk.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _object_id(role_id: str) -> ObjectId | None:
    try:
        return ObjectId(role_id)
    except (InvalidId, TypeError):
        return None


def _to_document(role: Role) -> dict:
    return {"name": role.name, "privileges": sorted(role.privileges)}


def _to_role(doc: dict) -> Role:
    return Role(
        id=str(doc["_id"]),
        name=doc["name"],
        privileges=set(doc.get("privileges") or []),
    )


class MongoRoleRepository:
    """Role repository over the ``roles`` collection."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection

    async def ensure_indexes(self) -> None:
        """Create the unique index on role name."""
        await self._collection.create_index("name", unique=True)

    async def get_by_id(self, role_id: str) -> Role | None:
        """Get role by id. Malformed ids never match."""
        oid = _object_id(role_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid})
        return _to_role(doc) if doc else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        doc = await self._collection.find_one({"name": name})
        return _to_role(doc) if doc else None

    async def list_all(self) -> list[Role]:
        """List all roles."""
        docs = await self._collection.find({}).to_list(length=None)
        return [_to_role(d) for d in docs]

    async def save(self, role: Role) -> Role:
        """Insert a new role or replace an existing one."""
        doc = _to_document(role)
        if role.id is None:
            result = await self._collection.insert_one(doc)
            logger.debug("Inserted role %s (%s)", role.name, result.inserted_id)
            return replace(role, id=str(result.inserted_id))

        oid = _object_id(role.id)
        if oid is None:
            raise ValidationError(f"Invalid role id '{role.id}'")
        await self._collection.replace_one({"_id": oid}, doc, upsert=True)
        logger.debug("Replaced role %s (%s)", role.name, role.id)
        return role

    async def delete_by_id(self, role_id: str) -> bool:
        """Delete role by id. Returns False when nothing matched."""
        oid = _object_id(role_id)
        if oid is None:
            return False
        result = await self._collection.delete_one({"_id": oid})
        logger.debug("Deleted role %s (%d)", role_id, result.deleted_count)
        return result.deleted_count > 0
