"""Role repository port."""

from typing import Protocol

from userdesk.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_id(self, role_id: str) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def save(self, role: Role) -> Role: ...

    async def delete_by_id(self, role_id: str) -> bool: ...
