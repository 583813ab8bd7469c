"""Create role use case."""

from collections.abc import Iterable

from userdesk.application.dto.role_input import RoleInput
from userdesk.application.ports import RoleRepository
from userdesk.domain.entities import Role
from userdesk.domain.exceptions import Conflict


class CreateRoleUseCase:
    """Create a role with a unique name."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    async def execute(self, name: str, privileges: Iterable[str]) -> Role:
        """Validate input, reject duplicate names and persist the role."""
        data = RoleInput.parse(name, privileges)
        if await self._roles.get_by_name(data.name):
            raise Conflict(f"Role '{data.name}' already exists")
        return await self._roles.save(Role(name=data.name, privileges=data.privileges))
