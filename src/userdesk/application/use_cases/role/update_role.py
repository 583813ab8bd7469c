"""Update role use case."""

from collections.abc import Iterable

from userdesk.application.dto.role_input import RoleInput
from userdesk.application.ports import RoleRepository
from userdesk.domain.entities import Role
from userdesk.domain.exceptions import Conflict, NotFound


class UpdateRoleUseCase:
    """Replace name and privileges of an existing role."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    async def execute(
        self,
        role_id: str,
        name: str,
        privileges: Iterable[str],
    ) -> Role:
        """Replace the role. Renaming onto another role's name is a conflict."""
        data = RoleInput.parse(name, privileges)
        role = await self._roles.get_by_id(role_id)
        if not role:
            raise NotFound("Role", role_id)

        other = await self._roles.get_by_name(data.name)
        if other and other.id != role.id:
            raise Conflict(f"Role '{data.name}' already exists")

        role.name = data.name
        role.privileges = data.privileges
        return await self._roles.save(role)
