"""Get and list role use cases."""

from userdesk.application.ports import RoleRepository
from userdesk.domain.entities import Role
from userdesk.domain.exceptions import NotFound


class GetRoleUseCase:
    """Get role by store id."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    async def execute(self, role_id: str) -> Role:
        role = await self._roles.get_by_id(role_id)
        if not role:
            raise NotFound("Role", role_id)
        return role


class ListRolesUseCase:
    """List every stored role, ordered by name."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    async def execute(self) -> list[Role]:
        roles = await self._roles.list_all()
        return sorted(roles, key=lambda r: r.name)
