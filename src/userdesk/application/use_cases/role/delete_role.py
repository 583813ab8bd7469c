"""Delete role use case."""

from userdesk.application.ports import RoleRepository
from userdesk.domain.exceptions import NotFound


class DeleteRoleUseCase:
    """Delete role by store id."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    async def execute(self, role_id: str) -> None:
        if not await self._roles.delete_by_id(role_id):
            raise NotFound("Role", role_id)
