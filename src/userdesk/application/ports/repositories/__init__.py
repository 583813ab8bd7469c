"""Repository ports."""

from userdesk.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "RoleRepository",
]
