"""Domain entities."""

from userdesk.domain.entities.role import Role

__all__ = [
    "Role",
]
