"""Role input DTO."""

from collections.abc import Iterable
from dataclasses import dataclass

from userdesk.domain.exceptions import ValidationError


@dataclass
class RoleInput:
    """Validated name and privileges for creating or replacing a role."""

    name: str
    privileges: set[str]

    @classmethod
    def parse(cls, name: object, privileges: object) -> "RoleInput":
        """Validate raw values. Duplicate privileges collapse into one."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Role name must be a non-empty string")
        if privileges is None:
            privileges = []
        if isinstance(privileges, str) or not isinstance(privileges, Iterable):
            raise ValidationError("Privileges must be a list of strings")
        result: set[str] = set()
        for p in privileges:
            if not isinstance(p, str) or not p.strip():
                raise ValidationError("Privileges must be non-empty strings")
            result.add(p.strip())
        return cls(name=name.strip(), privileges=result)
