"""Role entity - named bundle of privileges."""

from dataclasses import dataclass, field


@dataclass
class Role:
    """Role with a set of privilege strings.

    ``id`` is assigned by the store and is None until the role is saved.
    It addresses the record only and is never part of the public
    representation.
    """

    name: str
    privileges: set[str] = field(default_factory=set)
    id: str | None = None

    def to_public(self) -> dict:
        """Serializable view without the store id."""
        return {"name": self.name, "privileges": sorted(self.privileges)}
