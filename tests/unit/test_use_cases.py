"""Unit tests for role use cases."""

import pytest

from userdesk.application.use_cases.role.create_role import CreateRoleUseCase
from userdesk.application.use_cases.role.delete_role import DeleteRoleUseCase
from userdesk.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from userdesk.application.use_cases.role.update_role import UpdateRoleUseCase
from userdesk.domain.exceptions import Conflict, NotFound, ValidationError


# --- CreateRoleUseCase ---


@pytest.mark.asyncio
async def test_create_role_success(role_repository) -> None:
    """CreateRoleUseCase persists the role with deduplicated privileges."""
    use_case = CreateRoleUseCase(role_repository)

    role = await use_case.execute(" editor ", ["read", "write", "read"])

    assert role.id is not None
    assert role.name == "editor"
    assert role.privileges == {"read", "write"}
    assert await role_repository.get_by_id(role.id) == role


@pytest.mark.asyncio
async def test_create_role_without_privileges(role_repository) -> None:
    role = await CreateRoleUseCase(role_repository).execute("guest", None)
    assert role.privileges == set()


@pytest.mark.asyncio
async def test_create_role_duplicate_name(role_repository) -> None:
    """CreateRoleUseCase raises Conflict when the name is taken."""
    role_repository.add_role("admin", {"admin"})

    with pytest.raises(Conflict, match="admin"):
        await CreateRoleUseCase(role_repository).execute("admin", ["read"])


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("name", "privileges"),
    [
        ("", ["read"]),
        (None, ["read"]),
        ("editor", "read"),
        ("editor", [""]),
        ("editor", ["read", 3]),
        ("editor", 5),
    ],
)
async def test_create_role_invalid_input(role_repository, name, privileges) -> None:
    with pytest.raises(ValidationError):
        await CreateRoleUseCase(role_repository).execute(name, privileges)


# --- GetRoleUseCase / ListRolesUseCase ---


@pytest.mark.asyncio
async def test_get_role(role_repository) -> None:
    stored = role_repository.add_role("viewer", {"read"})

    role = await GetRoleUseCase(role_repository).execute(stored.id)

    assert role.name == "viewer"
    assert role.privileges == {"read"}


@pytest.mark.asyncio
async def test_get_role_not_found(role_repository) -> None:
    with pytest.raises(NotFound, match="Role"):
        await GetRoleUseCase(role_repository).execute("missing")


@pytest.mark.asyncio
async def test_list_roles_sorted_by_name(role_repository) -> None:
    role_repository.add_role("viewer", {"read"})
    role_repository.add_role("admin", {"admin"})
    role_repository.add_role("editor", {"read", "write"})

    roles = await ListRolesUseCase(role_repository).execute()

    assert [r.name for r in roles] == ["admin", "editor", "viewer"]


# --- UpdateRoleUseCase ---


@pytest.mark.asyncio
async def test_update_role_replaces_fields(role_repository) -> None:
    stored = role_repository.add_role("editor", {"read", "write"})

    role = await UpdateRoleUseCase(role_repository).execute(
        stored.id, "author", ["read", "publish"]
    )

    assert role.id == stored.id
    loaded = await role_repository.get_by_id(stored.id)
    assert loaded.name == "author"
    assert loaded.privileges == {"read", "publish"}


@pytest.mark.asyncio
async def test_update_role_keeping_own_name(role_repository) -> None:
    stored = role_repository.add_role("editor", {"read"})

    role = await UpdateRoleUseCase(role_repository).execute(stored.id, "editor", ["write"])

    assert role.privileges == {"write"}


@pytest.mark.asyncio
async def test_update_role_name_conflict(role_repository) -> None:
    role_repository.add_role("admin", {"admin"})
    stored = role_repository.add_role("editor", {"read"})

    with pytest.raises(Conflict):
        await UpdateRoleUseCase(role_repository).execute(stored.id, "admin", ["read"])


@pytest.mark.asyncio
async def test_update_role_not_found(role_repository) -> None:
    with pytest.raises(NotFound):
        await UpdateRoleUseCase(role_repository).execute("missing", "x", [])


# --- DeleteRoleUseCase ---


@pytest.mark.asyncio
async def test_delete_role(role_repository) -> None:
    stored = role_repository.add_role("viewer", {"read"})

    await DeleteRoleUseCase(role_repository).execute(stored.id)

    assert await role_repository.get_by_id(stored.id) is None


@pytest.mark.asyncio
async def test_delete_role_not_found(role_repository) -> None:
    with pytest.raises(NotFound):
        await DeleteRoleUseCase(role_repository).execute("missing")
