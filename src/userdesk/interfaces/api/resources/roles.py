"""Role API resources.

Roles are exposed by name and privileges only. The store id appears in the
``Location`` header of a created role and in the route, never in a body.
"""

import falcon.asgi

from userdesk.application.use_cases.role.create_role import CreateRoleUseCase
from userdesk.application.use_cases.role.delete_role import DeleteRoleUseCase
from userdesk.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from userdesk.application.use_cases.role.update_role import UpdateRoleUseCase
from userdesk.domain.exceptions import Conflict, NotFound, ValidationError


async def _read_body(req: falcon.asgi.Request) -> dict | None:
    try:
        body = await req.get_media()
    except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
        return None
    return body if isinstance(body, dict) else None


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(
        self,
        list_roles: ListRolesUseCase,
        create_role: CreateRoleUseCase,
    ) -> None:
        self._list = list_roles
        self._create = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles."""
        roles = await self._list.execute()
        resp.media = {"items": [r.to_public() for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role."""
        body = await _read_body(req)
        if body is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be a JSON object"}
            return

        try:
            role = await self._create.execute(body.get("name"), body.get("privileges"))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.location = f"/v1/roles/{role.id}"
        resp.media = role.to_public()
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{role_id} - single role."""

    def __init__(
        self,
        get_role: GetRoleUseCase,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self._get = get_role
        self._update = update_role
        self._delete = delete_role

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
    ) -> None:
        """Get role."""
        try:
            role = await self._get.execute(role_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
            return
        resp.media = role.to_public()
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
    ) -> None:
        """Replace role name and privileges."""
        body = await _read_body(req)
        if body is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be a JSON object"}
            return

        try:
            role = await self._update.execute(
                role_id, body.get("name"), body.get("privileges")
            )
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except Conflict as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.media = role.to_public()
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
    ) -> None:
        """Delete role."""
        try:
            await self._delete.execute(role_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Role not found"}
            return
        resp.status = falcon.HTTP_204
