"""Application entry point and composition root."""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass

import falcon
import falcon.asgi
from motor.motor_asyncio import AsyncIOMotorClient

from userdesk import __version__
from userdesk.application.use_cases.email.send_email import SendEmailUseCase
from userdesk.application.use_cases.role.create_role import CreateRoleUseCase
from userdesk.application.use_cases.role.delete_role import DeleteRoleUseCase
from userdesk.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from userdesk.application.use_cases.role.update_role import UpdateRoleUseCase
from userdesk.config import Settings, get_settings
from userdesk.domain.exceptions import UserdeskError
from userdesk.infrastructure.mail.mailgun_gateway import (
    MailgunGateway,
    create_mailgun_client,
)
from userdesk.infrastructure.persistence.mongo.connection import (
    create_client,
    get_roles_collection,
)
from userdesk.infrastructure.persistence.mongo.role_repository import MongoRoleRepository
from userdesk.infrastructure.templates.file_template_store import FileTemplateStore
from userdesk.infrastructure.text.json_text_service import JsonTextService
from userdesk.interfaces.api.middleware.lifespan import LifespanMiddleware
from userdesk.interfaces.api.resources.health import HealthResource
from userdesk.interfaces.api.resources.roles import RoleResource, RolesResource

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@dataclass
class Services:
    """Long-lived adapters and use cases shared by every entry point."""

    mongo_client: AsyncIOMotorClient
    role_repository: MongoRoleRepository
    mail_gateway: MailgunGateway
    send_email: SendEmailUseCase


def create_services(settings: Settings) -> Services:
    """Build clients once; they are reused across requests."""
    mongo_client = create_client(settings.mongodb_url)
    role_repository = MongoRoleRepository(
        get_roles_collection(mongo_client, settings.mongodb_database)
    )
    mail_gateway = MailgunGateway(
        client=create_mailgun_client(
            api_key=settings.mailgun_api_key,
            timeout=settings.mailgun_timeout,
        ),
        domain=settings.mailgun_domain,
        base_url=settings.mailgun_base_url,
    )
    send_email = SendEmailUseCase(
        text_service=JsonTextService(settings.texts_dir, settings.default_language),
        template_store=FileTemplateStore(settings.mail_templates_dir),
        mail_gateway=mail_gateway,
        sitename=settings.email_sitename,
        sender=settings.email_sender,
        default_language=settings.default_language,
    )
    return Services(
        mongo_client=mongo_client,
        role_repository=role_repository,
        mail_gateway=mail_gateway,
        send_email=send_email,
    )


def create_userdesk_app(services: Services | None = None):
    """Composition root - build Falcon app with all dependencies."""
    services = services or create_services(get_settings())
    roles = services.role_repository

    roles_resource = RolesResource(ListRolesUseCase(roles), CreateRoleUseCase(roles))
    role_resource = RoleResource(
        GetRoleUseCase(roles),
        UpdateRoleUseCase(roles),
        DeleteRoleUseCase(roles),
    )
    health_resource = HealthResource(services.mongo_client)

    app = falcon.asgi.App(
        middleware=[
            LifespanMiddleware(
                services.mongo_client,
                services.role_repository,
                services.mail_gateway,
            ),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_id}", role_resource)

    return app


def _parse_arg(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{value}'")
    return key, val


async def _send_email(services: Services, ns: argparse.Namespace) -> None:
    try:
        await services.send_email.execute(
            ns.to_name,
            ns.to_address,
            ns.template,
            ns.language,
            dict(ns.arg),
        )
    finally:
        await services.mail_gateway.close()
        services.mongo_client.close()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="userdesk", description="Userdesk backend")
    parser.add_argument("--version", action="version", version=f"Userdesk v{__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    send = sub.add_parser("send-email", help="Send one templated email")
    send.add_argument("--to-name", required=True)
    send.add_argument("--to-address", required=True)
    send.add_argument("--template", required=True)
    send.add_argument("--language", default=None)
    send.add_argument(
        "--arg",
        type=_parse_arg,
        action="append",
        default=[],
        help="Template argument KEY=VALUE (repeatable)",
    )

    ns = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if ns.command == "serve":
        import uvicorn

        uvicorn.run(create_userdesk_app(), host=ns.host, port=ns.port)
        return 0

    try:
        asyncio.run(_send_email(create_services(settings), ns))
    except UserdeskError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(f"Sent '{ns.template}' to {ns.to_address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
