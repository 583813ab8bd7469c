"""Application ports - interfaces for external adapters."""

from userdesk.application.ports.mail_gateway import MailGateway
from userdesk.application.ports.repositories import RoleRepository
from userdesk.application.ports.template_store import TemplateStore
from userdesk.application.ports.text_service import TextService

__all__ = [
    "MailGateway",
    "RoleRepository",
    "TemplateStore",
    "TextService",
]
