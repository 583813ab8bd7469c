"""Domain value objects."""

from userdesk.domain.value_objects.mail_request import MailRequest

__all__ = [
    "MailRequest",
]
