"""Mail gateway port - third-party transactional email API."""

from typing import Protocol


class MailGateway(Protocol):
    """Port for handing a rendered message to the delivery service."""

    async def send(self, payload: dict[str, str]) -> None: ...
