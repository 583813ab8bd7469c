"""Mailgun HTTP gateway."""

import logging

import httpx

from userdesk.domain.exceptions import DeliveryError

logger = logging.getLogger(__name__)

MAILGUN_BASE_URL = "https://api.mailgun.net"
MAILGUN_USER = "api"


def create_mailgun_client(
    api_key: str,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the shared HTTP client with Basic auth attached."""
    return httpx.AsyncClient(
        auth=httpx.BasicAuth(MAILGUN_USER, api_key),
        timeout=timeout,
        transport=transport,
    )


def _error_message(response: httpx.Response) -> str | None:
    """Gateway error message from a JSON body, if there is one."""
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


class MailgunGateway:
    """Posts form-encoded messages to the Mailgun messages endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        domain: str,
        base_url: str = MAILGUN_BASE_URL,
    ) -> None:
        self._client = client
        self._url = f"{base_url.rstrip('/')}/v3/{domain}/messages"

    @property
    def url(self) -> str:
        return self._url

    async def send(self, payload: dict[str, str]) -> None:
        """POST payload once. Non-2xx responses raise DeliveryError."""
        response = await self._client.post(self._url, data=payload)
        if not response.is_success:
            message = _error_message(response)
            logger.warning(
                "Mailgun rejected message to %s: %s %s",
                payload.get("to"),
                response.status_code,
                message or "<no message>",
            )
            raise DeliveryError(message)
        logger.info("Delivered mail to %s", payload.get("to"))

    async def close(self) -> None:
        await self._client.aclose()
