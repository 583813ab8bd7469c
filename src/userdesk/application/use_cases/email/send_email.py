"""Send templated email use case."""

import logging
from collections.abc import Mapping

from userdesk.application.ports import MailGateway, TemplateStore, TextService
from userdesk.domain.exceptions import ValidationError
from userdesk.domain.value_objects import MailRequest

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class SendEmailUseCase:
    """Render a localized template and hand it to the mail gateway.

    Subject and body are resolved through the text service: the subject from
    the key derived from the template id, the body line by line from the
    template resource. The rendered message is posted once; failures are
    raised to the caller and never retried.
    """

    def __init__(
        self,
        text_service: TextService,
        template_store: TemplateStore,
        mail_gateway: MailGateway,
        sitename: str,
        sender: str,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._text = text_service
        self._templates = template_store
        self._gateway = mail_gateway
        self._from = f"{sitename} <{sender}>"
        self._default_language = default_language

    async def execute(
        self,
        recipient_name: str,
        recipient_address: str,
        template_id: str,
        language: str | None = None,
        args: Mapping[str, str] | None = None,
    ) -> None:
        """Send template_id to the recipient in the given language."""
        request = MailRequest(
            recipient_name=recipient_name,
            recipient_address=recipient_address,
            template_id=template_id,
            language=language,
            args=dict(args or {}),
        )
        await self._send(request)

    async def _send(self, request: MailRequest) -> None:
        language = self._resolve_language(request.language)
        # unknown template ids fail as invalid arguments before any text lookup
        lines = self._templates.load(request.template_id)
        subject = self._text.get(request.subject_key, language, request.args)
        body = self._render_body(lines, language, request.args)

        payload = {
            "subject": subject,
            "from": self._from,
            "to": request.recipient,
            "html": body,
        }
        logger.debug(
            "Sending template %s (%s) to %s",
            request.template_id,
            language,
            request.recipient_address,
        )
        await self._gateway.send(payload)

    def _render_body(
        self, lines: list[str], language: str, args: Mapping[str, str]
    ) -> str:
        return "\n".join(self._text.format(line, language, args) for line in lines)

    def _resolve_language(self, language: str | None) -> str:
        if language is None:
            return self._default_language
        if not self._text.has(language):
            raise ValidationError(f"'{language}' is not a valid language.")
        return language
