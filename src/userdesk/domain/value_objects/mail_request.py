"""Mail dispatch request."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MailRequest:
    """Transient request for one templated email, never persisted."""

    recipient_name: str
    recipient_address: str
    template_id: str
    language: str | None = None
    args: dict[str, str] = field(default_factory=dict)

    @property
    def recipient(self) -> str:
        return f"{self.recipient_name} <{self.recipient_address}>"

    @property
    def subject_key(self) -> str:
        """Text key of the subject line, e.g. confirm_email -> confirm.email.subject."""
        return self.template_id.replace("_", ".") + ".subject"
