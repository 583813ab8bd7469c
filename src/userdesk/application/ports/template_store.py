"""Template store port - email template resources."""

from typing import Protocol


class TemplateStore(Protocol):
    """Port for loading email templates by identifier."""

    def load(self, template_id: str) -> list[str]: ...
