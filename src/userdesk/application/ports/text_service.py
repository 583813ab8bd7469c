"""Text service port - localized strings and placeholder substitution."""

from collections.abc import Mapping
from typing import Protocol


class TextService(Protocol):
    """Port for resolving language-specific strings."""

    def has(self, language: str) -> bool: ...

    def get(self, key: str, language: str, args: Mapping[str, str]) -> str: ...

    def format(self, line: str, language: str, args: Mapping[str, str]) -> str: ...
