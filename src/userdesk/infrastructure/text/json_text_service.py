"""Text service backed by per-language JSON files."""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from jinja2 import DebugUndefined, Template, TemplateSyntaxError
from jinja2.sandbox import SandboxedEnvironment

from userdesk.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)

# Subjects and other plain-text messages
_text_env = SandboxedEnvironment(autoescape=False, undefined=DebugUndefined)
# Email body lines
_html_env = SandboxedEnvironment(autoescape=True, undefined=DebugUndefined)


@lru_cache(maxsize=1024)
def _compile(source: str, html: bool) -> Template:
    env = _html_env if html else _text_env
    try:
        return env.from_string(source)
    except TemplateSyntaxError as e:
        raise ValidationError(f"Invalid placeholder syntax in '{source}': {e.message}") from None


def _flatten(data: Mapping, prefix: str = "") -> dict[str, str]:
    """Flatten nested objects into dotted keys."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{full_key}."))
        else:
            flat[full_key] = str(value)
    return flat


def _unflatten(flat: Mapping[str, str]) -> dict:
    """Nest dotted keys again so templates can write {{ confirm.email.subject }}."""
    tree: dict = {}
    for key, value in flat.items():
        *parents, leaf = key.split(".")
        node = tree
        for part in parents:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                break
            node = child
        else:
            node.setdefault(leaf, value)
    return tree


class JsonTextService:
    """Localized strings loaded from ``<language>.json`` files.

    Messages and template lines are Jinja2 templates rendered in a sandbox
    with ``{{ name }}`` placeholders. A message sees only the arguments. A
    template line sees the arguments and every text of its language, with
    arguments taking precedence; its output is HTML-escaped. Unknown
    placeholders are left as they are.
    """

    def __init__(self, directory: str | Path, default_language: str = "en") -> None:
        self._default_language = default_language
        self._texts: dict[str, dict[str, str]] = {}
        for path in sorted(Path(directory).glob("*.json")):
            with path.open(encoding="utf-8") as f:
                self._texts[path.stem] = _flatten(json.load(f))
        logger.debug("Loaded texts for languages: %s", ", ".join(self._texts))

    @property
    def languages(self) -> list[str]:
        return sorted(self._texts)

    def has(self, language: str) -> bool:
        return language in self._texts

    def get(self, key: str, language: str, args: Mapping[str, str]) -> str:
        """Resolve key in language (or default language) and substitute args."""
        message = self._texts_for(language).get(key)
        if message is None:
            raise NotFound("Text", key)
        return _compile(message, html=False).render(dict(args))

    def format(self, line: str, language: str, args: Mapping[str, str]) -> str:
        """Render a template line from args, then texts, escaping the values."""
        texts = {
            key: self.get(key, language, args) for key in self._texts_for(language)
        }
        context = _unflatten(texts)
        context.update(args)
        return _compile(line, html=True).render(context)

    def _texts_for(self, language: str) -> dict[str, str]:
        texts = dict(self._texts.get(self._default_language, {}))
        if language != self._default_language:
            texts.update(self._texts.get(language, {}))
        return texts
