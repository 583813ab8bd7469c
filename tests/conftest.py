"""Pytest fixtures for Userdesk tests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from uuid import uuid4

import httpx
import pytest

from userdesk.domain.entities import Role
from userdesk.domain.exceptions import NotFound, ValidationError


# --- Fake adapters ---


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Role] = {}
        self.indexes_ensured = False

    async def ensure_indexes(self) -> None:
        self.indexes_ensured = True

    async def get_by_id(self, role_id: str) -> Role | None:
        role = self._by_id.get(role_id)
        return replace(role, privileges=set(role.privileges)) if role else None

    async def get_by_name(self, name: str) -> Role | None:
        for role in self._by_id.values():
            if role.name == name:
                return replace(role, privileges=set(role.privileges))
        return None

    async def list_all(self) -> list[Role]:
        return [replace(r, privileges=set(r.privileges)) for r in self._by_id.values()]

    async def save(self, role: Role) -> Role:
        if role.id is None:
            role = replace(role, id=uuid4().hex)
        self._by_id[role.id] = replace(role, privileges=set(role.privileges))
        return role

    async def delete_by_id(self, role_id: str) -> bool:
        return self._by_id.pop(role_id, None) is not None

    def add_role(self, name: str, privileges: set[str]) -> Role:
        """Helper to add role for tests."""
        role = Role(id=uuid4().hex, name=name, privileges=set(privileges))
        self._by_id[role.id] = role
        return role


class FakeTextService:
    """Text service over a dict of language -> key -> message.

    Records the language of every lookup so tests can assert on it.
    """

    def __init__(self, texts: dict[str, dict[str, str]]) -> None:
        self._texts = texts
        self.languages_used: list[str] = []

    def has(self, language: str) -> bool:
        return language in self._texts

    def get(self, key: str, language: str, args: Mapping[str, str]) -> str:
        self.languages_used.append(language)
        try:
            message = self._texts[language][key]
        except KeyError:
            raise NotFound("Text", key) from None
        for name, value in args.items():
            message = message.replace("{{ " + name + " }}", value)
        return message

    def format(self, line: str, language: str, args: Mapping[str, str]) -> str:
        self.languages_used.append(language)
        for name, value in args.items():
            line = line.replace("{{ " + name + " }}", value)
        for name, value in self._texts.get(language, {}).items():
            line = line.replace("{{ " + name + " }}", value)
        return line


class FakeTemplateStore:
    """Templates held in memory."""

    def __init__(self, templates: dict[str, list[str]]) -> None:
        self._templates = templates

    def load(self, template_id: str) -> list[str]:
        if template_id not in self._templates:
            raise ValidationError(f"Could not find email template '{template_id}.html'.")
        return list(self._templates[template_id])


class RecordingTransport(httpx.AsyncBaseTransport):
    """httpx transport that records requests and answers with a fixed response."""

    def __init__(self, status_code: int = 200, json: object | None = None, content: bytes = b"") -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._json = json
        self._content = content

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        if self._json is not None:
            return httpx.Response(self._status_code, json=self._json)
        return httpx.Response(self._status_code, content=self._content)


# --- Fixtures ---


@pytest.fixture
def role_repository() -> FakeRoleRepository:
    """Fresh in-memory role repository for each test."""
    return FakeRoleRepository()


@pytest.fixture
def text_service() -> FakeTextService:
    return FakeTextService(
        {
            "en": {
                "confirm.email.subject": "Confirm your email, {{ name }}",
                "confirm.email.greeting": "Hello",
            },
            "sv": {
                "confirm.email.subject": "Bekräfta din e-post, {{ name }}",
                "confirm.email.greeting": "Hej",
            },
        }
    )


@pytest.fixture
def template_store() -> FakeTemplateStore:
    return FakeTemplateStore(
        {
            "confirm_email": [
                "<p>{{ confirm.email.greeting }} {{ name }}</p>",
                '<a href="{{ link }}">confirm</a>',
            ],
        }
    )
