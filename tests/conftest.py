"""Shared fixtures for the chatresponder test suite."""

import json
from collections.abc import Callable

import httpx
import pytest

from chatresponder.core.common.secret_provider import SecretNotFoundError, SecretProvider
from chatresponder.core.responder.client.gemini_client import GeminiGeneratorClient
from chatresponder.core.responder.const.responder_config import ResponderConfig
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.repository import ChatLogStoreError, InMemoryChatLogStore

API_KEY = "test-secret-key-123"


class StaticSecretProvider(SecretProvider):
    def __init__(self, secrets: dict[str, str]) -> None:
        self._secrets = dict(secrets)

    def get(self, name: str) -> str:
        if name not in self._secrets:
            raise SecretNotFoundError(name)
        return self._secrets[name]


class FakeGemini:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, body: object | None = None, raw: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, text=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def prompts(self) -> list[str]:
        return [
            json.loads(request.content)["contents"][0]["parts"][0]["text"]
            for request in self.requests
        ]


class FlakyStore(InMemoryChatLogStore):
    """In-memory store that can be told to fail queries or pushes."""

    def __init__(self, fail_query: bool = False, fail_push: bool = False) -> None:
        super().__init__()
        self.fail_query = fail_query
        self.fail_push = fail_push

    async def query_recent(self, limit: int) -> list[LogEntry]:
        if self.fail_query:
            raise ChatLogStoreError("connection refused")
        return await super().query_recent(limit)

    async def push(self, entry: LogEntry) -> str:
        if self.fail_push:
            raise ChatLogStoreError("read-only replica")
        return await super().push(entry)


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def responder_config() -> ResponderConfig:
    return ResponderConfig()


@pytest.fixture
def secret_provider() -> StaticSecretProvider:
    return StaticSecretProvider({"GEMINI_API_KEY": API_KEY})


@pytest.fixture
def make_generator(
    responder_config: ResponderConfig,
    secret_provider: StaticSecretProvider,
) -> Callable[[FakeGemini], GeminiGeneratorClient]:
    def _make(fake: FakeGemini, provider: SecretProvider | None = None) -> GeminiGeneratorClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
        return GeminiGeneratorClient(responder_config, provider or secret_provider, http_client)

    return _make


@pytest.fixture
def store() -> InMemoryChatLogStore:
    return InMemoryChatLogStore()
