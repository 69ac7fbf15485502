"""Tests for the Gemini generateContent client."""

import asyncio
import json
import logging

import pytest
from conftest import API_KEY, FakeGemini, StaticSecretProvider, gemini_body

from chatresponder.core.common.secret_provider import SecretNotFoundError
from chatresponder.core.responder.client.gemini_client import (
    FALLBACK_REPLY_TEXT,
    extract_reply_text,
)
from chatresponder.core.responder.const.error_code import ErrorCode


def test_request_carries_model_key_and_generation_config(make_generator):
    fake = FakeGemini(body=gemini_body("ok"))

    asyncio.run(make_generator(fake).generate("PROMPT"))

    assert len(fake.requests) == 1
    request = fake.requests[0]
    assert request.method == "POST"
    assert request.url.host == "generativelanguage.googleapis.com"
    assert request.url.path == "/v1beta/models/gemini-2.0-pro:generateContent"
    assert request.url.params["key"] == API_KEY
    assert json.loads(request.content) == {
        "contents": [{"parts": [{"text": "PROMPT"}]}],
        "generationConfig": {"temperature": 0.4, "maxOutputTokens": 700},
    }


def test_success_returns_first_candidate_text(make_generator):
    fake = FakeGemini(body=gemini_body("### 結論\nまずは職務経歴の棚卸しから"))

    outcome = asyncio.run(make_generator(fake).generate("PROMPT"))

    assert outcome.ok
    assert outcome.reply_text == "### 結論\nまずは職務経歴の棚卸しから"
    assert outcome.used_fallback is False
    assert outcome.status_code == 200


@pytest.mark.parametrize(
    "body",
    [
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        {},
    ],
)
def test_missing_text_uses_fallback(make_generator, body):
    outcome = asyncio.run(make_generator(FakeGemini(body=body)).generate("PROMPT"))

    assert outcome.ok
    assert outcome.reply_text == FALLBACK_REPLY_TEXT
    assert outcome.used_fallback is True


def test_invalid_json_uses_fallback(make_generator):
    outcome = asyncio.run(make_generator(FakeGemini(raw="<html>oops</html>")).generate("PROMPT"))

    assert outcome.reply_text == FALLBACK_REPLY_TEXT
    assert outcome.used_fallback is True


@pytest.mark.parametrize("status_code", [400, 429, 500, 503])
def test_error_status_is_reported_without_text(make_generator, caplog, status_code):
    fake = FakeGemini(status_code=status_code, body={"error": {"message": "quota exceeded"}})

    with caplog.at_level(logging.INFO, logger="chatresponder"):
        outcome = asyncio.run(make_generator(fake).generate("PROMPT"))

    assert not outcome.ok
    assert outcome.reply_text is None
    assert outcome.status_code == status_code
    assert outcome.error_code is ErrorCode.GENERATOR_HTTP

    records = [record for record in caplog.records if record.name.startswith("chatresponder")]
    assert any(record.levelno == logging.ERROR for record in records)
    assert any("quota exceeded" in record.getMessage() for record in records)
    assert all(API_KEY not in record.getMessage() for record in records)


def test_missing_secret_raises_before_any_request(make_generator):
    fake = FakeGemini(body=gemini_body("ok"))
    client = make_generator(fake, StaticSecretProvider({}))

    with pytest.raises(SecretNotFoundError):
        asyncio.run(client.generate("PROMPT"))

    assert fake.requests == []


def test_secret_is_read_on_every_call(make_generator):
    class CountingProvider(StaticSecretProvider):
        calls = 0

        def get(self, name):
            CountingProvider.calls += 1
            return super().get(name)

    fake = FakeGemini(body=gemini_body("ok"))
    client = make_generator(fake, CountingProvider({"GEMINI_API_KEY": API_KEY}))

    async def _twice():
        await client.generate("a")
        await client.generate("b")

    asyncio.run(_twice())

    assert CountingProvider.calls == 2
    assert fake.prompts == ["a", "b"]


def test_extract_reply_text_tolerates_odd_shapes():
    assert extract_reply_text(None) == ""
    assert extract_reply_text({"candidates": "nope"}) == ""
    assert extract_reply_text({"candidates": [{"content": {"parts": [{"text": 3}]}}]}) == ""
    assert extract_reply_text(gemini_body("  hi  ")) == "hi"
