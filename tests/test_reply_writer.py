"""Tests for appending generated replies to the chat log."""

import asyncio
import logging

from conftest import FlakyStore

from chatresponder.core.responder.const.error_code import ErrorCode
from chatresponder.core.responder.nodes.write_node import ReplyWriter


def test_reply_is_appended_as_generated_entry(store):
    writer = ReplyWriter(store, clock=lambda: 1700000000999)

    outcome = asyncio.run(writer.write("### 結論\nやってみよう"))

    assert outcome.ok
    saved = asyncio.run(store.get(outcome.key))
    assert saved.to_payload() == {
        "uname": "AI",
        "text": "### 結論\nやってみよう",
        "isAI": True,
        "createdAt": 1700000000999,
    }


def test_each_write_gets_a_fresh_key(store):
    writer = ReplyWriter(store)

    async def _write_twice():
        return await writer.write("a"), await writer.write("b")

    first, second = asyncio.run(_write_twice())

    assert first.key != second.key
    assert len(store) == 2


def test_store_failure_is_logged_not_raised(caplog):
    writer = ReplyWriter(FlakyStore(fail_push=True))

    with caplog.at_level(logging.ERROR):
        outcome = asyncio.run(writer.write("reply"))

    assert not outcome.ok
    assert outcome.error_code is ErrorCode.WRITE
    assert "응답 기록 실패" in caplog.text


def test_run_reports_written_key(store):
    update = asyncio.run(ReplyWriter(store).run({"reply_text": "hello"}))

    assert set(update) == {"written_key"}
    assert asyncio.run(store.get(update["written_key"])).text == "hello"
