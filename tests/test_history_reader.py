"""Tests for bounded history retrieval and normalization."""

import asyncio
import logging

from conftest import FlakyStore

from chatresponder.core.responder.const.error_code import ErrorCode
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.nodes.history_node import HistoryReader


async def _seed(store, payloads):
    for payload in payloads:
        await store.push(LogEntry.from_payload(payload))


def test_never_returns_more_than_limit(store):
    payloads = [{"text": f"m{i}", "uname": f"u{i}", "createdAt": 1000 + i} for i in range(40)]
    asyncio.run(_seed(store, payloads))

    outcome = asyncio.run(HistoryReader(store, history_limit=30).read())

    assert outcome.ok
    assert len(outcome.lines) == 30
    assert outcome.lines[0].render() == "USER(u10): m10"
    assert outcome.lines[-1].render() == "USER(u39): m39"


def test_entries_without_text_are_skipped_after_the_limit(store):
    payloads = [{"text": f"m{i}", "createdAt": 1000 + i} for i in range(35)]
    payloads += [{"uname": "ghost", "createdAt": 2000 + i} for i in range(5)]
    asyncio.run(_seed(store, payloads))

    outcome = asyncio.run(HistoryReader(store, history_limit=30).read())

    assert len(outcome.lines) == 25
    assert outcome.lines[-1].text == "m34"


def test_lines_are_ordered_by_created_at(store):
    payloads = [
        {"text": "third", "createdAt": 30},
        {"text": "first", "createdAt": 10},
        {"text": "reply", "isAI": True, "uname": "AI", "createdAt": 20},
    ]
    asyncio.run(_seed(store, payloads))

    outcome = asyncio.run(HistoryReader(store, history_limit=30).read())

    assert [line.render() for line in outcome.lines] == [
        "USER(USER): first",
        "AI(AI): reply",
        "USER(USER): third",
    ]


def test_empty_log_yields_empty_history(store):
    outcome = asyncio.run(HistoryReader(store, history_limit=30).read())

    assert outcome.ok
    assert outcome.lines == []


def test_store_failure_is_reported_as_failed_outcome(caplog):
    reader = HistoryReader(FlakyStore(fail_query=True), history_limit=30)

    with caplog.at_level(logging.ERROR):
        outcome = asyncio.run(reader.read())

    assert not outcome.ok
    assert outcome.error_code is ErrorCode.HISTORY
    assert outcome.lines == []
    assert "대화 이력 조회 실패" in caplog.text


def test_run_returns_error_code_on_failure():
    reader = HistoryReader(FlakyStore(fail_query=True), history_limit=30)

    update = asyncio.run(reader.run({}))

    assert update == {"error_code": ErrorCode.HISTORY}
