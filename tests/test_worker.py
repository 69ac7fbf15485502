"""Tests for the created-event trigger worker."""

import asyncio
import logging

import httpx
from conftest import FakeGemini, StaticSecretProvider, gemini_body

from chatresponder.core.responder.client.gemini_client import GeminiGeneratorClient
from chatresponder.core.responder.const.responder_config import ResponderConfig
from chatresponder.core.responder.graph.reply_graph import ReplyGraph
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.repository import ChatLogStoreError, InMemoryChatLogStore
from chatresponder.core.responder.service.reply_service import ReplyService
from chatresponder.core.responder.worker.reply_trigger_worker import ReplyTriggerWorker


def _worker(store, fake, poll_interval=0.01):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
    generator = GeminiGeneratorClient(
        ResponderConfig(),
        StaticSecretProvider({"GEMINI_API_KEY": "k"}),
        http_client,
    )
    service = ReplyService(ReplyGraph(ResponderConfig(), store, generator))
    return ReplyTriggerWorker(store, service, poll_interval=poll_interval)


async def _generated(store):
    return [entry for entry in await store.query_recent(1000) if entry.is_generated]


def test_run_once_without_events_does_nothing(store):
    worker = _worker(store, FakeGemini(body=gemini_body("ok")))

    assert asyncio.run(worker.run_once()) is False


def test_run_once_replies_to_a_human_message(store):
    fake = FakeGemini(body=gemini_body("reply"))
    worker = _worker(store, fake)

    async def _scenario():
        await store.push(LogEntry(text="hello", author_name="u1", created_at=1))
        processed = await worker.run_once()
        await worker.drain()
        return processed, await _generated(store)

    processed, generated = asyncio.run(_scenario())

    assert processed is True
    assert [entry.text for entry in generated] == ["reply"]
    assert len(fake.requests) == 1


def test_run_forever_does_not_reply_to_its_own_reply(store):
    fake = FakeGemini(body=gemini_body("reply"))
    worker = _worker(store, fake)

    async def _scenario():
        task = asyncio.create_task(worker.run_forever())
        await store.push(LogEntry(text="hello", author_name="u1", created_at=1))
        for _ in range(200):
            if await _generated(store):
                break
            await asyncio.sleep(0.01)
        await asyncio.sleep(0.05)
        worker.stop()
        await task
        return await _generated(store)

    generated = asyncio.run(_scenario())

    assert worker.stopped
    assert len(generated) == 1
    assert len(fake.requests) == 1


def test_concurrent_triggers_each_get_a_reply(store):
    fake = FakeGemini(body=gemini_body("reply"))
    worker = _worker(store, fake)

    async def _scenario():
        await store.push(LogEntry(text="first", author_name="u1", created_at=1))
        await store.push(LogEntry(text="second", author_name="u2", created_at=2))
        await worker.run_once()
        await worker.run_once()
        await worker.drain()
        return await _generated(store)

    generated = asyncio.run(_scenario())

    assert len(generated) == 2
    assert len(fake.requests) == 2


def test_fetch_failure_does_not_stop_the_loop(caplog):
    class BrokenOnceStore(InMemoryChatLogStore):
        failures = 1

        async def pop_created(self):
            if self.failures:
                self.failures -= 1
                raise ChatLogStoreError("redis down")
            return await super().pop_created()

    store = BrokenOnceStore()
    fake = FakeGemini(body=gemini_body("reply"))
    worker = _worker(store, fake)

    async def _scenario():
        await store.push(LogEntry(text="hello", author_name="u1", created_at=1))
        task = asyncio.create_task(worker.run_forever())
        for _ in range(200):
            if await _generated(store):
                break
            await asyncio.sleep(0.01)
        worker.stop()
        await task
        return await _generated(store)

    with caplog.at_level(logging.ERROR):
        generated = asyncio.run(_scenario())

    assert len(generated) == 1
    assert "워커 루프 처리 실패" in caplog.text
