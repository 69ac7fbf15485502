# 목적: 로그 생성 이벤트를 소비하는 트리거 워커를 정의한다.
# 설명: 새 항목 이벤트마다 자동 응답 서비스를 독립 태스크로 실행한다.
# 디자인 패턴: 템플릿 메서드 패턴(AsyncWorkerBase 상속)
# 참조: chatresponder/core/common/worker/async_worker_base.py, chatresponder/core/responder/service

"""자동 응답 트리거 워커 모듈."""

from __future__ import annotations

import asyncio
import logging

from chatresponder.core.common.worker.async_worker_base import AsyncWorkerBase
from chatresponder.core.responder.repository.chat_log_store import ChatLogStore, CreatedEvent
from chatresponder.core.responder.service.reply_service import ReplyService

LOGGER = logging.getLogger(__name__)


class ReplyTriggerWorker(AsyncWorkerBase[CreatedEvent]):
    """자동 응답 트리거 워커.

    호출 간 공유 상태나 잠금은 없다. 동시에 실행된 호출이 겹치는 이력 구간을 읽을 수 있다.
    """

    def __init__(
        self,
        store: ChatLogStore,
        reply_service: ReplyService,
        poll_interval: float = 0.5,
    ) -> None:
        """워커 의존성을 초기화한다.

        Args:
            store (ChatLogStore): 생성 이벤트를 발행하는 채팅 로그 저장소.
            reply_service (ReplyService): 자동 응답 서비스.
            poll_interval (float): 폴링 간격(초).
        """
        super().__init__(poll_interval=poll_interval)
        self._store = store
        self._reply_service = reply_service
        self._in_flight: set[asyncio.Task] = set()

    async def fetch_job(self) -> CreatedEvent | None:
        return await self._store.pop_created()

    async def handle_job(self, job: CreatedEvent) -> None:
        task = asyncio.create_task(
            self._reply_service.handle(job.entry, key=job.key),
            name=f"autoreply-{job.key}",
        )
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def drain(self) -> None:
        """실행 중인 응답 태스크가 끝날 때까지 기다린다."""
        while self._in_flight:
            pending = list(self._in_flight)
            await asyncio.gather(*pending)
            self._in_flight.difference_update(pending)

    async def on_stopped(self) -> None:
        LOGGER.info("트리거 워커 종료: in_flight=%s", len(self._in_flight))
        await self.drain()
