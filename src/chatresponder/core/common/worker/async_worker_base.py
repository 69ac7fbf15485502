# 목적: 비동기 워커의 실행 뼈대를 정의한다.
# 설명: 폴링 루프의 공통 흐름을 고정하고 하위 클래스가 작업 조회/처리를 제공한다.
# 디자인 패턴: 템플릿 메서드 패턴
# 참조: chatresponder/core/responder/worker/reply_trigger_worker.py

"""비동기 워커 베이스 모듈."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

LOGGER = logging.getLogger(__name__)

JobT = TypeVar("JobT")


class AsyncWorkerBase(ABC, Generic[JobT]):
    """비동기 워커 베이스 클래스."""

    def __init__(self, poll_interval: float = 0.1) -> None:
        """비동기 워커를 초기화한다.

        Args:
            poll_interval: 작업 폴링 간격(초).
        """
        self._poll_interval = poll_interval
        self._stop_requested = False

    @property
    def stopped(self) -> bool:
        """종료 요청 여부를 반환한다."""
        return self._stop_requested

    def stop(self) -> None:
        """비동기 워커 종료를 요청한다."""
        self._stop_requested = True

    async def run_forever(self) -> None:
        """비동기 작업 루프를 실행한다.

        구현 내용:
            - stop 플래그 기반 종료
            - 큐가 비면 poll_interval 만큼 비동기 대기
            - 예외 발생 시 로그를 남기고 짧게 백오프한 뒤 루프 지속
        """
        while not self._stop_requested:
            try:
                processed = await self.run_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                LOGGER.exception("워커 루프 처리 실패")
                await asyncio.sleep(min(self._poll_interval * 2, 1.0))
                continue
            if not processed:
                await asyncio.sleep(self._poll_interval)
        await self.on_stopped()

    async def run_once(self) -> bool:
        """작업을 한 번 조회해 처리한다.

        Returns:
            bool: 작업을 처리했으면 True.
        """
        job = await self.fetch_job()
        if job is None:
            return False
        await self.handle_job(job)
        return True

    async def on_stopped(self) -> None:
        """루프 종료 후 정리 훅."""

    @abstractmethod
    async def fetch_job(self) -> JobT | None:
        """작업을 비동기로 가져온다.

        Returns:
            JobT | None: 작업 또는 None.
        """

    @abstractmethod
    async def handle_job(self, job: JobT) -> None:
        """작업을 비동기로 처리한다.

        Args:
            job: 작업.
        """
