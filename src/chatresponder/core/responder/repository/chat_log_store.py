# 목적: 채팅 로그 저장소 인터페이스를 정의한다.
# 설명: append-only 로그에 대한 추가/단건 조회/최근 범위 조회/생성 이벤트 소비를 추상화한다.
# 디자인 패턴: Repository
# 참조: chatresponder/core/responder/repository/redis_chat_log_store.py,
#       chatresponder/core/responder/repository/inmemory_chat_log_store.py

"""채팅 로그 저장소 인터페이스 모듈."""

from __future__ import annotations

import time
import uuid
from abc import ABC, abstractmethod

from pydantic import BaseModel

from chatresponder.core.responder.model.log_entry import LogEntry


class ChatLogStoreError(RuntimeError):
    """저장소 조회/기록 실패."""


class CreatedEvent(BaseModel):
    """새 로그 항목 생성 이벤트."""

    key: str
    entry: LogEntry


class ChatLogStore(ABC):
    """채팅 로그 저장소 베이스.

    정렬 규칙:
        - createdAt 오름차순으로 정렬한다.
        - createdAt이 없는 항목은 가장 앞에 둔다.
        - 같은 값끼리는 푸시 ID 순으로 정렬한다.
    """

    @abstractmethod
    async def push(self, entry: LogEntry) -> str:
        """항목을 추가하고 생성 이벤트를 발행한다.

        Args:
            entry (LogEntry): 추가할 항목.

        Returns:
            str: 부여된 푸시 ID.

        Raises:
            ChatLogStoreError: 기록에 실패했을 때.
        """

    @abstractmethod
    async def get(self, key: str) -> LogEntry | None:
        """푸시 ID로 항목을 조회한다."""

    @abstractmethod
    async def query_recent(self, limit: int) -> list[LogEntry]:
        """정렬 순서상 마지막 limit개 항목을 오래된 순으로 반환한다.

        Args:
            limit (int): 최대 조회 수.

        Returns:
            list[LogEntry]: 조회된 항목.

        Raises:
            ChatLogStoreError: 조회에 실패했을 때.
        """

    @abstractmethod
    async def pop_created(self) -> CreatedEvent | None:
        """가장 오래된 미처리 생성 이벤트를 꺼낸다."""


def generate_push_id(now_ms: int | None = None) -> str:
    """시간 순으로 정렬되는 푸시 ID를 생성한다."""
    timestamp = now_ms if now_ms is not None else current_millis()
    return f"{timestamp:013d}-{uuid.uuid4().hex[:12]}"


def current_millis() -> int:
    """현재 시각을 epoch ms로 반환한다."""
    return int(time.time() * 1000)
