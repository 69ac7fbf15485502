# 목적: 인메모리 채팅 로그 저장소를 정의한다.
# 설명: 로컬 실행/테스트용으로 Redis 저장소와 같은 정렬/이벤트 규칙을 프로세스 메모리에 구현한다.
# 디자인 패턴: 리포지토리 패턴
# 참조: chatresponder/core/responder/repository/chat_log_store.py

"""인메모리 채팅 로그 저장소 모듈."""

from __future__ import annotations

from collections import deque

from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.repository.chat_log_store import (
    ChatLogStore,
    CreatedEvent,
    generate_push_id,
)


class InMemoryChatLogStore(ChatLogStore):
    """인메모리 채팅 로그 저장소."""

    def __init__(self) -> None:
        """저장소를 초기화한다."""
        self._payloads: dict[str, dict] = {}
        self._created: deque[str] = deque()

    async def push(self, entry: LogEntry) -> str:
        key = generate_push_id()
        while key in self._payloads:
            key = generate_push_id()
        self._payloads[key] = entry.to_payload()
        self._created.append(key)
        return key

    async def get(self, key: str) -> LogEntry | None:
        payload = self._payloads.get(key)
        if payload is None:
            return None
        return LogEntry.from_payload(dict(payload), key=key)

    async def query_recent(self, limit: int) -> list[LogEntry]:
        if limit <= 0:
            return []
        ordered = sorted(self._payloads.items(), key=_sort_key)
        entries: list[LogEntry] = []
        for key, payload in ordered[-limit:]:
            entry = LogEntry.from_payload(dict(payload), key=key)
            if entry is not None:
                entries.append(entry)
        return entries

    async def pop_created(self) -> CreatedEvent | None:
        while self._created:
            key = self._created.popleft()
            entry = await self.get(key)
            if entry is not None:
                return CreatedEvent(key=key, entry=entry)
        return None

    def __len__(self) -> int:
        return len(self._payloads)


def _sort_key(item: tuple[str, dict]) -> tuple[float, str]:
    """createdAt 없는 항목을 앞에 두는 정렬 키."""
    key, payload = item
    created_at = LogEntry.from_payload(payload).created_at
    score = float("-inf") if created_at is None else float(created_at)
    return score, key
