# 목적: Redis 기반 채팅 로그 저장소를 정의한다.
# 설명: 해시에 항목을, 정렬 집합에 createdAt 인덱스를, 리스트에 생성 이벤트를 적재한다.
# 디자인 패턴: Repository
# 참조: chatresponder/core/responder/repository/chat_log_store.py,
#       chatresponder/core/common/redis_connection_provider.py

"""Redis 채팅 로그 저장소 모듈."""

from __future__ import annotations

import json
import logging
from typing import Any

from redis.exceptions import RedisError

from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.repository.chat_log_store import (
    ChatLogStore,
    ChatLogStoreError,
    CreatedEvent,
    generate_push_id,
)

LOGGER = logging.getLogger(__name__)


class RedisChatLogStore(ChatLogStore):
    """Redis 기반 채팅 로그 저장소."""

    def __init__(self, redis_client: Any, root_key: str = "chat") -> None:
        """저장소를 초기화한다.

        Args:
            redis_client: decode_responses=True로 생성한 asyncio Redis 클라이언트.
            root_key: 로그 루트 키.
        """
        self._redis = redis_client
        self._entries_key = f"{root_key}:entries"
        self._index_key = f"{root_key}:index"
        self._created_key = f"{root_key}:created"

    async def push(self, entry: LogEntry) -> str:
        key = generate_push_id()
        payload = entry.to_payload()
        event = {"key": key, "entry": payload}
        # 항목/인덱스/생성 이벤트는 MULTI/EXEC 한 번으로 함께 기록되거나 함께 실패한다.
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.hset(self._entries_key, key, json.dumps(payload, ensure_ascii=False))
                pipe.zadd(self._index_key, {key: _score(entry.created_at)})
                pipe.rpush(self._created_key, json.dumps(event, ensure_ascii=False))
                await pipe.execute()
        except RedisError as exc:
            raise ChatLogStoreError(f"로그 기록 실패: {exc}") from exc
        return key

    async def get(self, key: str) -> LogEntry | None:
        try:
            raw = await self._redis.hget(self._entries_key, key)
        except RedisError as exc:
            raise ChatLogStoreError(f"로그 조회 실패: {exc}") from exc
        if raw is None:
            return None
        return self._decode(key, raw)

    async def query_recent(self, limit: int) -> list[LogEntry]:
        if limit <= 0:
            return []
        try:
            keys = await self._redis.zrange(self._index_key, -limit, -1)
            if not keys:
                return []
            raw_items = await self._redis.hmget(self._entries_key, keys)
        except RedisError as exc:
            raise ChatLogStoreError(f"최근 로그 조회 실패: {exc}") from exc

        entries: list[LogEntry] = []
        for key, raw in zip(keys, raw_items):
            if raw is None:
                continue
            entry = self._decode(key, raw)
            if entry is not None:
                entries.append(entry)
        return entries

    async def pop_created(self) -> CreatedEvent | None:
        try:
            raw = await self._redis.lpop(self._created_key)
        except RedisError as exc:
            raise ChatLogStoreError(f"생성 이벤트 조회 실패: {exc}") from exc
        if raw is None:
            return None
        try:
            data = json.loads(raw)
            entry = LogEntry.from_payload(data.get("entry"), key=data["key"])
        except (json.JSONDecodeError, AttributeError, KeyError) as exc:
            raise ChatLogStoreError(f"생성 이벤트 형식 오류: {raw!r}") from exc
        if entry is None:
            raise ChatLogStoreError(f"생성 이벤트 항목이 객체가 아닙니다: key={data['key']}")
        return CreatedEvent(key=str(data["key"]), entry=entry)

    def _decode(self, key: str, raw: str) -> LogEntry | None:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            LOGGER.warning("로그 항목 형식 오류로 건너뜁니다: key=%s", key)
            return None
        return LogEntry.from_payload(payload, key=key)


def _score(created_at: int | float | None) -> float:
    """정렬 점수. createdAt이 없으면 가장 앞에 둔다."""
    if created_at is None:
        return float("-inf")
    return float(created_at)
