# 목적: Redis 연결 제공자를 정의한다.
# 설명: 앱 설정으로 asyncio Redis 클라이언트를 한 번 만들어 공유하고 종료 시 닫는다.
# 디자인 패턴: 팩토리 메서드 패턴
# 참조: chatresponder/core/responder/repository/redis_chat_log_store.py, chatresponder/main.py

"""Redis 연결 제공자 모듈."""

from __future__ import annotations

import redis.asyncio as redis

from chatresponder.core.common.app_config import AppConfig


class RedisConnectionProvider:
    """앱 단위로 공유하는 Redis 연결 제공자."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._client: redis.Redis | None = None

    def get_client(self) -> redis.Redis:
        """공유 클라이언트를 반환한다.

        응답은 문자열로 디코딩한다. 실제 연결은 첫 명령에서 맺어진다.

        Returns:
            redis.Redis: asyncio Redis 클라이언트.
        """
        if self._client is None:
            self._client = redis.Redis(
                host=self._config.redis_host,
                port=self._config.redis_port,
                db=self._config.redis_db,
                decode_responses=True,
            )
        return self._client

    async def close(self) -> None:
        """생성된 클라이언트가 있으면 연결 풀을 닫는다."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
