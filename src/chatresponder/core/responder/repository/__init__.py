# 목적: 채팅 로그 저장소 패키지를 외부에 노출한다.
# 설명: 인터페이스와 Redis/인메모리 구현을 집계한다.
# 디자인 패턴: 파사드
# 참조: chatresponder/core/responder/repository/chat_log_store.py

"""채팅 로그 저장소 패키지."""

from chatresponder.core.responder.repository.chat_log_store import (
    ChatLogStore,
    ChatLogStoreError,
    CreatedEvent,
)
from chatresponder.core.responder.repository.inmemory_chat_log_store import InMemoryChatLogStore
from chatresponder.core.responder.repository.redis_chat_log_store import RedisChatLogStore

__all__ = [
    "ChatLogStore",
    "ChatLogStoreError",
    "CreatedEvent",
    "InMemoryChatLogStore",
    "RedisChatLogStore",
]
