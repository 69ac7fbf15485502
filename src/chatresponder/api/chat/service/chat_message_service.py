# 목적: 채팅 메시지 서비스 레이어를 정의한다.
# 설명: 사람 메시지를 로그에 추가하고 최근 로그를 조회한다. 추가된 항목은 트리거 워커가 처리한다.
# 디자인 패턴: 애플리케이션 서비스 패턴
# 참조: chatresponder/core/responder/repository/chat_log_store.py

"""채팅 메시지 서비스 모듈."""

from __future__ import annotations

import logging

from chatresponder.api.chat.model.request import ChatMessageRequest
from chatresponder.api.chat.model.response import (
    ChatLogItem,
    ChatLogResponse,
    ChatMessageResponse,
)
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.repository.chat_log_store import ChatLogStore, current_millis

LOGGER = logging.getLogger(__name__)


class ChatMessageService:
    """채팅 메시지 서비스."""

    def __init__(self, store: ChatLogStore) -> None:
        """서비스 의존성을 초기화한다.

        Args:
            store (ChatLogStore): 채팅 로그 저장소.
        """
        self._store = store

    async def post_message(self, request: ChatMessageRequest) -> ChatMessageResponse:
        """사람 메시지를 로그에 추가한다.

        Args:
            request (ChatMessageRequest): 작성 요청.

        Returns:
            ChatMessageResponse: 부여된 푸시 ID.
        """
        entry = LogEntry(
            text=request.text,
            author_name=request.uname,
            created_at=current_millis(),
        )
        key = await self._store.push(entry)
        LOGGER.info("사람 메시지 추가: key=%s", key)
        return ChatMessageResponse(key=key)

    async def list_recent(self, limit: int) -> ChatLogResponse:
        """최근 로그를 오래된 순으로 조회한다."""
        entries = await self._store.query_recent(limit)
        return ChatLogResponse(entries=[ChatLogItem.from_entry(entry) for entry in entries])
