# 목적: 생성 응답을 채팅 로그에 기록하는 노드를 정의한다.
# 설명: 생성 응답 표시(isAI/uname)를 붙여 새 항목으로 추가한다. 기록 실패는 로그만 남긴다.
# 디자인 패턴: 커맨드
# 참조: chatresponder/core/responder/repository/chat_log_store.py

"""응답 기록 노드 모듈."""

import logging
from collections.abc import Callable

from chatresponder.core.responder.const.author_role import GENERATED_AUTHOR_LABEL
from chatresponder.core.responder.const.error_code import ErrorCode
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.model.outcomes import WriteOutcome
from chatresponder.core.responder.repository.chat_log_store import (
    ChatLogStore,
    ChatLogStoreError,
    current_millis,
)
from chatresponder.core.responder.state.reply_state import ReplyState

LOGGER = logging.getLogger(__name__)


class ReplyWriter:
    """응답 기록 노드."""

    def __init__(self, store: ChatLogStore, clock: Callable[[], int] = current_millis) -> None:
        """노드 의존성을 초기화한다.

        Args:
            store (ChatLogStore): 채팅 로그 저장소.
            clock (Callable[[], int]): epoch ms 시각 제공 함수.
        """
        self._store = store
        self._clock = clock

    async def write(self, reply_text: str) -> WriteOutcome:
        """응답을 새 로그 항목으로 추가한다.

        기록 후 다시 읽어 검증하지 않는다.

        Args:
            reply_text (str): 최종 응답 텍스트.

        Returns:
            WriteOutcome: 부여된 푸시 ID 또는 실패 코드.
        """
        entry = LogEntry(
            author_name=GENERATED_AUTHOR_LABEL,
            text=reply_text,
            is_generated=True,
            created_at=self._clock(),
        )
        try:
            key = await self._store.push(entry)
        except ChatLogStoreError:
            LOGGER.exception("응답 기록 실패")
            return WriteOutcome(error_code=ErrorCode.WRITE)
        LOGGER.info("Replied with AI message: key=%s", key)
        return WriteOutcome(key=key)

    async def run(self, state: ReplyState) -> ReplyState:
        """기록 결과를 상태 업데이트로 반환한다."""
        outcome = await self.write(state.get("reply_text") or "")
        if not outcome.ok:
            return {"error_code": outcome.error_code}
        return {"written_key": outcome.key}
