# 목적: 최근 대화 이력을 조회하는 노드를 정의한다.
# 설명: 저장소에서 마지막 N개 항목을 createdAt 순으로 가져와 이력 라인으로 정규화한다.
# 디자인 패턴: 파이프라인 노드
# 참조: chatresponder/core/responder/repository/chat_log_store.py

"""대화 이력 조회 노드 모듈."""

import logging

from chatresponder.core.responder.const.error_code import ErrorCode
from chatresponder.core.responder.model.outcomes import HistoryOutcome
from chatresponder.core.responder.model.transcript_line import TranscriptLine
from chatresponder.core.responder.repository.chat_log_store import (
    ChatLogStore,
    ChatLogStoreError,
)
from chatresponder.core.responder.state.reply_state import ReplyState

LOGGER = logging.getLogger(__name__)


class HistoryReader:
    """최근 대화 이력 조회 노드."""

    def __init__(self, store: ChatLogStore, history_limit: int) -> None:
        """노드 의존성을 초기화한다.

        Args:
            store (ChatLogStore): 채팅 로그 저장소.
            history_limit (int): 조회할 최근 항목 수.
        """
        self._store = store
        self._history_limit = history_limit

    async def read(self) -> HistoryOutcome:
        """최근 이력을 조회한다.

        개수 제한은 저장소 조회에 적용하고, 본문이 없는 항목은 조회 후 건너뛴다.
        정렬은 저장소가 결정하며 여기서 다시 정렬하지 않는다.

        Returns:
            HistoryOutcome: 이력 라인 또는 실패 코드.
        """
        try:
            entries = await self._store.query_recent(self._history_limit)
        except ChatLogStoreError:
            LOGGER.exception("대화 이력 조회 실패: limit=%s", self._history_limit)
            return HistoryOutcome(error_code=ErrorCode.HISTORY)

        lines: list[TranscriptLine] = []
        for entry in entries:
            line = TranscriptLine.from_entry(entry)
            if line is not None:
                lines.append(line)
        return HistoryOutcome(lines=lines)

    async def run(self, state: ReplyState) -> ReplyState:
        """조회 결과를 상태 업데이트로 반환한다."""
        outcome = await self.read()
        if not outcome.ok:
            return {"error_code": outcome.error_code}
        return {"transcript": outcome.lines}
