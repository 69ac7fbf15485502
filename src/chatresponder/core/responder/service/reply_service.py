# 목적: 자동 응답 서비스 레이어를 정의한다.
# 설명: 트리거 항목마다 그래프를 실행하고, 예상하지 못한 예외는 여기서 한 번만 잡아 로그로 남긴다.
# 디자인 패턴: 애플리케이션 서비스 패턴
# 참조: chatresponder/core/responder/graph/reply_graph.py, chatresponder/core/responder/worker

"""자동 응답 서비스 모듈."""

from __future__ import annotations

import logging

from chatresponder.core.responder.const import ErrorCode
from chatresponder.core.responder.graph.reply_graph import ReplyGraph
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.state.reply_state import ReplyState

LOGGER = logging.getLogger(__name__)


class ReplyService:
    """자동 응답 서비스."""

    def __init__(self, graph: ReplyGraph) -> None:
        """서비스 의존성을 초기화한다.

        Args:
            graph (ReplyGraph): 자동 응답 그래프.
        """
        self._graph = graph

    async def handle(self, entry: LogEntry | None, key: str | None = None) -> ReplyState | None:
        """새 로그 항목 하나를 처리한다.

        Args:
            entry (LogEntry | None): 새로 생성된 로그 항목.
            key (str | None): 항목의 푸시 ID.

        Returns:
            ReplyState | None: 최종 상태. 예상하지 못한 예외가 발생하면 None.
        """
        try:
            result = await self._graph.run(entry, trigger_key=key)
        except Exception:
            LOGGER.exception("autoreply failed: key=%s code=%s", key, ErrorCode.UNKNOWN.code)
            return None

        error_code = result.get("error_code")
        if error_code is not None:
            LOGGER.warning("응답 없이 종료: key=%s code=%s (%s)", key, error_code.code, error_code.description)
        return result
