# 목적: 응답 여부를 판단하는 게이트 노드를 정의한다.
# 설명: 생성 응답/빈 메시지를 걸러 자기 자신의 기록에 다시 반응하는 무한 루프를 막는다.
# 디자인 패턴: 파이프라인 노드
# 참조: chatresponder/core/responder/graph/reply_graph.py

"""응답 게이트 노드 모듈."""

from chatresponder.core.responder.const.author_role import GENERATED_AUTHOR_LABEL
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.state.reply_state import ReplyState


class ReplyGate:
    """응답 여부를 판단하는 노드.

    I/O 없이 동기로 동작하며 그래프의 첫 노드로 실행된다.
    """

    def should_respond(self, entry: LogEntry | None) -> bool:
        """새 로그 항목에 응답해야 하는지 판단한다.

        Args:
            entry (LogEntry | None): 새로 생성된 로그 항목.

        Returns:
            bool: 응답해야 하면 True.
        """
        if entry is None:
            return False
        if entry.is_generated is True or entry.author_name == GENERATED_AUTHOR_LABEL:
            return False
        return bool(entry.stripped_text)

    def run(self, state: ReplyState) -> ReplyState:
        """판단 결과를 상태 업데이트로 반환한다."""
        entry = state.get("entry")
        if not self.should_respond(entry):
            return {"should_respond": False}
        return {"should_respond": True, "user_text": entry.stripped_text}
