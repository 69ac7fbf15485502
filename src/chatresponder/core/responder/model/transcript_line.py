# 목적: 대화 이력 한 줄 표현을 정의한다.
# 설명: 로그 항목을 "<ROLE>(<name>): <text>" 형식으로 정규화한다.
# 디자인 패턴: Adapter
# 참조: chatresponder/core/responder/nodes/history_node.py

"""대화 이력 라인 모델 모듈."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from chatresponder.core.responder.const.author_role import AuthorRole
from chatresponder.core.responder.model.log_entry import LogEntry


class TranscriptLine(BaseModel):
    """정규화된 대화 이력 한 줄."""

    model_config = ConfigDict(frozen=True)

    role: AuthorRole
    name: str
    text: str

    @classmethod
    def from_entry(cls, entry: LogEntry) -> TranscriptLine | None:
        """로그 항목을 이력 라인으로 변환한다.

        Args:
            entry (LogEntry): 로그 항목.

        Returns:
            TranscriptLine | None: 본문이 비어 있으면 None.
        """
        if not entry.text:
            return None
        role = AuthorRole.AI if entry.is_generated else AuthorRole.USER
        name = entry.author_name or role.value
        return cls(role=role, name=name, text=normalize_whitespace(entry.text))

    def render(self) -> str:
        """프롬프트에 넣을 문자열을 반환한다."""
        return f"{self.role.value}({self.name}): {self.text}"


def normalize_whitespace(text: str) -> str:
    """연속 공백을 하나로 합치고 앞뒤를 정리한다."""
    return " ".join(text.split())
