# 목적: 파이프라인 단계별 결과 값을 정의한다.
# 설명: 이력 조회/생성/기록 단계가 성공 또는 실패를 예외 대신 값으로 반환한다.
# 디자인 패턴: Result 객체
# 참조: chatresponder/core/responder/graph/reply_graph.py

"""단계별 결과 모델 모듈."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chatresponder.core.responder.const.error_code import ErrorCode
from chatresponder.core.responder.model.transcript_line import TranscriptLine


class HistoryOutcome(BaseModel):
    """이력 조회 결과."""

    lines: list[TranscriptLine] = Field(default_factory=list)
    error_code: ErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.error_code is None


class GenerationOutcome(BaseModel):
    """응답 생성 결과."""

    reply_text: str | None = None
    status_code: int | None = None
    used_fallback: bool = False
    error_code: ErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.error_code is None and bool(self.reply_text)

    @classmethod
    def failed(cls, status_code: int | None) -> GenerationOutcome:
        """HTTP 실패 결과를 만든다."""
        return cls(status_code=status_code, error_code=ErrorCode.GENERATOR_HTTP)


class WriteOutcome(BaseModel):
    """응답 기록 결과."""

    key: str | None = None
    error_code: ErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.error_code is None
