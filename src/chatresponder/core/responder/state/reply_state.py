# 목적: 응답 그래프의 상태 스키마를 정의한다.
# 설명: 트리거 항목부터 기록 결과까지 단계별 산출물을 담는다. 상태는 호출마다 새로 만든다.
# 디자인 패턴: 상태 객체
# 참조: chatresponder/core/responder/graph/reply_graph.py

"""응답 그래프 상태 스키마 모듈."""

from typing import TypedDict

from chatresponder.core.responder.const.error_code import ErrorCode
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.model.transcript_line import TranscriptLine


class ReplyState(TypedDict, total=False):
    """응답 그래프 상태 스키마."""

    entry: LogEntry | None
    trigger_key: str | None
    should_respond: bool
    user_text: str
    transcript: list[TranscriptLine]
    prompt: str
    reply_text: str | None
    used_fallback: bool
    status_code: int | None
    written_key: str | None
    # 실패 단계가 기록되면 이후 단계는 실행하지 않는다.
    error_code: ErrorCode | None
