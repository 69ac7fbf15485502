# 목적: 채팅 로그 API 응답 모델을 정의한다.
# 설명: 작성 결과와 최근 로그 조회 결과의 반환 구조를 고정한다.
# 디자인 패턴: 데이터 전송 객체(DTO)
# 참조: chatresponder/api/chat/router/chat_message_router.py

"""채팅 로그 응답 모델 모듈."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chatresponder.core.responder.model.log_entry import LogEntry


class ChatMessageResponse(BaseModel):
    """메시지 작성 응답 모델."""

    key: str = Field(description="부여된 푸시 ID")


class ChatLogItem(BaseModel):
    """로그 항목 응답 모델."""

    key: str | None = Field(default=None, description="푸시 ID")
    text: str | None = Field(default=None, description="메시지 본문")
    uname: str | None = Field(default=None, description="표시 이름")
    isAI: bool = Field(default=False, description="생성 응답 여부")
    createdAt: int | float | None = Field(default=None, description="생성 시각(epoch ms)")

    @classmethod
    def from_entry(cls, entry: LogEntry) -> ChatLogItem:
        """로그 항목으로부터 응답 모델을 생성한다."""
        return cls(
            key=entry.key,
            text=entry.text,
            uname=entry.author_name,
            isAI=bool(entry.is_generated),
            createdAt=entry.created_at,
        )


class ChatLogResponse(BaseModel):
    """최근 로그 조회 응답 모델."""

    entries: list[ChatLogItem] = Field(default_factory=list, description="오래된 순 로그 항목")
