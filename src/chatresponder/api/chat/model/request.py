# 목적: 채팅 메시지 작성 요청 모델을 정의한다.
# 설명: 사람 클라이언트가 로그에 남기는 메시지 입력 스키마를 고정한다.
# 디자인 패턴: 데이터 전송 객체(DTO)
# 참조: chatresponder/api/chat/service/chat_message_service.py

"""채팅 메시지 요청 모델 모듈."""

from pydantic import BaseModel, Field, field_validator


class ChatMessageRequest(BaseModel):
    """채팅 메시지 작성 요청 모델."""

    text: str = Field(description="메시지 본문")
    uname: str | None = Field(default=None, description="표시 이름")

    @field_validator("text")
    @classmethod
    def validate_text(cls, value: str) -> str:
        """본문이 비어 있지 않은지 검증한다."""
        if not value.strip():
            raise ValueError("text는 비어 있을 수 없습니다.")
        return value

    @field_validator("uname")
    @classmethod
    def normalize_uname(cls, value: str | None) -> str | None:
        """빈 이름은 None으로 정리한다."""
        if value is None:
            return None
        return value.strip() or None
