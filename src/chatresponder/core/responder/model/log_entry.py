# 목적: 채팅 로그 항목 스키마를 정의한다.
# 설명: 저장소 JSON 키(text/uname/isAI/createdAt)와 파이썬 속성을 매핑하고 잘못된 값을 관대하게 정리한다.
# 디자인 패턴: DTO
# 참조: chatresponder/core/responder/repository/chat_log_store.py

"""채팅 로그 항목 모델 모듈."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogEntry(BaseModel):
    """채팅 로그 항목.

    사람 클라이언트 또는 응답 파이프라인이 생성하며, 생성 후에는 수정/삭제하지 않는다.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    key: str | None = Field(default=None, exclude=True, description="저장소가 부여한 푸시 ID")
    text: str | None = Field(default=None, description="메시지 본문")
    author_name: str | None = Field(default=None, alias="uname", description="표시 이름")
    # 원본 값을 그대로 둔다. 게이트는 True만, 이력 라벨은 truthiness로 판단한다.
    is_generated: Any = Field(default=None, alias="isAI", description="생성 응답 여부")
    created_at: int | float | None = Field(
        default=None,
        alias="createdAt",
        description="생성 시각(epoch ms)",
    )

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str | None:
        """본문을 문자열로 맞춘다. 문자열이 아닌 falsy 값은 빈 본문으로 본다."""
        if value is None:
            return None
        if isinstance(value, str):
            return value
        return str(value) if value else ""

    @field_validator("author_name", mode="before")
    @classmethod
    def coerce_author_name(cls, value: Any) -> str | None:
        """빈 이름은 없는 것으로 본다."""
        if value is None or value == "":
            return None
        return value if isinstance(value, str) else str(value)

    @field_validator("created_at", mode="before")
    @classmethod
    def coerce_created_at(cls, value: Any) -> int | float | None:
        """숫자가 아닌 생성 시각은 없는 것으로 본다."""
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        return None

    @classmethod
    def from_payload(cls, payload: Any, key: str | None = None) -> LogEntry | None:
        """저장소 원본 값으로부터 항목을 생성한다.

        Args:
            payload (Any): 저장소 원본 값.
            key (str | None): 푸시 ID.

        Returns:
            LogEntry | None: 객체가 아니면 None.
        """
        if not isinstance(payload, dict):
            return None
        entry = cls.model_validate(payload)
        entry.key = key
        return entry

    def to_payload(self) -> dict[str, Any]:
        """저장소에 기록할 JSON 객체를 반환한다."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def stripped_text(self) -> str:
        """앞뒤 공백을 제거한 본문."""
        return (self.text or "").strip()
