# 목적: 애플리케이션 설정을 환경 변수에서 읽어 온다.
# 설명: .env를 먼저 로드하고 Redis/워커/응답 파이프라인 설정을 한 객체로 구성한다.
# 디자인 패턴: 팩토리 메서드 패턴
# 참조: chatresponder/main.py, chatresponder/core/responder/const/responder_config.py

"""애플리케이션 설정 모듈."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from chatresponder.core.responder.const.responder_config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_KEY_SECRET_NAME,
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_MODEL_ID,
    DEFAULT_REGION,
    DEFAULT_TEMPERATURE,
    ResponderConfig,
)


class AppConfig(BaseModel):
    """애플리케이션 설정."""

    service_name: str = Field(default="chatresponder", description="서비스 이름")
    redis_host: str = Field(default="localhost", description="Redis 호스트")
    redis_port: int = Field(default=6379, description="Redis 포트")
    redis_db: int = Field(default=0, description="Redis DB 인덱스")
    chat_log_key: str = Field(default="chat", description="채팅 로그 루트 키")
    worker_poll_interval: float = Field(default=0.5, gt=0.0, description="트리거 폴링 간격(초)")
    http_timeout_seconds: float = Field(default=60.0, gt=0.0, description="생성 API 요청 타임아웃(초)")
    responder: ResponderConfig = Field(default_factory=ResponderConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """환경 변수로부터 설정을 생성한다.

        Returns:
            AppConfig: 구성된 설정.
        """
        load_dotenv()
        responder = ResponderConfig(
            region=os.getenv("RESPONDER_REGION", DEFAULT_REGION),
            model_id=os.getenv("GEMINI_MODEL", DEFAULT_MODEL_ID),
            history_limit=_env_int("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT),
            temperature=_env_float("GEMINI_TEMPERATURE", DEFAULT_TEMPERATURE),
            max_output_tokens=_env_int("GEMINI_MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS),
            api_base_url=os.getenv("GEMINI_API_BASE_URL", DEFAULT_API_BASE_URL),
            api_key_secret_name=os.getenv(
                "GEMINI_API_KEY_SECRET_NAME",
                DEFAULT_API_KEY_SECRET_NAME,
            ),
        )
        return cls(
            service_name=os.getenv("SERVICE_NAME", "chatresponder"),
            redis_host=os.getenv("REDIS_HOST", "localhost"),
            redis_port=_env_int("REDIS_PORT", 6379),
            redis_db=_env_int("REDIS_DB", 0),
            chat_log_key=os.getenv("CHAT_LOG_KEY", "chat"),
            worker_poll_interval=_env_float("WORKER_POLL_INTERVAL", 0.5),
            http_timeout_seconds=_env_float("HTTP_TIMEOUT_SECONDS", 60.0),
            responder=responder,
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return float(raw)
    except ValueError:
        return default
