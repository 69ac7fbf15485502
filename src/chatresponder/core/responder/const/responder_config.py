# 목적: 자동 응답 파이프라인 설정 값을 정의한다.
# 설명: 리전/모델/이력 범위/생성 파라미터를 하나의 불변 값으로 묶어 파이프라인에 주입한다.
# 디자인 패턴: Value Object
# 참조: chatresponder/core/common/app_config.py, chatresponder/core/responder/graph/reply_graph.py

"""응답 파이프라인 설정 모듈."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REGION = "us-central1"
DEFAULT_MODEL_ID = "gemini-2.0-pro"
DEFAULT_HISTORY_LIMIT = 30
DEFAULT_TEMPERATURE = 0.4
DEFAULT_MAX_OUTPUT_TOKENS = 700
DEFAULT_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_API_KEY_SECRET_NAME = "GEMINI_API_KEY"


class ResponderConfig(BaseModel):
    """응답 파이프라인 설정."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    region: str = Field(default=DEFAULT_REGION, description="배포 리전")
    model_id: str = Field(default=DEFAULT_MODEL_ID, min_length=1, description="생성 모델 식별자")
    history_limit: int = Field(default=DEFAULT_HISTORY_LIMIT, ge=1, description="조회할 최근 로그 수")
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0, description="생성 온도")
    max_output_tokens: int = Field(
        default=DEFAULT_MAX_OUTPUT_TOKENS,
        ge=1,
        description="최대 출력 토큰 수",
    )
    api_base_url: str = Field(default=DEFAULT_API_BASE_URL, description="생성 API 기본 URL")
    api_key_secret_name: str = Field(
        default=DEFAULT_API_KEY_SECRET_NAME,
        min_length=1,
        description="API 키 시크릿 이름",
    )

    def generate_url(self) -> str:
        """generateContent 엔드포인트 URL을 반환한다(키 제외)."""
        base = self.api_base_url.rstrip("/")
        return f"{base}/models/{self.model_id}:generateContent"
