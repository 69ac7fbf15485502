# 목적: 외부 텍스트 생성 API(Gemini generateContent) 클라이언트를 정의한다.
# 설명: 프롬프트를 한 번 POST하고 첫 후보의 첫 텍스트를 추출한다. 실패 상태는 로그 후 결과 값으로 반환한다.
# 디자인 패턴: 게이트웨이
# 참조: chatresponder/core/responder/nodes/generate_node.py, chatresponder/core/common/secret_provider.py

"""생성 API 클라이언트 모듈."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from chatresponder.core.common.secret_provider import SecretProvider
from chatresponder.core.responder.const.responder_config import ResponderConfig
from chatresponder.core.responder.model.outcomes import GenerationOutcome

LOGGER = logging.getLogger(__name__)

FALLBACK_REPLY_TEXT = "ごめん、うまく返せなかった…！もう一回だけ言い方変えてくれる？"


class GeminiGeneratorClient:
    """Gemini generateContent 클라이언트."""

    def __init__(
        self,
        config: ResponderConfig,
        secret_provider: SecretProvider,
        http_client: httpx.AsyncClient,
    ) -> None:
        """클라이언트 의존성을 초기화한다.

        Args:
            config (ResponderConfig): 모델/생성 파라미터 설정.
            secret_provider (SecretProvider): API 키 조회기.
            http_client (httpx.AsyncClient): 공유 HTTP 클라이언트.
        """
        self._config = config
        self._secret_provider = secret_provider
        self._http_client = http_client

    async def generate(self, prompt: str) -> GenerationOutcome:
        """프롬프트로 응답 텍스트를 생성한다.

        재시도/스트리밍은 하지 않는다. 전송 오류(연결 실패, 타임아웃)는 호출자에게 전파된다.

        Args:
            prompt (str): 조립된 프롬프트.

        Returns:
            GenerationOutcome: 응답 텍스트(또는 폴백 문구) 또는 HTTP 실패 결과.
        """
        api_key = self._secret_provider.get(self._config.api_key_secret_name)
        response = await self._http_client.post(
            self._config.generate_url(),
            params={"key": api_key},
            json=self.build_payload(prompt),
        )

        if not response.is_success:
            LOGGER.error(
                "Gemini API error: status=%s body=%s",
                response.status_code,
                response.text,
            )
            return GenerationOutcome.failed(response.status_code)

        reply_text = extract_reply_text(_safe_json(response))
        if not reply_text:
            LOGGER.warning(
                "Gemini 응답에 사용할 텍스트가 없어 폴백 문구를 사용합니다: status=%s",
                response.status_code,
            )
            return GenerationOutcome(
                reply_text=FALLBACK_REPLY_TEXT,
                status_code=response.status_code,
                used_fallback=True,
            )
        return GenerationOutcome(reply_text=reply_text, status_code=response.status_code)

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """요청 본문을 만든다."""
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self._config.temperature,
                "maxOutputTokens": self._config.max_output_tokens,
            },
        }


def extract_reply_text(data: Any) -> str:
    """candidates[0].content.parts[0].text를 추출한다. 없으면 빈 문자열."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        return ""
    part = parts[0]
    text = part.get("text") if isinstance(part, dict) else None
    if not isinstance(text, str):
        return ""
    return text.strip()


def _safe_json(response: httpx.Response) -> Any:
    """본문이 JSON이 아니면 None을 반환한다."""
    try:
        return response.json()
    except ValueError:
        return None
