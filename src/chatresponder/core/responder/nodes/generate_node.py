# 목적: 응답 텍스트를 생성하는 노드를 정의한다.
# 설명: 생성 API 클라이언트를 호출하고 결과를 상태에 반영한다.
# 디자인 패턴: 커맨드
# 참조: chatresponder/core/responder/client/gemini_client.py

"""응답 생성 노드 모듈."""

from chatresponder.core.responder.client.gemini_client import GeminiGeneratorClient
from chatresponder.core.responder.state.reply_state import ReplyState


class GenerateNode:
    """응답 생성 노드."""

    def __init__(self, client: GeminiGeneratorClient) -> None:
        self._client = client

    async def run(self, state: ReplyState) -> ReplyState:
        """프롬프트로 응답을 생성한다."""
        outcome = await self._client.generate(state.get("prompt", ""))
        update: ReplyState = {
            "reply_text": outcome.reply_text,
            "used_fallback": outcome.used_fallback,
            "status_code": outcome.status_code,
        }
        if outcome.error_code is not None:
            update["error_code"] = outcome.error_code
        return update
