# 목적: 응답 생성 프롬프트를 조립하는 노드를 정의한다.
# 설명: 고정 페르소나, 최근 대화, 최신 사용자 발언을 결정적으로 결합한다.
# 디자인 패턴: 빌더 패턴
# 참조: chatresponder/core/responder/prompts/mentor_prompt.py

"""프롬프트 조립 노드 모듈."""

from collections.abc import Sequence

from chatresponder.core.responder.model.transcript_line import TranscriptLine
from chatresponder.core.responder.prompts.mentor_prompt import REPLY_PROMPT
from chatresponder.core.responder.state.reply_state import ReplyState


class MentorPromptBuilder:
    """멘토 프롬프트 조립 노드."""

    def build(self, transcript_lines: Sequence[TranscriptLine], user_text: str) -> str:
        """프롬프트 문자열을 만든다.

        Args:
            transcript_lines (Sequence[TranscriptLine]): 오래된 순 이력 라인.
            user_text (str): 트리거 메시지 본문.

        Returns:
            str: 조립된 프롬프트.
        """
        history = "\n".join(line.render() for line in transcript_lines)
        prompt = REPLY_PROMPT.format(history=history, user_text=user_text.strip())
        return prompt.strip()

    def run(self, state: ReplyState) -> ReplyState:
        """조립 결과를 상태 업데이트로 반환한다."""
        prompt = self.build(state.get("transcript", []), state.get("user_text", ""))
        return {"prompt": prompt}
