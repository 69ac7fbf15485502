# 목적: 자동 응답 처리를 LangGraph로 구성한다.
# 설명: 게이트 → 이력 조회 → 프롬프트 조립 → 응답 생성 → 기록 흐름을 순차로 연결한다.
# 디자인 패턴: 파이프라인 + 빌더
# 참조: chatresponder/core/responder/nodes, chatresponder/core/responder/state/reply_state.py

"""자동 응답 그래프 구성 모듈."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from langgraph.graph import END, StateGraph

from chatresponder.core.responder.client.gemini_client import GeminiGeneratorClient
from chatresponder.core.responder.const.responder_config import ResponderConfig
from chatresponder.core.responder.model.log_entry import LogEntry
from chatresponder.core.responder.nodes import (
    GenerateNode,
    HistoryReader,
    MentorPromptBuilder,
    ReplyGate,
    ReplyWriter,
)
from chatresponder.core.responder.repository.chat_log_store import ChatLogStore
from chatresponder.core.responder.state.reply_state import ReplyState

LOGGER = logging.getLogger(__name__)


class ReplyGraph:
    """자동 응답 그래프 실행기.

    상태 전이:
        Triggered → Gated{pass|reject} → (reject: 종료) → HistoryFetched
        → PromptBuilt → Generated{ok|failed} → (failed: 종료) → Written → 종료
    """

    def __init__(
        self,
        config: ResponderConfig,
        store: ChatLogStore,
        generator_client: GeminiGeneratorClient,
        writer: ReplyWriter | None = None,
    ) -> None:
        """그래프를 초기화한다.

        Args:
            config (ResponderConfig): 파이프라인 설정.
            store (ChatLogStore): 채팅 로그 저장소.
            generator_client (GeminiGeneratorClient): 생성 API 클라이언트.
            writer (ReplyWriter | None): 응답 기록 노드(선택).
        """
        self._gate = ReplyGate()
        self._history_reader = HistoryReader(store, history_limit=config.history_limit)
        self._prompt_builder = MentorPromptBuilder()
        self._generate = GenerateNode(generator_client)
        self._writer = writer or ReplyWriter(store)
        self._graph = self._build_graph().compile()

    async def run(self, entry: LogEntry | None, trigger_key: str | None = None) -> ReplyState:
        """트리거 항목 하나에 대해 그래프를 실행한다.

        Args:
            entry (LogEntry | None): 새로 생성된 로그 항목.
            trigger_key (str | None): 트리거 항목의 푸시 ID.

        Returns:
            ReplyState: 최종 상태.
        """
        initial_state: ReplyState = {"entry": entry, "trigger_key": trigger_key}
        return await self._graph.ainvoke(initial_state)

    def _build_graph(self) -> StateGraph:
        """자동 응답 그래프를 구성한다.

        Returns:
            StateGraph: 구성된 그래프.
        """
        graph = StateGraph(ReplyState)

        graph.add_node("gate", self._wrap_node("gate", self._gate.run))
        graph.add_node("read_history", self._wrap_node("read_history", self._history_reader.run))
        graph.add_node("build_prompt", self._wrap_node("build_prompt", self._prompt_builder.run))
        graph.add_node("generate", self._wrap_node("generate", self._generate.run))
        graph.add_node("write", self._wrap_node("write", self._writer.run))

        graph.set_entry_point("gate")
        graph.add_conditional_edges(
            "gate",
            self._route_gate,
            {
                "pass": "read_history",
                "reject": END,
            },
        )
        graph.add_conditional_edges(
            "read_history",
            self._route_on_error,
            {
                "ok": "build_prompt",
                "failed": END,
            },
        )
        graph.add_edge("build_prompt", "generate")
        graph.add_conditional_edges(
            "generate",
            self._route_generate,
            {
                "ok": "write",
                "failed": END,
            },
        )
        graph.add_edge("write", END)

        return graph

    def _wrap_node(self, name: str, handler: Callable[[ReplyState], Any]):
        """노드 실행 전후로 상태 요약을 로깅하는 래퍼를 생성한다."""

        async def _wrapped(state: ReplyState) -> ReplyState:
            LOGGER.info("노드 진입: %s, 상태=%s", name, _state_snapshot(state))
            result = handler(state)
            if inspect.isawaitable(result):
                result = await result
            LOGGER.info("노드 종료: %s, 업데이트=%s", name, _state_snapshot(result))
            return result

        return _wrapped

    def _route_gate(self, state: ReplyState) -> str:
        """게이트 판단에 따라 다음 경로를 선택한다."""
        return "pass" if state.get("should_respond") else "reject"

    def _route_on_error(self, state: ReplyState) -> str:
        """에러 코드 유무로 다음 경로를 선택한다."""
        return "failed" if state.get("error_code") is not None else "ok"

    def _route_generate(self, state: ReplyState) -> str:
        """생성 결과로 다음 경로를 선택한다."""
        if state.get("error_code") is not None or not state.get("reply_text"):
            return "failed"
        return "ok"


def _state_snapshot(state: ReplyState | dict) -> dict[str, Any]:
    """로그 출력을 위한 상태 요약을 만든다. 프롬프트/본문은 길이만 남긴다."""
    error_code = state.get("error_code")
    return {
        "trigger_key": state.get("trigger_key"),
        "should_respond": state.get("should_respond"),
        "transcript": len(state["transcript"]) if "transcript" in state else None,
        "prompt_len": len(state["prompt"]) if "prompt" in state else None,
        "reply_len": len(state.get("reply_text") or "") if "reply_text" in state else None,
        "used_fallback": state.get("used_fallback"),
        "status_code": state.get("status_code"),
        "written_key": state.get("written_key"),
        "error_code": error_code.code if error_code is not None else None,
    }
