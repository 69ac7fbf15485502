# 목적: 응답 노드 모듈을 외부에 노출한다.
# 설명: 게이트/이력/프롬프트/생성/기록 노드를 집계한다.
# 디자인 패턴: 파사드
# 참조: chatresponder/core/responder/graph/reply_graph.py

"""응답 노드 패키지."""

from chatresponder.core.responder.nodes.gate_node import ReplyGate
from chatresponder.core.responder.nodes.generate_node import GenerateNode
from chatresponder.core.responder.nodes.history_node import HistoryReader
from chatresponder.core.responder.nodes.prompt_node import MentorPromptBuilder
from chatresponder.core.responder.nodes.write_node import ReplyWriter

__all__ = [
    "ReplyGate",
    "HistoryReader",
    "MentorPromptBuilder",
    "GenerateNode",
    "ReplyWriter",
]
