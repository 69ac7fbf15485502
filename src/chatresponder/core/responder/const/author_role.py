# 목적: 채팅 로그 작성자 역할 라벨을 정의한다.
# 설명: 생성 응답의 작성자 라벨은 루프 방지 판단에도 사용된다.
# 디자인 패턴: Value Object
# 참조: chatresponder/core/responder/nodes/gate_node.py

"""작성자 역할 상수 모듈."""

from enum import Enum


class AuthorRole(str, Enum):
    """작성자 역할."""

    AI = "AI"
    USER = "USER"


GENERATED_AUTHOR_LABEL = AuthorRole.AI.value
