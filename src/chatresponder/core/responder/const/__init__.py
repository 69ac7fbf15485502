# 목적: 응답 코어 상수를 외부에 노출한다.
# 설명: 에러 코드/역할 라벨/설정을 집계한다.
# 디자인 패턴: 파사드
# 참조: chatresponder/core/responder/const/error_code.py

"""응답 코어 상수 패키지."""

from chatresponder.core.responder.const.author_role import GENERATED_AUTHOR_LABEL, AuthorRole
from chatresponder.core.responder.const.error_code import ErrorCode
from chatresponder.core.responder.const.responder_config import ResponderConfig

__all__ = [
    "AuthorRole",
    "GENERATED_AUTHOR_LABEL",
    "ErrorCode",
    "ResponderConfig",
]
