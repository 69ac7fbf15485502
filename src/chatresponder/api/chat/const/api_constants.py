# 목적: 채팅 로그 API 상수를 정의한다.
# 설명: 라우팅 경로, 태그, 조회 제한 같은 값을 정리한다.
# 디자인 패턴: 상수 객체 패턴
# 참조: chatresponder/api/chat/router

"""채팅 로그 API 상수 모듈."""


class ChatApiConstants:
    """채팅 로그 API 상수."""

    def __init__(self) -> None:
        """상수 값을 초기화한다."""
        self.api_prefix = "/api/v1"
        self.messages_path = "/chat/messages"
        self.tag = "chat"
        self.default_list_limit = 30
        self.max_list_limit = 200
