# 목적: 채팅 라우터 등록 함수를 제공한다.
# 설명: app.state에 있는 서비스 객체를 사용해 라우터를 등록한다.
# 디자인 패턴: 레지스트리 패턴
# 참조: chatresponder/api/chat/router/chat_message_router.py

"""채팅 라우터 등록 모듈."""

from fastapi import FastAPI

from chatresponder.api.chat.router.chat_message_router import ChatMessageRouter


def register_routes(app: FastAPI) -> None:
    """채팅 라우터를 앱에 등록한다.

    Args:
        app (FastAPI): FastAPI 애플리케이션.
    """
    message_service = getattr(app.state, "chat_message_service", None)
    if message_service is None:
        raise RuntimeError("app.state에 chat_message_service가 없습니다.")

    app.include_router(ChatMessageRouter(message_service).build())


__all__ = ["register_routes"]
