# 목적: 채팅 메시지 라우터를 정의한다.
# 설명: 메시지 작성/최근 로그 조회 요청을 서비스로 전달한다.
# 디자인 패턴: 라우터 패턴
# 참조: chatresponder/api/chat/service/chat_message_service.py

"""채팅 메시지 라우터 모듈."""

from fastapi import APIRouter, HTTPException, Query

from chatresponder.api.chat.const.api_constants import ChatApiConstants
from chatresponder.api.chat.model.request import ChatMessageRequest
from chatresponder.api.chat.model.response import ChatLogResponse, ChatMessageResponse
from chatresponder.api.chat.service.chat_message_service import ChatMessageService
from chatresponder.core.responder.repository.chat_log_store import ChatLogStoreError

_CONSTANTS = ChatApiConstants()


class ChatMessageRouter:
    """채팅 메시지 라우터."""

    def __init__(self, service: ChatMessageService) -> None:
        """라우터를 초기화한다.

        Args:
            service (ChatMessageService): 채팅 메시지 서비스.
        """
        self._service = service
        self._constants = _CONSTANTS

    def build(self) -> APIRouter:
        """라우터를 생성해 반환한다.

        Returns:
            APIRouter: 구성된 라우터.
        """
        router = APIRouter(prefix=self._constants.api_prefix, tags=[self._constants.tag])
        router.add_api_route(
            path=self._constants.messages_path,
            endpoint=self.post_message,
            methods=["POST"],
            response_model=ChatMessageResponse,
            status_code=201,
        )
        router.add_api_route(
            path=self._constants.messages_path,
            endpoint=self.list_messages,
            methods=["GET"],
            response_model=ChatLogResponse,
        )
        return router

    async def post_message(self, request: ChatMessageRequest) -> ChatMessageResponse:
        """메시지 작성 요청을 처리한다."""
        try:
            return await self._service.post_message(request)
        except ChatLogStoreError as exc:
            raise HTTPException(status_code=503, detail="채팅 로그 저장소를 사용할 수 없습니다.") from exc

    async def list_messages(
        self,
        limit: int = Query(
            default=_CONSTANTS.default_list_limit,
            ge=1,
            le=_CONSTANTS.max_list_limit,
        ),
    ) -> ChatLogResponse:
        """최근 로그 조회 요청을 처리한다."""
        try:
            return await self._service.list_recent(limit)
        except ChatLogStoreError as exc:
            raise HTTPException(status_code=503, detail="채팅 로그 저장소를 사용할 수 없습니다.") from exc
