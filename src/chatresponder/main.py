# 목적: FastAPI 애플리케이션 진입점을 제공한다.
# 설명: uvicorn에서 "chatresponder.main:app" 형태로 실행할 수 있는 앱 객체를 정의하고 트리거 워커를 함께 구동한다.
# 디자인 패턴: 팩토리 메서드 패턴(애플리케이션 생성 책임 분리)
# 참조: chatresponder/api, chatresponder/core

"""FastAPI 애플리케이션 진입점 모듈."""

from __future__ import annotations

import asyncio
import logging

import httpx
from fastapi import FastAPI

from chatresponder.api.chat.router import register_routes
from chatresponder.api.chat.service.chat_message_service import ChatMessageService
from chatresponder.core.common.app_config import AppConfig
from chatresponder.core.common.logging_config import configure_logging
from chatresponder.core.common.redis_connection_provider import RedisConnectionProvider
from chatresponder.core.common.secret_provider import EnvSecretProvider, SecretProvider
from chatresponder.core.responder.client.gemini_client import GeminiGeneratorClient
from chatresponder.core.responder.graph.reply_graph import ReplyGraph
from chatresponder.core.responder.repository import ChatLogStore, RedisChatLogStore
from chatresponder.core.responder.service.reply_service import ReplyService
from chatresponder.core.responder.worker.reply_trigger_worker import ReplyTriggerWorker

LOGGER = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    store: ChatLogStore | None = None,
    secret_provider: SecretProvider | None = None,
    http_client: httpx.AsyncClient | None = None,
    start_worker: bool = True,
) -> FastAPI:
    """FastAPI 애플리케이션을 생성한다.

    Args:
        config (AppConfig | None): 설정. 없으면 환경 변수에서 읽는다.
        store (ChatLogStore | None): 채팅 로그 저장소. 없으면 Redis 저장소를 사용한다.
        secret_provider (SecretProvider | None): 시크릿 제공자. 없으면 환경 변수를 사용한다.
        http_client (httpx.AsyncClient | None): 생성 API용 HTTP 클라이언트.
        start_worker (bool): 시작 시 트리거 워커 구동 여부.

    Returns:
        FastAPI: 구성된 애플리케이션 인스턴스.
    """
    config = config or AppConfig.from_env()
    configure_logging(service_name=config.service_name)
    app = FastAPI(title="chatresponder API")

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        """간단한 헬스 체크 엔드포인트."""
        return {"status": "ok"}

    redis_provider: RedisConnectionProvider | None = None
    if store is None:
        redis_provider = RedisConnectionProvider(config)
        store = RedisChatLogStore(redis_provider.get_client(), root_key=config.chat_log_key)
    http_client = http_client or httpx.AsyncClient(timeout=config.http_timeout_seconds)

    generator_client = GeminiGeneratorClient(
        config.responder,
        secret_provider or EnvSecretProvider(),
        http_client,
    )
    reply_service = ReplyService(ReplyGraph(config.responder, store, generator_client))
    reply_worker = ReplyTriggerWorker(
        store,
        reply_service,
        poll_interval=config.worker_poll_interval,
    )

    app.state.config = config
    app.state.chat_log_store = store
    app.state.chat_message_service = ChatMessageService(store)
    app.state.reply_service = reply_service
    app.state.reply_worker = reply_worker
    app.state.reply_worker_task = None
    register_routes(app)

    @app.on_event("startup")
    async def startup_worker() -> None:
        """앱 시작 시 트리거 워커를 시작한다."""
        LOGGER.info(
            "자동 응답 시작: region=%s model=%s history_limit=%s",
            config.responder.region,
            config.responder.model_id,
            config.responder.history_limit,
        )
        if start_worker and app.state.reply_worker_task is None:
            app.state.reply_worker_task = asyncio.create_task(
                reply_worker.run_forever(),
                name="reply-trigger-worker",
            )

    @app.on_event("shutdown")
    async def shutdown_worker() -> None:
        """앱 종료 시 워커를 중지하고 HTTP/Redis 클라이언트를 닫는다."""
        reply_worker.stop()
        task = app.state.reply_worker_task
        if task is not None:
            await task
            app.state.reply_worker_task = None
        await http_client.aclose()
        if redis_provider is not None:
            await redis_provider.close()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("chatresponder.main:app", host="0.0.0.0", port=8000, reload=True)
