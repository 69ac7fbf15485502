# 목적: 애플리케이션 공통 로깅 설정을 제공한다.
# 설명: 루트 로거에 콘솔/회전 파일 핸들러를 한 번만 붙이고, HTTP 클라이언트 로거는 WARNING으로 올린다.
# 디자인 패턴: 팩토리 메서드 패턴
# 참조: chatresponder/main.py, chatresponder/core/responder/client/gemini_client.py

"""공통 로깅 설정 모듈."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(threadName)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 생성 API 요청 URL에는 키가 쿼리로 붙는다. INFO 요청 로그가 남지 않게 한다.
_QUIET_LOGGERS = ("httpx", "httpcore")

_configured = False


def configure_logging(service_name: str = "chatresponder", level: str | None = None) -> None:
    """애플리케이션 로깅을 초기화한다.

    두 번째 호출부터는 아무것도 하지 않는다.

    Args:
        service_name (str): 기본 로그 파일 이름에 사용할 서비스 이름.
        level (str | None): 로그 레벨. 없으면 LOG_LEVEL 환경 변수(기본 INFO)를 사용한다.
    """
    global _configured
    if _configured:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    for handler in (logging.StreamHandler(), _file_handler(service_name)):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def _file_handler(service_name: str) -> RotatingFileHandler:
    """LOG_* 환경 변수로 회전 파일 핸들러를 만든다."""
    log_dir = _log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=log_dir / os.getenv("LOG_FILE_NAME", f"{service_name}.log"),
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024))),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        encoding="utf-8",
    )


def _log_dir() -> Path:
    """LOG_DIR가 없으면 src 상위의 logs 디렉터리를 쓴다."""
    configured = os.getenv("LOG_DIR")
    if configured:
        return Path(configured)
    here = Path(__file__).resolve()
    src_root = next((parent for parent in here.parents if parent.name == "src"), None)
    if src_root is None:
        return here.parent / "logs"
    return src_root.parent / "logs"
