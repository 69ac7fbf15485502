# 목적: 시크릿 조회 인터페이스를 정의한다.
# 설명: API 키 같은 자격 증명을 호출 시점에 이름으로 조회한다. 값은 로그에 남기지 않는다.
# 디자인 패턴: 전략 패턴
# 참조: chatresponder/core/responder/client/gemini_client.py

"""시크릿 제공자 모듈."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod


class SecretNotFoundError(LookupError):
    """시크릿을 찾지 못했을 때 발생한다."""

    def __init__(self, name: str) -> None:
        super().__init__(f"시크릿을 찾을 수 없습니다: {name}")
        self.name = name


class SecretProvider(ABC):
    """시크릿 제공자 베이스."""

    @abstractmethod
    def get(self, name: str) -> str:
        """이름으로 시크릿 값을 조회한다.

        Args:
            name (str): 시크릿 이름.

        Returns:
            str: 시크릿 값.

        Raises:
            SecretNotFoundError: 시크릿이 없거나 비어 있을 때.
        """


class EnvSecretProvider(SecretProvider):
    """환경 변수 기반 시크릿 제공자."""

    def get(self, name: str) -> str:
        value = os.getenv(name, "").strip()
        if not value:
            raise SecretNotFoundError(name)
        return value
