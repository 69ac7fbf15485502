# 목적: 응답 파이프라인 에러 코드를 정의한다.
# 설명: 단계별 실패 유형과 운영 로그용 설명을 함께 관리한다.
# 디자인 패턴: Value Object
# 참조: chatresponder/core/responder/model/outcomes.py

"""에러 코드 상수 모듈."""

from enum import Enum


class ErrorCode(Enum):
    """에러 코드와 설명 정의.

    실패는 로그로만 남기며 채팅 로그에는 아무것도 쓰지 않는다.
    """

    HISTORY = ("history_failed", "대화 이력 조회에 실패해 응답을 중단합니다.")
    GENERATOR_HTTP = ("generator_http_failed", "생성 API가 실패 상태를 반환해 응답을 건너뜁니다.")
    WRITE = ("write_failed", "응답 기록에 실패했습니다.")
    UNKNOWN = ("unknown_error", "처리 중 예상하지 못한 오류가 발생했습니다.")

    @property
    def code(self) -> str:
        """시스템 식별자 문자열을 반환한다."""
        return self.value[0]

    @property
    def description(self) -> str:
        """로그에 남길 설명을 반환한다."""
        return self.value[1]

