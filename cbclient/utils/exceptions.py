"""클라이언트 공통 예외 계층."""

from __future__ import annotations

from typing import Optional


class AppError(Exception):
    """라이브러리 전반에서 사용하는 기본 예외 클래스."""


class ConfigurationError(AppError):
    """환경 설정이나 필수 값이 잘못된 경우 발생."""


class ExchangeError(AppError):
    """코인베이스 API 호출 중 발생한 예외."""


class TransportError(ExchangeError):
    """네트워크 오류 또는 2xx 이외의 HTTP 응답.

    ``status_code`` 는 응답을 받지 못한 경우 ``None`` 이다.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(ExchangeError):
    """응답 본문을 기대한 구조로 해석하지 못한 경우."""

    def __init__(self, message: str, *, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body


__all__ = [
    "AppError",
    "ConfigurationError",
    "DecodeError",
    "ExchangeError",
    "TransportError",
]
