"""코인베이스 REST API 호출을 담당하는 HTTP 전송 계층."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Protocol, Tuple, Union

import requests
from requests import Response, Session
from requests.auth import AuthBase

from ..config import get_settings
from ..utils.exceptions import TransportError
from ..utils.logger import get_logger

JsonMapping = Mapping[str, Any]
Headers = Mapping[str, str]
Timeout = Union[float, Tuple[float, float]]


class HttpMethod(str, Enum):
    """지원하는 HTTP 메서드."""

    GET = "GET"
    POST = "POST"


class Transport(Protocol):
    """엔드포인트 함수가 사용하는 전송 계층 인터페이스."""

    def get(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        *,
        timeout: Optional[Timeout] = None,
    ) -> bytes:
        ...

    def post_form(
        self,
        path: str,
        data: Mapping[str, str],
        *,
        timeout: Optional[Timeout] = None,
    ) -> bytes:
        ...

    def post_json(
        self,
        path: str,
        payload: Any,
        *,
        timeout: Optional[Timeout] = None,
    ) -> bytes:
        ...


class HttpTransport:
    """``requests.Session`` 기반 기본 전송 계층."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[Session] = None,
        timeout: Optional[Timeout] = None,
        user_agent: Optional[str] = None,
        access_token: Optional[str] = None,
        auth: Optional[AuthBase] = None,
    ) -> None:
        coinbase_settings = get_settings().coinbase

        resolved_base_url = (base_url or coinbase_settings.rest_base_url).rstrip("/")
        self._base_url = resolved_base_url
        self._timeout: Timeout = timeout if timeout is not None else coinbase_settings.timeout
        self._session: Session = session or requests.Session()
        self._owns_session = session is None
        self._auth = auth
        self._default_headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": user_agent or coinbase_settings.user_agent,
        }

        resolved_token = access_token or (
            coinbase_settings.access_token.get_secret_value() if coinbase_settings.access_token else None
        )
        if resolved_token:
            self._default_headers["Authorization"] = f"Bearer {resolved_token}"
        self._logger = get_logger(__name__)

    @property
    def base_url(self) -> str:
        """REST API 기본 URL."""

        return self._base_url

    @property
    def timeout(self) -> Timeout:
        """요청 기본 타임아웃."""

        return self._timeout

    @property
    def session(self) -> Session:
        """내부 HTTP 세션."""

        return self._session

    def close(self) -> None:
        """직접 생성한 세션만 종료한다."""

        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # 내부 유틸리티
    # ------------------------------------------------------------------
    def _build_url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _merge_headers(self, extra_headers: Optional[Headers]) -> dict[str, str]:
        merged = dict(self._default_headers)
        if extra_headers:
            merged.update(extra_headers)
        return merged

    def _request(
        self,
        method: HttpMethod,
        path: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        data: Optional[Mapping[str, str]] = None,
        json_payload: Any = None,
        headers: Optional[Headers] = None,
        timeout: Optional[Timeout] = None,
    ) -> bytes:
        url = self._build_url(path)
        self._logger.debug("코인베이스 API 요청: %s %s", method.value, url)
        try:
            response = self._session.request(
                method=method.value,
                url=url,
                params=dict(params) if params else None,
                data=dict(data) if data is not None else None,
                json=json_payload,
                headers=self._merge_headers(headers),
                auth=self._auth,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"코인베이스 API 호출 중 네트워크 오류가 발생했습니다: {exc}") from exc
        return self._handle_response(response)

    def _handle_response(self, response: Response) -> bytes:
        status_code = response.status_code
        # 3xx 도 성공 응답으로 보지 않는다.
        if not 200 <= status_code < 300:
            detail = response.text
            raise TransportError(
                f"코인베이스 API 호출 실패: HTTP {status_code} - {detail}",
                status_code=status_code,
                body=detail,
            )
        return response.content

    # ------------------------------------------------------------------
    # 공개 메서드
    # ------------------------------------------------------------------
    def get(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        *,
        timeout: Optional[Timeout] = None,
    ) -> bytes:
        return self._request(HttpMethod.GET, path, params=params, timeout=timeout)

    def post_form(
        self,
        path: str,
        data: Mapping[str, str],
        *,
        timeout: Optional[Timeout] = None,
    ) -> bytes:
        return self._request(
            HttpMethod.POST,
            path,
            data=data,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=timeout,
        )

    def post_json(
        self,
        path: str,
        payload: Any,
        *,
        timeout: Optional[Timeout] = None,
    ) -> bytes:
        return self._request(HttpMethod.POST, path, json_payload=payload, timeout=timeout)


__all__ = [
    "Headers",
    "HttpMethod",
    "HttpTransport",
    "JsonMapping",
    "Timeout",
    "Transport",
]
