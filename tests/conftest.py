from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from cbclient.config import get_settings  # noqa: E402

ENV_KEYS = (
    "COINBASE_ACCESS_TOKEN",
    "COINBASE_REST_BASE_URL",
    "COINBASE_TIMEOUT",
    "COINBASE_USER_AGENT",
    "LOG_LEVEL",
    "LOG_FILE_NAME",
    "LOG_DIR",
)


class RecordingTransport:
    """호출 내역을 기록하고 준비된 응답을 순서대로 돌려주는 가짜 전송 계층."""

    def __init__(self, responses: List[Union[bytes, str, Any, Exception]]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def _next(self, verb: str, path: str, payload: Any, timeout: Any) -> bytes:
        if not self._responses:
            raise AssertionError("예상치 못한 추가 호출이 발생했습니다.")
        self.calls.append({"verb": verb, "path": path, "payload": payload, "timeout": timeout})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, bytes):
            return response
        if isinstance(response, str):
            return response.encode("utf-8")
        return json.dumps(response).encode("utf-8")

    def get(self, path: str, params: Optional[Dict[str, str]] = None, *, timeout: Any = None) -> bytes:
        return self._next("GET", path, params, timeout)

    def post_form(self, path: str, data: Dict[str, str], *, timeout: Any = None) -> bytes:
        return self._next("POST_FORM", path, data, timeout)

    def post_json(self, path: str, payload: Any, *, timeout: Any = None) -> bytes:
        return self._next("POST_JSON", path, payload, timeout)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_transport():
    def factory(*responses: Union[bytes, str, Any, Exception]) -> RecordingTransport:
        return RecordingTransport(list(responses))

    return factory
