"""``cbclient`` 네임스페이스 로거 관리.

라이브러리 로거는 기본적으로 ``NullHandler`` 만 가지며 상위(root) 로거로 전파한다.
애플리케이션이 별도로 로깅을 구성하지 않았다면 :func:`configure_logging` 으로
환경변수(LOG_*) 기반 핸들러를 ``cbclient`` 로거에만 붙일 수 있다. root 로거와
다른 라이브러리의 핸들러는 건드리지 않는다.
"""

from __future__ import annotations

import logging
from logging import Handler, Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import List

from ..config import get_settings

LIBRARY_LOGGER_NAME = "cbclient"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
_library_logger.addHandler(logging.NullHandler())
_installed_handlers: List[Handler] = []


def _ensure_directory(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _build_handlers() -> List[Handler]:
    """설정에 맞는 콘솔/파일 핸들러를 생성한다."""
    settings = get_settings()
    logging_settings = settings.logging
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: List[Handler] = [logging.StreamHandler()]
    if logging_settings.file_enabled:
        log_path = logging_settings.resolve_log_path(settings.root_dir)
        _ensure_directory(log_path)
        handlers.append(
            TimedRotatingFileHandler(
                str(log_path),
                when=logging_settings.rotation_when,
                interval=logging_settings.rotation_interval,
                backupCount=logging_settings.backup_count,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(logging_settings.normalized_level)
    return handlers


def configure_logging(force: bool = False) -> Logger:
    """``cbclient`` 로거에 핸들러를 붙이고 반환한다. ``force`` 가 아니면 한 번만 적용된다."""
    if _installed_handlers and not force:
        return _library_logger
    reset_logging()

    handlers = _build_handlers()
    for handler in handlers:
        _library_logger.addHandler(handler)
    _installed_handlers.extend(handlers)
    _library_logger.setLevel(get_settings().logging.normalized_level)
    # 자체 핸들러가 있으므로 root 로 중복 출력하지 않는다.
    _library_logger.propagate = False
    return _library_logger


def reset_logging() -> None:
    """:func:`configure_logging` 이 붙인 핸들러를 제거하고 기본 상태로 되돌린다."""
    while _installed_handlers:
        handler = _installed_handlers.pop()
        _library_logger.removeHandler(handler)
        handler.close()
    _library_logger.setLevel(logging.NOTSET)
    _library_logger.propagate = True


def get_logger(name: str) -> Logger:
    """``cbclient`` 네임스페이스 아래의 로거를 반환한다."""
    if name != LIBRARY_LOGGER_NAME and not name.startswith(f"{LIBRARY_LOGGER_NAME}."):
        name = f"{LIBRARY_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = [
    "LIBRARY_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
