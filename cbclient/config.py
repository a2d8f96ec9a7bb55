"""환경변수 기반 클라이언트 설정 로더."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from .utils.exceptions import ConfigurationError

ROOT_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = ROOT_DIR / ".env"
load_dotenv(ENV_FILE)

DEFAULT_REST_BASE_URL = "https://coinbase.com/api/v1"
DEFAULT_USER_AGENT = "cbclient/0.1 (+https://github.com/user/cbclient)"


def _to_int(value: str | int | None, default: int) -> int:
    """문자열 값을 정수로 변환한다."""
    if isinstance(value, int):
        return value
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_float(value: str | float | None, default: float) -> float:
    """문자열 값을 실수로 변환한다."""
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


class LoggingSettings(BaseModel):
    """로깅 관련 설정."""

    model_config = ConfigDict(populate_by_name=True)

    level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    file_name: str = Field(default="")
    rotation_when: str = Field(default="midnight")
    rotation_interval: int = Field(default=1, ge=1)
    backup_count: int = Field(default=7, ge=0)

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """환경변수에서 로깅 설정을 생성한다."""
        log_dir_value = os.getenv("LOG_DIR", "logs")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(log_dir_value).expanduser(),
            file_name=os.getenv("LOG_FILE_NAME", ""),
            rotation_when=os.getenv("LOG_ROTATION_WHEN", "midnight"),
            rotation_interval=_to_int(os.getenv("LOG_ROTATION_INTERVAL"), 1),
            backup_count=_to_int(os.getenv("LOG_BACKUP_COUNT"), 7),
        )

    @property
    def normalized_level(self) -> str:
        """대문자로 정규화된 로그 레벨."""
        return self.level.upper()

    @property
    def file_enabled(self) -> bool:
        """파일 핸들러 사용 여부."""
        return bool(self.file_name.strip())

    def resolve_log_dir(self, root_dir: Path) -> Path:
        """루트 경로 기준 로그 디렉터리를 반환한다."""
        if self.log_dir.is_absolute():
            return self.log_dir
        return (root_dir / self.log_dir).resolve()

    def resolve_log_path(self, root_dir: Path) -> Path:
        """루트 경로 기준 로그 파일 전체 경로."""
        return self.resolve_log_dir(root_dir) / self.file_name


class CoinbaseSettings(BaseModel):
    """코인베이스 API 관련 설정."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: Optional[SecretStr] = Field(default=None)
    rest_base_url: str = Field(default=DEFAULT_REST_BASE_URL)
    timeout: float = Field(default=10.0, gt=0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    @classmethod
    def from_env(cls) -> "CoinbaseSettings":
        """환경변수에서 코인베이스 API 설정을 생성한다."""
        access_token = os.getenv("COINBASE_ACCESS_TOKEN")
        return cls(
            access_token=SecretStr(access_token) if access_token else None,
            rest_base_url=os.getenv("COINBASE_REST_BASE_URL", DEFAULT_REST_BASE_URL),
            timeout=_to_float(os.getenv("COINBASE_TIMEOUT"), 10.0),
            user_agent=os.getenv("COINBASE_USER_AGENT", DEFAULT_USER_AGENT),
        )


class AppSettings(BaseModel):
    """라이브러리 전반에 사용되는 설정 묶음."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root_dir: Path = Field(default=ROOT_DIR)
    environment: str = Field(default="development")
    coinbase: CoinbaseSettings = Field(default_factory=CoinbaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls) -> "AppSettings":
        """환경변수 및 기본값을 반영하여 설정 인스턴스를 생성한다."""
        try:
            return cls(
                root_dir=ROOT_DIR,
                environment=os.getenv("APP_ENV", "development"),
                coinbase=CoinbaseSettings.from_env(),
                logging=LoggingSettings.from_env(),
            )
        except ValidationError as exc:
            raise ConfigurationError(f"설정 값이 올바르지 않습니다: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """전역 설정을 캐시하여 반환한다."""
    return AppSettings.load()


__all__ = [
    "AppSettings",
    "CoinbaseSettings",
    "DEFAULT_REST_BASE_URL",
    "DEFAULT_USER_AGENT",
    "LoggingSettings",
    "get_settings",
]
