"""
설정 로드.

- default.yaml (프로젝트 루트) → tour_api / cache 섹션
- 서비스 키는 환경변수에서 시작 시 한 번만 읽어 TourApiConfig에 주입
- 클라이언트는 환경변수를 직접 읽지 않음
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    CACHE_CONTROL_INFINITE,
    CACHE_CONTROL_TOUR,
    DEFAULT_BASE_URL,
    DEFAULT_EXPONENTIAL_BASE,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MOBILE_APP,
    DEFAULT_MOBILE_OS,
    DEFAULT_TIMEOUT,
)

logger = logging.getLogger(__name__)

# 우선순위: TOUR_API_KEY > NEXT_PUBLIC_TOUR_API_KEY
SERVICE_KEY_ENV_VARS = ("TOUR_API_KEY", "NEXT_PUBLIC_TOUR_API_KEY")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드 (없으면 빈 dict)."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


@dataclass(frozen=True)
class TourApiConfig:
    """
    Tour API 클라이언트 설정.

    service_key가 없으면 클라이언트 호출 시 ConfigurationError.
    """
    service_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    mobile_os: str = DEFAULT_MOBILE_OS
    mobile_app: str = DEFAULT_MOBILE_APP
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_delay: float = DEFAULT_INITIAL_DELAY
    exponential_base: float = DEFAULT_EXPONENTIAL_BASE


@dataclass(frozen=True)
class CacheConfig:
    """프록시 라우트 Cache-Control 헤더 (edge 캐시 힌트)."""
    tour: str = CACHE_CONTROL_TOUR
    infinite: str = CACHE_CONTROL_INFINITE


def resolve_service_key(environ: Mapping[str, str] | None = None) -> str | None:
    """환경변수에서 서비스 키 결정 (공백만 있으면 없는 것으로 처리)."""
    if environ is None:
        environ = os.environ
    for name in SERVICE_KEY_ENV_VARS:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return None


def build_tour_api_config(
    config: dict | None = None,
    environ: Mapping[str, str] | None = None,
) -> TourApiConfig:
    """
    설정 dict + 환경변수 → TourApiConfig.

    Args:
        config: load_config() 결과
        environ: 환경변수 (None이면 os.environ)
    """
    section = (config or {}).get("tour_api", {}) or {}
    retry = section.get("retry", {}) or {}

    service_key = resolve_service_key(environ)
    if service_key is None:
        logger.warning(
            f"Tour API service key not set ({' / '.join(SERVICE_KEY_ENV_VARS)})"
        )

    return TourApiConfig(
        service_key=service_key,
        base_url=str(section.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        mobile_os=str(section.get("mobile_os", DEFAULT_MOBILE_OS)),
        mobile_app=str(section.get("mobile_app", DEFAULT_MOBILE_APP)),
        timeout=float(section.get("timeout", DEFAULT_TIMEOUT)),
        max_attempts=int(retry.get("max_attempts", DEFAULT_MAX_ATTEMPTS)),
        initial_delay=float(retry.get("initial_delay", DEFAULT_INITIAL_DELAY)),
        exponential_base=float(
            retry.get("exponential_base", DEFAULT_EXPONENTIAL_BASE)
        ),
    )


def build_cache_config(config: dict | None = None) -> CacheConfig:
    """설정 dict → CacheConfig."""
    section = (config or {}).get("cache", {}) or {}
    return CacheConfig(
        tour=str(section.get("tour", CACHE_CONTROL_TOUR)),
        infinite=str(section.get("infinite", CACHE_CONTROL_INFINITE)),
    )
