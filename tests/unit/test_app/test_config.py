"""
test_config.py - 설정 로드 테스트
"""

from pathlib import Path

import yaml

from src.app.config import (
    build_cache_config,
    build_tour_api_config,
    load_config,
    resolve_service_key,
)
from src.domain.constants import CACHE_CONTROL_TOUR, DEFAULT_BASE_URL


class TestLoadConfig:
    """load_config 테스트."""

    def test_default_yaml(self, default_config_path: Path):
        config = load_config(default_config_path)

        assert config["tour_api"]["retry"]["max_attempts"] == 3
        assert config["tour_api"]["base_url"] == DEFAULT_BASE_URL

    def test_missing_file(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}


class TestServiceKey:
    """서비스 키 결정."""

    def test_primary_env(self):
        environ = {"TOUR_API_KEY": "primary", "NEXT_PUBLIC_TOUR_API_KEY": "public"}

        assert resolve_service_key(environ) == "primary"

    def test_fallback_env(self):
        assert resolve_service_key({"NEXT_PUBLIC_TOUR_API_KEY": "public"}) == "public"

    def test_blank_is_missing(self):
        assert resolve_service_key({"TOUR_API_KEY": "   "}) is None

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TOUR_API_KEY", "from-os")

        assert resolve_service_key() == "from-os"


class TestBuildTourApiConfig:
    """build_tour_api_config 테스트."""

    def test_defaults(self):
        config = build_tour_api_config({}, environ={})

        assert config.service_key is None
        assert config.base_url == DEFAULT_BASE_URL
        assert config.max_attempts == 3
        assert config.initial_delay == 1.0
        assert config.exponential_base == 2.0

    def test_from_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump({
                "tour_api": {
                    "base_url": "https://example.test/api/",
                    "mobile_app": "TestApp",
                    "timeout": 3,
                    "retry": {"max_attempts": 5, "initial_delay": 0.5},
                },
            }),
            encoding="utf-8",
        )

        config = build_tour_api_config(load_config(path), environ={"TOUR_API_KEY": "k"})

        assert config.service_key == "k"
        assert config.base_url == "https://example.test/api"
        assert config.mobile_app == "TestApp"
        assert config.timeout == 3.0
        assert config.max_attempts == 5
        assert config.initial_delay == 0.5

    def test_cache_config_defaults(self):
        assert build_cache_config({}).tour == CACHE_CONTROL_TOUR
