"""Tests for configuration loading and logging setup."""

import logging

from oriento.utils.config import (
    auth_settings,
    load_config,
    log_level,
    openai_settings,
    server_settings,
)
from oriento.utils.logging import get_logger


class TestLoadConfig:

    def test_missing_file_gives_empty_dict(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml") == {}

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("openai:\n  model: gpt-4.1-mini\n")
        assert load_config(path) == {"openai": {"model": "gpt-4.1-mini"}}

    def test_empty_file_gives_empty_dict(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_env_path_override(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("logging:\n  level: debug\n")
        monkeypatch.setenv("ORIENTO_CONFIG", str(path))
        assert load_config() == {"logging": {"level": "debug"}}


class TestSettings:

    def test_openai_defaults(self, monkeypatch):
        monkeypatch.delenv("OPENAI_MODEL", raising=False)
        monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
        settings = openai_settings({})
        assert settings["model"] == "gpt-4o-mini"
        assert settings["temperature"] == 0.3
        assert settings["base_url"] is None

    def test_openai_env_overrides_file(self, monkeypatch):
        monkeypatch.setenv("OPENAI_MODEL", "gemini-2.0-flash")
        settings = openai_settings({"openai": {"model": "gpt-4o-mini", "temperature": 0.7}})
        assert settings["model"] == "gemini-2.0-flash"
        assert settings["temperature"] == 0.7

    def test_auth_algorithms_from_string(self, monkeypatch):
        monkeypatch.delenv("ORIENTO_JWT_SECRET", raising=False)
        settings = auth_settings({"auth": {"algorithms": "HS256, HS512", "secret": "s"}})
        assert settings["algorithms"] == ["HS256", "HS512"]
        assert settings["secret"] == "s"

    def test_cors_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("ORIENTO_CORS_ORIGINS", "http://localhost:4200, https://oriento.ai")
        assert server_settings({})["cors_origins"] == ["http://localhost:4200", "https://oriento.ai"]

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert log_level({"logging": {"level": "debug"}}) == "DEBUG"


class TestGetLogger:

    def test_single_stdout_handler(self):
        logger = get_logger("oriento.tests.single", level=logging.WARNING)
        get_logger("oriento.tests.single", level=logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.propagate is False

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        logger = get_logger("oriento.tests.env_level")
        assert logger.level == logging.DEBUG
