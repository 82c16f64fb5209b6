"""Tests for Config (pydantic-settings) and configure_logging()."""

import logging
from pathlib import Path

import pytest

from roleguard.config import Config, LoggingConfig, configure_logging


class TestConfigDefaults:
    def test_defaults(self) -> None:
        config = Config()

        assert config.logging.level == "INFO"
        assert config.policy.validate_on_startup is True
        assert config.cli.json_output is False

    def test_env_prefix_is_roleguard(self) -> None:
        assert Config.model_config.get("env_prefix") == "ROLEGUARD_"


class TestConfigSources:
    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROLEGUARD_LOGGING__LEVEL", "WARNING")
        monkeypatch.setenv("ROLEGUARD_CLI__JSON_OUTPUT", "true")

        config = Config()

        assert config.logging.level == "WARNING"
        assert config.cli.json_output is True

    def test_yaml_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "roleguard.yaml"
        config_file.write_text("policy:\n  validate_on_startup: false\nlogging:\n  level: DEBUG\n")
        monkeypatch.setenv("ROLEGUARD_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.policy.validate_on_startup is False
        assert config.logging.level == "DEBUG"

    def test_env_beats_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "roleguard.yaml"
        config_file.write_text("logging:\n  level: DEBUG\n")
        monkeypatch.setenv("ROLEGUARD_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("ROLEGUARD_LOGGING__LEVEL", "ERROR")

        assert Config().logging.level == "ERROR"

    def test_missing_yaml_file_is_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROLEGUARD_CONFIG_FILE", str(tmp_path / "absent.yaml"))

        assert Config().logging.level == "INFO"


class TestConfigureLogging:
    def test_stream_handler_by_default(self) -> None:
        configure_logging(LoggingConfig(level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler_when_log_file_set(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        log_file = tmp_path / "logs" / "roleguard.log"
        monkeypatch.setenv("ROLEGUARD_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig(level="INFO"))
        logging.getLogger("roleguard.test").info("hello")

        root = logging.getLogger()
        assert isinstance(root.handlers[0], logging.FileHandler)
        root.handlers[0].flush()
        assert "hello" in log_file.read_text()
        root.handlers[0].close()
