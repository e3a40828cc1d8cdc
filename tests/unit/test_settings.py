"""
Tests for settings and logging setup.
"""

from decimal import Decimal

import pytest
from loguru import logger
from pydantic import ValidationError

from orgrewards.config.settings import Settings
from orgrewards.logging_setup import setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("ORGREWARDS_MINING_RATE", raising=False)
        monkeypatch.delenv("ORGREWARDS_LOG_FILE", raising=False)

        config = Settings(_env_file=None)

        assert config.mining_rate == Decimal("0.007")
        assert config.currency_symbol == "$"
        assert config.log_level == "INFO"
        assert config.log_file == "logs/orgrewards.log"

    def test_env_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("ORGREWARDS_MINING_RATE", "0.009")
        monkeypatch.setenv("ORGREWARDS_LOG_LEVEL", "debug")

        config = Settings(_env_file=None)

        assert config.mining_rate == Decimal("0.009")
        assert config.log_level == "DEBUG"

    def test_rate_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, mining_rate=Decimal("1.5"))
        with pytest.raises(ValidationError):
            Settings(_env_file=None, mining_rate=Decimal("-0.001"))

    def test_non_preset_rate_warns(self, log_messages) -> None:
        config = Settings(_env_file=None, mining_rate=Decimal("0.0075"))

        assert config.mining_rate == Decimal("0.0075")
        assert any("not a preset rate" in message for message in log_messages)

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_blank_log_file_disables_file_sink(self) -> None:
        assert Settings(_env_file=None, log_file=" ").log_file is None


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_sink(self, tmp_path) -> None:
        log_file = tmp_path / "orgrewards.log"
        config = Settings(_env_file=None, log_file=str(log_file), log_level="INFO")

        setup_logging(config)
        logger.info("file sink check")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "Logging configured at INFO" in content
        assert "file sink check" in content

    def test_without_file(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = Settings(_env_file=None, log_file=None)

        setup_logging(config)
        logger.remove()

        assert not (tmp_path / "logs").exists()
