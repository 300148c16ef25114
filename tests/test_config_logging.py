"""Tests for config and logging."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from iso_iban.config import GeneratorConfig, IbanConfig
from iso_iban.exceptions import ConfigurationError
from iso_iban.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = [
    "IBAN_SEED",
    "IBAN_COUNTRIES",
    "IBAN_COUNTRY_WEIGHTS",
    "IBAN_LOCALE",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env():
    """Environment without any iso-iban variables."""
    env = {k: v for k, v in os.environ.items() if k not in ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = GeneratorConfig()

        assert config.seed is None
        assert config.countries == ()
        assert config.country_weights is None
        assert config.locale == "en_US"

    def test_custom_values(self) -> None:
        """Test custom configuration values."""
        config = GeneratorConfig(seed=7, countries=("CH", "DE"), locale="de_DE")

        assert config.seed == 7
        assert config.countries == ("CH", "DE")
        assert config.locale == "de_DE"


class TestIbanConfig:
    """Tests for IbanConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = IbanConfig()

        assert isinstance(config.generator, GeneratorConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_configure_logging(self) -> None:
        """Test that configure_logging applies level and format."""
        config = IbanConfig(log_level="DEBUG", log_format="json")

        config.configure_logging()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert logging.getLogger("iso_iban").level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    def test_from_env_default(self, clean_env) -> None:
        """Test creating config from environment with defaults."""
        config = IbanConfig.from_env()

        assert config.generator.seed is None
        assert config.generator.countries == ()
        assert config.generator.country_weights is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_custom(self, clean_env) -> None:
        """Test creating config from custom environment variables."""
        env = {
            "IBAN_SEED": "12345",
            "IBAN_COUNTRIES": "ch, de,fr",
            "IBAN_LOCALE": "fr_FR",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "JSON",
        }
        with patch.dict(os.environ, env):
            config = IbanConfig.from_env()

        assert config.generator.seed == 12345
        assert config.generator.countries == ("CH", "DE", "FR")
        assert config.generator.locale == "fr_FR"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_country_weights(self, clean_env) -> None:
        """Test IBAN_COUNTRY_WEIGHTS parsed from env."""
        with patch.dict(os.environ, {"IBAN_COUNTRY_WEIGHTS": '{"DE": 0.7, "FR": 0.3}'}):
            config = IbanConfig.from_env()

        assert config.generator.country_weights == {"DE": 0.7, "FR": 0.3}

    def test_from_env_invalid_seed(self, clean_env) -> None:
        """Test a non-integer seed is rejected."""
        with patch.dict(os.environ, {"IBAN_SEED": "abc"}):
            with pytest.raises(ConfigurationError, match="IBAN_SEED"):
                IbanConfig.from_env()

    def test_from_env_invalid_weights(self, clean_env) -> None:
        """Test malformed weight JSON is rejected."""
        with patch.dict(os.environ, {"IBAN_COUNTRY_WEIGHTS": "{not json"}):
            with pytest.raises(ConfigurationError, match="not valid JSON"):
                IbanConfig.from_env()

    def test_from_env_weights_not_object(self, clean_env) -> None:
        """Test weight JSON must be an object."""
        with patch.dict(os.environ, {"IBAN_COUNTRY_WEIGHTS": "[1, 2]"}):
            with pytest.raises(ConfigurationError, match="JSON object"):
                IbanConfig.from_env()

    def test_from_env_invalid_log_format(self, clean_env) -> None:
        """Test unknown log formats are rejected."""
        with patch.dict(os.environ, {"LOG_FORMAT": "xml"}):
            with pytest.raises(ConfigurationError, match="LOG_FORMAT"):
                IbanConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()

        logger = logging.getLogger("iso_iban")
        assert logger.level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        """Test debug level logging setup."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        """Test that Faker's logger stays at WARNING."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        """Test basic log formatting."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        """Test formatting with exception info."""
        import sys

        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = self._record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info)
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        """Test formatting with extra fields."""
        record = self._record()
        record.extra = {"country": "CH"}

        data = json.loads(JsonFormatter().format(record))

        assert data["country"] == "CH"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        """Test getting a logger."""
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_instance(self) -> None:
        """Test loggers are shared by name."""
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for iso_iban __init__.py."""

    def test_version_exported(self) -> None:
        """Test that version is exported."""
        from iso_iban import __version__

        assert isinstance(__version__, str)
