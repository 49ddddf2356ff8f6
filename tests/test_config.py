"""Tests for provider configuration."""

import logging

import pytest

from pkgcurate._curation.config import (
    CLEARLYDEFINED_API_BASE,
    CurationProviderConfig,
    evaluate_boolean,
    load_config,
)
from pkgcurate.exceptions import ConfigurationError
from pkgcurate.logging_config import LOGGER_NAME, StructuredFormatter, configure_logging


class TestCurationProviderConfig:
    """Test validation of CurationProviderConfig."""

    def test_defaults_are_valid(self):
        config = CurationProviderConfig()
        config.validate()
        assert config.server_url == CLEARLYDEFINED_API_BASE
        assert config.cache_expiration_hours == 0
        assert config.deadline is None
        assert config.print_stack_trace is False

    def test_trailing_slash_is_removed(self):
        config = CurationProviderConfig(server_url="https://curations.example.org/api/")
        config.validate()
        assert config.server_url == "https://curations.example.org/api"

    @pytest.mark.parametrize("url", ["ftp://example.org", "example.org", "https://", ""])
    def test_invalid_server_url(self, url):
        with pytest.raises(ConfigurationError):
            CurationProviderConfig(server_url=url).validate()

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"cache_expiration_hours": -1}, "must not be negative"),
            ({"read_timeout": 0}, "timeouts must be positive"),
            ({"connect_timeout": -5}, "timeouts must be positive"),
            ({"deadline": 0}, "Deadline must be positive"),
            ({"max_workers": 0}, "At least one worker"),
        ],
    )
    def test_invalid_values(self, overrides, message):
        with pytest.raises(ConfigurationError) as exc_info:
            CurationProviderConfig(**overrides).validate()
        assert message in str(exc_info.value)


class TestLoadConfig:
    """Test loading configuration from the environment."""

    def test_defaults_without_environment(self):
        config = load_config()
        assert config == CurationProviderConfig()

    def test_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("CURATION_SERVER_URL", "http://localhost:8080/")
        monkeypatch.setenv("CURATION_CACHE_EXPIRATION_HOURS", "24")
        monkeypatch.setenv("CURATION_CONNECT_TIMEOUT", "2.5")
        monkeypatch.setenv("CURATION_READ_TIMEOUT", "5")
        monkeypatch.setenv("CURATION_DEADLINE", "60")
        monkeypatch.setenv("CURATION_MAX_WORKERS", "2")
        monkeypatch.setenv("CURATION_PRINT_STACK_TRACE", "yes")

        config = load_config()

        assert config.server_url == "http://localhost:8080"
        assert config.cache_expiration_hours == 24
        assert config.connect_timeout == 2.5
        assert config.read_timeout == 5.0
        assert config.deadline == 60.0
        assert config.max_workers == 2
        assert config.print_stack_trace is True

    def test_blank_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("CURATION_READ_TIMEOUT", "  ")
        assert load_config().read_timeout == CurationProviderConfig().read_timeout

    def test_non_numeric_value(self, monkeypatch):
        monkeypatch.setenv("CURATION_CACHE_EXPIRATION_HOURS", "forever")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()
        assert "CURATION_CACHE_EXPIRATION_HOURS" in str(exc_info.value)

    def test_invalid_value_is_validated(self, monkeypatch):
        monkeypatch.setenv("CURATION_MAX_WORKERS", "0")
        with pytest.raises(ConfigurationError):
            load_config()

    @pytest.fixture
    def restore_log_format(self):
        yield
        configure_logging()

    def test_structured_logging_from_environment(self, monkeypatch, restore_log_format):
        monkeypatch.setenv("CURATION_STRUCTURED_LOGGING", "true")

        assert load_config().structured_logging is True

        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert handlers
        assert all(isinstance(h.formatter, StructuredFormatter) for h in handlers)

    def test_text_logging_by_default(self, restore_log_format):
        assert load_config().structured_logging is False
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert not any(isinstance(h.formatter, StructuredFormatter) for h in handlers)


class TestEvaluateBoolean:
    @pytest.mark.parametrize("value", ["true", "True", "YES", "1", " yeah "])
    def test_truthy(self, value):
        assert evaluate_boolean(value) is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "", "maybe"])
    def test_falsy(self, value):
        assert evaluate_boolean(value) is False
