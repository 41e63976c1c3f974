"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _build_processors,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        """Overrides are accepted even though output is suppressed in tests."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG")
        assert configure_logging(settings=mock_settings, is_production=True)

    def test_configure_logging_idempotent(self, mock_settings):
        logger1 = configure_logging(settings=mock_settings)
        logger2 = configure_logging(settings=mock_settings)

        assert logger1 is not None
        assert logger2 is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL

    def test_configure_logging_without_settings(self):
        """Falls back to the settings singleton."""
        assert configure_logging() is not None


@pytest.mark.unit
class TestGetModuleLogger:
    def test_get_module_logger_returns_bound_logger(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_logging_methods_dont_raise(self, mock_settings):
        configure_logging(settings=mock_settings)

        log = get_module_logger()
        log.info("command_parsed", approver_email="pm@example.com")
        log.error("approval_failed", reason="unsupported command")

    def test_exception_logging(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = structlog.get_logger()
        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("An error occurred")


@pytest.mark.unit
class TestBuildProcessors:
    def test_production_renders_json(self):
        processors = _build_processors("abc123", prod_mode=True)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        processors = _build_processors("abc123", prod_mode=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_redaction_runs_before_rendering(self):
        processors = _build_processors("abc123", prod_mode=True)
        chain = processors[:-1]
        event_dict = {
            "event": "startup",
            "INPUT_GITHUB_TOKEN": "ghp_secret",
            "approver_email": "pm@example.com",
        }

        for processor in chain[4:8]:
            event_dict = processor(None, "info", event_dict)

        assert event_dict["app_version"] == "abc123"
        assert event_dict["INPUT_GITHUB_TOKEN"] == "***REDACTED***"
        assert event_dict["approver_email"] == "p***@example.com"
