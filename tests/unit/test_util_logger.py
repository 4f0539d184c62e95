"""
Tests for util_logger: JSON formatting and logger factory behaviour.
"""

import json
import logging
import sys

import pytest

from util_logger import (
    ComponentConfig,
    ComponentType,
    JSONFormatter,
    LogContext,
    LoggerFactory,
    LogLevel,
)


def _record(message="hello", **extra):
    record = logging.LogRecord(
        name="builder.test", level=logging.INFO, pathname=__file__, lineno=10,
        msg=message, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_basic_fields(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["level"] == "INFO"
        assert payload["message"] == "hello"
        assert payload["logger"] == "builder.test"
        assert "customDimensions" not in payload

    def test_custom_dimensions(self):
        record = _record(custom_dimensions={"job_name": "hello"})
        payload = json.loads(JSONFormatter().format(record))
        assert payload["customDimensions"] == {"job_name": "hello"}

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        payload = json.loads(JSONFormatter().format(record))
        assert payload["exception"]["type"] == "ValueError"
        assert payload["exception"]["message"] == "boom"


class TestLogContext:

    def test_unset_values_dropped(self):
        assert LogContext(role="www-data", job_name="hello").to_dict() == {
            "role": "www-data", "job_name": "hello",
        }


class TestLoggerFactory:

    def test_hierarchical_name(self):
        logger = LoggerFactory.create_logger(ComponentType.BUILDER, "naming-check")
        assert logger.name == "builder.naming-check"

    def test_single_json_handler(self):
        LoggerFactory.create_logger(ComponentType.BUILDER, "handler-check")
        logger = LoggerFactory.create_logger(ComponentType.BUILDER, "handler-check")
        json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1

    @pytest.mark.parametrize("level", [LogLevel.WARNING, "warning"])
    def test_custom_level(self, level):
        config = ComponentConfig(component_type=ComponentType.BUILDER, log_level=level)
        logger = LoggerFactory.create_logger(ComponentType.BUILDER, f"level-check-{level}", config=config)
        assert logger.level == logging.WARNING

    def test_context_injected(self, caplog):
        logger = LoggerFactory.create_with_context(
            ComponentType.BUILDER, "context-check", role="www-data", environment="prod", job_name="hello",
        )
        logger.setLevel(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            logger.debug("built")
        dims = caplog.records[-1].custom_dimensions
        assert dims["role"] == "www-data"
        assert dims["job_name"] == "hello"
        assert dims["component_type"] == "builder"
        assert dims["component_name"] == "context-check"


class TestConfiguredLevel:
    """Default logger level follows the scheduler configuration."""

    @pytest.fixture
    def log_env(self, monkeypatch):
        for var in ("AURORA_SCHEDULER_URL", "AURORA_LOG_LEVEL", "DEBUG_LOGGING"):
            monkeypatch.delenv(var, raising=False)
        return monkeypatch

    def test_info_by_default(self, log_env):
        logger = LoggerFactory.create_logger(ComponentType.BUILDER, "default-level-check")
        assert logger.level == logging.INFO

    @pytest.mark.parametrize("env_level,expected", [
        ("ERROR", logging.ERROR),
        ("warning", logging.WARNING),
        ("DEBUG", logging.DEBUG),
    ])
    def test_aurora_log_level(self, log_env, env_level, expected):
        log_env.setenv("AURORA_LOG_LEVEL", env_level)
        logger = LoggerFactory.create_logger(ComponentType.BUILDER, f"env-level-check-{env_level}")
        assert logger.level == expected

    def test_debug_logging_overrides_level(self, log_env):
        log_env.setenv("AURORA_LOG_LEVEL", "ERROR")
        log_env.setenv("DEBUG_LOGGING", "true")
        logger = LoggerFactory.create_logger(ComponentType.BUILDER, "debug-override-check")
        assert logger.level == logging.DEBUG

    def test_explicit_config_wins(self, log_env):
        log_env.setenv("AURORA_LOG_LEVEL", "ERROR")
        config = ComponentConfig(component_type=ComponentType.BUILDER, log_level=LogLevel.DEBUG)
        logger = LoggerFactory.create_logger(ComponentType.BUILDER, "explicit-level-check", config=config)
        assert logger.level == logging.DEBUG

    def test_invalid_config_falls_back(self, log_env):
        log_env.setenv("AURORA_SCHEDULER_URL", "ftp://example.com")
        assert LoggerFactory.configured_level() == LoggerFactory._fallback_level
