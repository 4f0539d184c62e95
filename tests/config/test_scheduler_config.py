"""
Tests for config.scheduler_config and the config singleton.

All tests use clean_env so values leaking in from the shell never reach
the model.
"""

import pytest
from pydantic import ValidationError

from config import SchedulerConfig, get_config, reset_config


class TestFromEnvironment:

    def test_defaults(self, clean_env):
        config = SchedulerConfig.from_environment()
        assert config.scheduler_url == "http://localhost:8081/api"
        assert config.log_level == "INFO"
        assert config.debug_logging is False
        assert config.effective_log_level == "INFO"

    @pytest.mark.parametrize("raw,expected", [
        ("scheduler.example.com", "http://scheduler.example.com:8081/api"),
        ("https://scheduler.example.com:443", "https://scheduler.example.com:443/api"),
        ("http://10.0.0.5:9000/api", "http://10.0.0.5:9000/api"),
    ])
    def test_scheduler_url_normalized(self, clean_env, raw, expected):
        clean_env.setenv("AURORA_SCHEDULER_URL", raw)
        assert SchedulerConfig.from_environment().scheduler_url == expected

    @pytest.mark.parametrize("raw", [
        "ftp://scheduler.example.com",
        "http://scheduler.example.com/scheduler",
        "http://scheduler.example.com:notaport",
    ])
    def test_invalid_scheduler_url(self, clean_env, raw):
        clean_env.setenv("AURORA_SCHEDULER_URL", raw)
        with pytest.raises(ValidationError):
            SchedulerConfig.from_environment()

    def test_log_level_uppercased(self, clean_env):
        clean_env.setenv("AURORA_LOG_LEVEL", "warning")
        assert SchedulerConfig.from_environment().log_level == "WARNING"

    def test_unknown_log_level(self, clean_env):
        clean_env.setenv("AURORA_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            SchedulerConfig.from_environment()

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("TRUE", True),
        ("false", False),
        ("1", False),
    ])
    def test_debug_logging(self, clean_env, raw, expected):
        clean_env.setenv("DEBUG_LOGGING", raw)
        config = SchedulerConfig.from_environment()
        assert config.debug_logging is expected
        assert config.effective_log_level == ("DEBUG" if expected else "INFO")


class TestDirectConstruction:

    def test_url_normalized_on_construction(self):
        assert SchedulerConfig(scheduler_url="example.com").scheduler_url == "http://example.com:8081/api"

    def test_error_message_kept(self):
        with pytest.raises(ValidationError, match="only protocols http and https are supported"):
            SchedulerConfig(scheduler_url="ftp://example.com")


class TestSingleton:

    def test_get_config_cached(self, clean_env):
        assert get_config() is get_config()

    def test_reset_config_reloads(self, clean_env):
        first = get_config()
        clean_env.setenv("AURORA_SCHEDULER_URL", "other-host")
        assert get_config() is first
        reset_config()
        reloaded = get_config()
        assert reloaded is not first
        assert reloaded.scheduler_url == "http://other-host:8081/api"
