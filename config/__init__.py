"""
Configuration Package.

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── defaults.py              # Update, scheduler and logging defaults
    └── scheduler_config.py      # Scheduler client configuration

Usage:
    # Singleton pattern (preferred)
    from config import get_config
    config = get_config()
    url = config.scheduler_url   # e.g. "http://localhost:8081/api"

    # Defaults
    from config import UpdateDefaults
    UpdateDefaults.MIN_WAIT_IN_INSTANCE_RUNNING_MS
"""

from typing import Optional

from .defaults import UpdateDefaults, SchedulerDefaults, LoggingDefaults
from .scheduler_config import SchedulerConfig


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[SchedulerConfig] = None


def get_config() -> SchedulerConfig:
    """
    Get global configuration singleton.

    Loaded from the environment on first call.

    Raises:
        pydantic.ValidationError: AURORA_SCHEDULER_URL or AURORA_LOG_LEVEL invalid
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = SchedulerConfig.from_environment()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'SchedulerConfig',
    'get_config',
    'reset_config',
    'UpdateDefaults',
    'SchedulerDefaults',
    'LoggingDefaults',
]
