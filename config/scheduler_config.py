"""
Scheduler Client Configuration.

Provides configuration for:
    - Scheduler endpoint (normalized to scheme://host:port/api)
    - Log level for library loggers

Environment Variables:
    AURORA_SCHEDULER_URL - Scheduler address (default: localhost)
    AURORA_LOG_LEVEL - DEBUG/INFO/WARNING/ERROR (default: INFO)
    DEBUG_LOGGING - "true" enables debug logging

Exports:
    SchedulerConfig: Pydantic scheduler client configuration model
"""

import os
from pydantic import BaseModel, Field, field_validator

from exceptions import EndpointValidationError
from .defaults import LoggingDefaults


class SchedulerConfig(BaseModel):
    """
    Scheduler client configuration.

    scheduler_url is always stored in canonical form, so code reading
    the config can hand it straight to the RPC layer.
    """

    scheduler_url: str = Field(
        default="localhost",
        description="Scheduler address, normalized on load"
    )

    log_level: str = Field(
        default=LoggingDefaults.LOG_LEVEL,
        description="Log level for library loggers"
    )

    debug_logging: bool = Field(
        default=False,
        description="Force DEBUG level regardless of log_level"
    )

    @field_validator("scheduler_url")
    @classmethod
    def _normalize_scheduler_url(cls, value: str) -> str:
        # infrastructure.validators imports config.defaults, so import at call time
        from infrastructure.validators import validate_aurora_address

        try:
            return validate_aurora_address(value)
        except EndpointValidationError as e:
            raise ValueError(str(e)) from e

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_logging else self.log_level

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        return cls(
            scheduler_url=os.environ.get("AURORA_SCHEDULER_URL", "localhost"),
            log_level=os.environ.get("AURORA_LOG_LEVEL", LoggingDefaults.LOG_LEVEL),
            debug_logging=os.environ.get("DEBUG_LOGGING", "").lower() == "true",
        )
