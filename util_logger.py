"""
Unified Logger System.

JSON-only structured logging for the update client library.

Design Principles:
    - Strong typing with dataclasses (stdlib only)
    - Enum safety for categories
    - Component-specific loggers
    - Clean factory pattern

Library components only emit DEBUG trace events. Errors are raised to the
caller, so the caller decides how failures surface.

Exports:
    ComponentType: Enum for component types
    LogLevel: Enum for log levels
    LogContext: Job key correlation context
    ComponentConfig: Per-component logger settings
    JSONFormatter: JSON log formatter
    LoggerFactory: Factory for creating loggers

Dependencies:
    Standard library (logging, enum, dataclasses, json)
    config (lazy import for the default log level)
"""

from enum import Enum
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from dataclasses import dataclass
import logging
import sys
import os
import json


# ============================================================================
# COMPONENT TYPES
# ============================================================================

class ComponentType(Enum):
    """
    Component types of the update client.

    Configuration loading and endpoint validation do not log: the log
    level itself comes from the configuration they produce.
    """
    BUILDER = "builder"        # Job update / task builders


# ============================================================================
# LOG LEVELS - Standard Python levels with enum safety
# ============================================================================

class LogLevel(Enum):
    """
    Standard Python log levels as enum for type safety.
    """
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_python_level(self) -> int:
        """Convert to Python logging level constant."""
        return getattr(logging, self.value)

    @classmethod
    def from_string(cls, level: str) -> 'LogLevel':
        """Create from string, case-insensitive."""
        return cls[level.upper()]


# ============================================================================
# LOG CONTEXT - Correlation and tracking
# ============================================================================

@dataclass
class LogContext:
    """
    Context for log correlation across a single update.

    A job is identified by its role/environment/name key; the update id
    is only known once the scheduler has accepted the request.
    """
    role: Optional[str] = None
    environment: Optional[str] = None
    job_name: Optional[str] = None
    update_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            k: v for k, v in {
                'role': self.role,
                'environment': self.environment,
                'job_name': self.job_name,
                'update_id': self.update_id,
            }.items() if v is not None
        }


# ============================================================================
# COMPONENT CONFIGURATION - Per-component settings
# ============================================================================

@dataclass
class ComponentConfig:
    """
    Configuration for component-specific logging.
    """
    component_type: ComponentType
    log_level: LogLevel = LogLevel.INFO


# ============================================================================
# JSON FORMATTER
# ============================================================================

class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    One JSON object per line so log shippers can parse it without configuration.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Python LogRecord to format

        Returns:
            JSON string with structured log data
        """
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if hasattr(record, 'custom_dimensions'):
            log_obj['customDimensions'] = record.custom_dimensions

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_obj, default=str)


# ============================================================================
# LOGGER FACTORY - Creates component-specific loggers
# ============================================================================

class LoggerFactory:
    """
    Factory for creating component-specific loggers.

    Example:
        logger = LoggerFactory.create_logger(
            ComponentType.BUILDER,
            "JobUpdate"
        )
        logger.debug("Strategy replaced")
    """

    # Used only when the scheduler configuration cannot be loaded
    _fallback_level = LogLevel.DEBUG if os.getenv('DEBUG_LOGGING', '').lower() == 'true' else LogLevel.INFO

    @classmethod
    def configured_level(cls) -> LogLevel:
        """
        Default level for new loggers, from config.get_config().

        AURORA_LOG_LEVEL sets the level; DEBUG_LOGGING=true forces DEBUG.
        An invalid configuration is reported here and left for get_config()
        callers to raise; loggers fall back to INFO (DEBUG with DEBUG_LOGGING).
        """
        # Lazy import: config loading must not depend on logger creation
        from pydantic import ValidationError
        from config import get_config

        try:
            return LogLevel.from_string(get_config().effective_log_level)
        except ValidationError as e:
            logging.getLogger("util_logger").warning(
                f"Scheduler configuration invalid, using {cls._fallback_level.value} log level: {e}"
            )
            return cls._fallback_level

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        context: Optional[LogContext] = None,
        config: Optional[ComponentConfig] = None
    ) -> logging.Logger:
        """
        Create a logger for a specific component.

        Args:
            component_type: Type of component
            name: Component name (e.g., "JobUpdate")
            context: Optional log context for correlation
            config: Optional custom configuration

        Returns:
            Configured Python logger
        """
        if config is None:
            config = ComponentConfig(
                component_type=component_type,
                log_level=cls.configured_level()
            )

        # Hierarchical name so callers can tune "builder" as a whole
        logger_name = f"{component_type.value}.{name}"
        logger = logging.getLogger(logger_name)

        if isinstance(config.log_level, str):
            log_level = LogLevel.from_string(config.log_level).to_python_level()
        else:
            log_level = config.log_level.to_python_level()
        logger.setLevel(log_level)

        # One JSON handler per logger, however often create_logger is called
        has_json_handler = any(
            isinstance(h.formatter, JSONFormatter) for h in logger.handlers
        )
        if not has_json_handler:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(log_level)
            handler.setFormatter(JSONFormatter())
            logger.addHandler(handler)

        logger.propagate = True

        if not hasattr(logger, '_context_wrapped'):
            original_log = logger._log

            def log_with_context(level, msg, args, exc_info=None, extra=None, stack_info=False, stacklevel=1):
                """Wrapper to inject context as custom dimensions."""
                if extra is None:
                    extra = {}

                if context:
                    custom_dims = context.to_dict()
                else:
                    custom_dims = {}
                custom_dims['component_type'] = component_type.value
                custom_dims['component_name'] = name

                if 'custom_dimensions' in extra:
                    custom_dims.update(extra['custom_dimensions'])

                extra['custom_dimensions'] = custom_dims

                # +1 to account for this wrapper function
                original_log(level, msg, args, exc_info=exc_info, extra=extra,
                             stack_info=stack_info, stacklevel=stacklevel + 1)

            logger._log = log_with_context
            logger._context_wrapped = True

        return logger

    @classmethod
    def create_with_context(
        cls,
        component_type: ComponentType,
        name: str,
        role: Optional[str] = None,
        environment: Optional[str] = None,
        job_name: Optional[str] = None
    ) -> logging.Logger:
        """
        Create logger with job key context.

        Args:
            component_type: Type of component
            name: Component name
            role: Optional job role
            environment: Optional job environment
            job_name: Optional job name

        Returns:
            Configured Python logger with context
        """
        context = LogContext(
            role=role,
            environment=environment,
            job_name=job_name
        ) if any([role, environment, job_name]) else None

        return cls.create_logger(
            component_type=component_type,
            name=name,
            context=context
        )
