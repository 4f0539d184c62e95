"""
Configuration Defaults - Single source of truth for all default values.

Update settings defaults mirror the defaults of the scheduler's own
configuration DSL, so an update built here behaves like one submitted
from a job file that leaves those fields unset.

Organization:
    - UpdateDefaults: Rolling update settings
    - SchedulerDefaults: Scheduler endpoint and executor conventions
    - LoggingDefaults: Log level for library loggers

Usage:
    from config.defaults import UpdateDefaults, SchedulerDefaults

    # In Pydantic Field definitions:
    update_group_size: int = Field(default=UpdateDefaults.UPDATE_GROUP_SIZE, ...)
"""


# =============================================================================
# UPDATE DEFAULTS
# =============================================================================

class UpdateDefaults:
    """
    Defaults applied to every new job update request.
    """

    # Instances touched concurrently under the fixed-batch strategy
    UPDATE_GROUP_SIZE = 1

    # Milliseconds an instance must stay RUNNING to count as updated
    MIN_WAIT_IN_INSTANCE_RUNNING_MS = 45000

    WAIT_FOR_BATCH_COMPLETION = False

    # Failure tolerance
    MAX_PER_INSTANCE_FAILURES = 0
    MAX_FAILED_INSTANCES = 0

    ROLLBACK_ON_FAILURE = True

    # Target instance count until instance_count() is called
    INSTANCE_COUNT = 0


# =============================================================================
# SCHEDULER DEFAULTS
# =============================================================================

class SchedulerDefaults:
    """
    Scheduler endpoint and executor conventions.

    The scheduler API is only served at API_PATH. Addresses without a
    protocol or port are completed with DEFAULT_SCHEME and DEFAULT_PORT.
    """

    DEFAULT_SCHEME = "http"
    SUPPORTED_SCHEMES = ("http", "https")
    DEFAULT_PORT = 8081
    API_PATH = "/api"

    # Executor name the scheduler expects for Thermos payloads
    EXECUTOR_NAME = "AuroraExecutor"

    # Prefix for generated (unnamed) port requests
    PORT_NAME_PREFIX = "org.apache.aurora.port."

    # Value constraint name used for dedicated hosts
    DEDICATED_CONSTRAINT = "dedicated"


# =============================================================================
# LOGGING DEFAULTS
# =============================================================================

class LoggingDefaults:
    """Log level used when nothing is configured."""

    LOG_LEVEL = "INFO"
