"""
Pure Enumeration Types for the Scheduler API.

Defines task and job update states exactly as the scheduler reports them,
plus the scheduler's authoritative groupings of those states.
No business logic - pure type definitions only.

Exports:
    ScheduleStatus: Task (instance) state enumeration
    JobUpdateStatus: Job update state enumeration
    ACTIVE_STATES, SLAVE_ASSIGNED_STATES, LIVE_STATES, TERMINAL_STATES:
        Authoritative task state groupings
    ACTIVE_JOB_UPDATE_STATES, AWAITING_PULSE_JOB_UPDATE_STATES:
        Authoritative update state groupings
"""

from enum import Enum


class ScheduleStatus(Enum):
    """
    Task states. Values are the scheduler's wire integers.

    Normal lifecycle:
    - INIT -> PENDING -> ASSIGNED -> STARTING -> RUNNING -> FINISHED
    - RUNNING -> KILLING -> KILLED (user kill)
    - RUNNING -> PREEMPTING -> KILLED (preemption)
    - RUNNING -> DRAINING -> KILLED (host maintenance)
    - any active state -> PARTITIONED (agent unreachable)
    """

    PENDING = 0
    STARTING = 1
    RUNNING = 2
    FINISHED = 3
    FAILED = 4
    KILLED = 5
    KILLING = 6
    LOST = 7
    ASSIGNED = 9
    SANDBOX_DELETED = 10
    INIT = 11
    RESTARTING = 12
    PREEMPTING = 13
    THROTTLED = 16
    DRAINING = 17
    PARTITIONED = 18


class JobUpdateStatus(Enum):
    """
    Job update states. Values are the scheduler's wire integers.

    AWAITING_PULSE states are only reached by updates created with a
    pulse interval; the update is blocked until a pulse arrives.
    """

    ROLLING_FORWARD = 0
    ROLLING_BACK = 1
    ROLL_FORWARD_PAUSED = 2
    ROLL_BACK_PAUSED = 3
    ROLLED_FORWARD = 4
    ROLLED_BACK = 5
    ABORTED = 6
    ERROR = 7
    FAILED = 8
    ROLL_FORWARD_AWAITING_PULSE = 9
    ROLL_BACK_AWAITING_PULSE = 10


# ============================================================================
# AUTHORITATIVE GROUPINGS (published by the scheduler API)
# ============================================================================

ACTIVE_STATES = (
    ScheduleStatus.ASSIGNED,
    ScheduleStatus.DRAINING,
    ScheduleStatus.KILLING,
    ScheduleStatus.PARTITIONED,
    ScheduleStatus.PENDING,
    ScheduleStatus.PREEMPTING,
    ScheduleStatus.RESTARTING,
    ScheduleStatus.RUNNING,
    ScheduleStatus.STARTING,
    ScheduleStatus.THROTTLED,
)

SLAVE_ASSIGNED_STATES = (
    ScheduleStatus.ASSIGNED,
    ScheduleStatus.DRAINING,
    ScheduleStatus.KILLING,
    ScheduleStatus.PARTITIONED,
    ScheduleStatus.PREEMPTING,
    ScheduleStatus.RESTARTING,
    ScheduleStatus.RUNNING,
    ScheduleStatus.STARTING,
)

LIVE_STATES = (
    ScheduleStatus.DRAINING,
    ScheduleStatus.KILLING,
    ScheduleStatus.PARTITIONED,
    ScheduleStatus.PREEMPTING,
    ScheduleStatus.RESTARTING,
    ScheduleStatus.RUNNING,
)

TERMINAL_STATES = (
    ScheduleStatus.FAILED,
    ScheduleStatus.FINISHED,
    ScheduleStatus.KILLED,
    ScheduleStatus.LOST,
    ScheduleStatus.SANDBOX_DELETED,
)

ACTIVE_JOB_UPDATE_STATES = (
    JobUpdateStatus.ROLLING_FORWARD,
    JobUpdateStatus.ROLLING_BACK,
    JobUpdateStatus.ROLL_FORWARD_PAUSED,
    JobUpdateStatus.ROLL_BACK_PAUSED,
    JobUpdateStatus.ROLL_FORWARD_AWAITING_PULSE,
    JobUpdateStatus.ROLL_BACK_AWAITING_PULSE,
)

AWAITING_PULSE_JOB_UPDATE_STATES = (
    JobUpdateStatus.ROLL_FORWARD_AWAITING_PULSE,
    JobUpdateStatus.ROLL_BACK_AWAITING_PULSE,
)
