"""
Status Classification Tables.

Read-only membership tables built once at import from the scheduler's
authoritative state groupings. Tables map each member status to True;
statuses outside a grouping are absent. Lookups are O(1) and the tables
cannot be mutated after import, so any number of threads may read them.

Exports:
    ACTIVE_STATES_TABLE: Task states that are active
    SLAVE_ASSIGNED_STATES_TABLE: Task states bound to an agent
    LIVE_STATES_TABLE: Task states with a live process
    TERMINAL_STATES_TABLE: Task states that will not change again
    ACTIVE_JOB_UPDATE_STATES_TABLE: Update states still in progress
    AWAITING_PULSE_JOB_UPDATE_STATES_TABLE: Update states blocked on a pulse
    terminal_update_states: Fresh list of terminal update states
    is_active, is_slave_assigned, is_live, is_terminal: Task state checks
    is_active_update, is_awaiting_pulse: Update state checks

Dependencies:
    core.models.enums: ScheduleStatus, JobUpdateStatus and groupings
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping

from ..models.enums import (
    ScheduleStatus,
    JobUpdateStatus,
    ACTIVE_STATES,
    SLAVE_ASSIGNED_STATES,
    LIVE_STATES,
    TERMINAL_STATES,
    ACTIVE_JOB_UPDATE_STATES,
    AWAITING_PULSE_JOB_UPDATE_STATES,
)


def _membership_table(statuses: Iterable) -> Mapping:
    """Build an immutable status -> True table."""
    return MappingProxyType({status: True for status in statuses})


ACTIVE_STATES_TABLE: Mapping[ScheduleStatus, bool] = _membership_table(ACTIVE_STATES)
SLAVE_ASSIGNED_STATES_TABLE: Mapping[ScheduleStatus, bool] = _membership_table(SLAVE_ASSIGNED_STATES)
LIVE_STATES_TABLE: Mapping[ScheduleStatus, bool] = _membership_table(LIVE_STATES)
TERMINAL_STATES_TABLE: Mapping[ScheduleStatus, bool] = _membership_table(TERMINAL_STATES)
ACTIVE_JOB_UPDATE_STATES_TABLE: Mapping[JobUpdateStatus, bool] = _membership_table(ACTIVE_JOB_UPDATE_STATES)
AWAITING_PULSE_JOB_UPDATE_STATES_TABLE: Mapping[JobUpdateStatus, bool] = _membership_table(
    AWAITING_PULSE_JOB_UPDATE_STATES
)


def terminal_update_states() -> List[JobUpdateStatus]:
    """
    Get the states an update may finish in.

    A new list is returned on every call so callers cannot alter
    what other callers see.

    Returns:
        List of terminal update statuses
    """
    return [
        JobUpdateStatus.ROLLED_FORWARD,
        JobUpdateStatus.ROLLED_BACK,
        JobUpdateStatus.ABORTED,
        JobUpdateStatus.ERROR,
        JobUpdateStatus.FAILED,
    ]


def is_active(status: ScheduleStatus) -> bool:
    """Check if a task status is active."""
    return ACTIVE_STATES_TABLE.get(status, False)


def is_slave_assigned(status: ScheduleStatus) -> bool:
    """Check if a task status means the task is bound to an agent."""
    return SLAVE_ASSIGNED_STATES_TABLE.get(status, False)


def is_live(status: ScheduleStatus) -> bool:
    """Check if a task status means a process is running."""
    return LIVE_STATES_TABLE.get(status, False)


def is_terminal(status: ScheduleStatus) -> bool:
    """Check if a task status is terminal."""
    return TERMINAL_STATES_TABLE.get(status, False)


def is_active_update(status: JobUpdateStatus) -> bool:
    """Check if an update status means the update is still in progress."""
    return ACTIVE_JOB_UPDATE_STATES_TABLE.get(status, False)


def is_awaiting_pulse(status: JobUpdateStatus) -> bool:
    """Check if an update status means the update is blocked on a pulse."""
    return AWAITING_PULSE_JOB_UPDATE_STATES_TABLE.get(status, False)
