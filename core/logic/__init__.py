"""
Core Business Logic Package.

Contains logic that operates on pure data models.
Separated from models to maintain clean architecture.

Exports:
    Status tables: ACTIVE_STATES_TABLE, LIVE_STATES_TABLE, TERMINAL_STATES_TABLE, ...
    Status checks: is_active, is_live, is_terminal, is_active_update, is_awaiting_pulse
    Batches: calculate_current_batch
"""

from .status_sets import (
    ACTIVE_STATES_TABLE,
    SLAVE_ASSIGNED_STATES_TABLE,
    LIVE_STATES_TABLE,
    TERMINAL_STATES_TABLE,
    ACTIVE_JOB_UPDATE_STATES_TABLE,
    AWAITING_PULSE_JOB_UPDATE_STATES_TABLE,
    terminal_update_states,
    is_active,
    is_slave_assigned,
    is_live,
    is_terminal,
    is_active_update,
    is_awaiting_pulse,
)

from .batches import calculate_current_batch

__all__ = [
    # Status tables
    'ACTIVE_STATES_TABLE',
    'SLAVE_ASSIGNED_STATES_TABLE',
    'LIVE_STATES_TABLE',
    'TERMINAL_STATES_TABLE',
    'ACTIVE_JOB_UPDATE_STATES_TABLE',
    'AWAITING_PULSE_JOB_UPDATE_STATES_TABLE',
    'terminal_update_states',
    'is_active',
    'is_slave_assigned',
    'is_live',
    'is_terminal',
    'is_active_update',
    'is_awaiting_pulse',

    # Batches
    'calculate_current_batch',
]
