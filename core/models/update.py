"""
Job Update Wire Models.

Update settings, rollout strategies and the finished update request.
Defaults come from config.defaults.UpdateDefaults so a bare
JobUpdateSettings() is already a valid, conventional update.

Rollout strategies share one slot. They are modelled as a tagged union
(discriminated on "kind") so at most one strategy can ever be present.

Exports:
    Range: Inclusive instance index range
    BatchJobUpdateStrategy: Fixed-size batches
    QueueJobUpdateStrategy: Single rolling queue
    VariableBatchJobUpdateStrategy: Explicit, possibly uneven batch sizes
    JobUpdateStrategy: Union of the three strategies
    JobUpdateSettings: Update pacing, failure and rollback settings
    JobUpdateRequest: Task configuration + settings + instance count
"""

from typing import List, Literal, Optional, Union
from typing_extensions import Annotated
from pydantic import BaseModel, ConfigDict, Field

from config.defaults import UpdateDefaults
from .task import TaskConfig


class Range(BaseModel):
    """Inclusive [first, last] range of instance indices."""

    first: int
    last: int


class BatchJobUpdateStrategy(BaseModel):
    """Update group_size instances at a time."""

    kind: Literal["batch"] = "batch"
    group_size: int
    autopause_after_batch: bool = False


class QueueJobUpdateStrategy(BaseModel):
    """Keep up to group_size instances updating; start the next as one finishes."""

    kind: Literal["queue"] = "queue"
    group_size: int


class VariableBatchJobUpdateStrategy(BaseModel):
    """
    Batches of explicit sizes, in order.

    Once the listed sizes are used up the last size repeats
    (see core.logic.batches.calculate_current_batch).
    """

    kind: Literal["variable_batch"] = "variable_batch"
    group_sizes: List[int]
    autopause_after_batch: bool = False


JobUpdateStrategy = Annotated[
    Union[BatchJobUpdateStrategy, QueueJobUpdateStrategy, VariableBatchJobUpdateStrategy],
    Field(discriminator="kind"),
]


class JobUpdateSettings(BaseModel):
    """
    Settings controlling how an update rolls out.

    A pulse interval (block_if_no_pulses_after_ms) makes the update stall
    unless the client pulses it within that interval.
    """

    model_config = ConfigDict(validate_assignment=True)

    update_group_size: int = Field(
        default=UpdateDefaults.UPDATE_GROUP_SIZE,
        description="Instances updated concurrently"
    )
    min_wait_in_instance_running_ms: int = Field(
        default=UpdateDefaults.MIN_WAIT_IN_INSTANCE_RUNNING_MS,
        description="Time an instance must stay RUNNING to count as updated"
    )
    wait_for_batch_completion: bool = Field(
        default=UpdateDefaults.WAIT_FOR_BATCH_COMPLETION,
        description="Finish a whole batch before starting the next"
    )
    max_per_instance_failures: int = Field(
        default=UpdateDefaults.MAX_PER_INSTANCE_FAILURES,
        description="Failures tolerated per instance before it is marked FAILED"
    )
    max_failed_instances: int = Field(
        default=UpdateDefaults.MAX_FAILED_INSTANCES,
        description="FAILED instances tolerated before the update fails"
    )
    rollback_on_failure: bool = Field(
        default=UpdateDefaults.ROLLBACK_ON_FAILURE,
        description="Roll back automatically when the update fails"
    )
    block_if_no_pulses_after_ms: Optional[int] = Field(
        default=None,
        description="Pulse interval; unset means the update never waits for pulses"
    )
    update_only_these_instances: List[Range] = Field(
        default_factory=list,
        description="Instance ranges to update; empty means all instances"
    )
    sla_aware: Optional[bool] = Field(
        default=None,
        description="Ask the scheduler to apply its SLA aware pacing policy"
    )
    update_strategy: Optional[JobUpdateStrategy] = Field(
        default=None,
        description="Rollout strategy; unset means the scheduler default"
    )


class JobUpdateRequest(BaseModel):
    """Everything the scheduler needs to start an update."""

    model_config = ConfigDict(validate_assignment=True)

    task_config: TaskConfig
    instance_count: int = Field(
        default=UpdateDefaults.INSTANCE_COUNT,
        description="Instances the job has once the update completes"
    )
    settings: JobUpdateSettings = Field(default_factory=JobUpdateSettings)
