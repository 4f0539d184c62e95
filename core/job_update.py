"""
Job Update Builder.

Collects everything needed to start a rolling update: the task
configuration instances are moved to, the target instance count, and the
settings controlling pacing, failure tolerance, rollback and rollout
strategy.

Each builder owns its task and settings exclusively. Builders are not
safe for concurrent mutation; use one builder per update.

Usage:
    update = (
        JobUpdate.from_aurora_task(task)
        .instance_count(10)
        .watch_time(timedelta(seconds=30))
        .variable_batch_strategy(False, 1, 2, 5)
        .add_instance_range(0, 4)
    )
    request = update.request()

Exports:
    JobUpdate: Update request builder
"""

from datetime import timedelta
from typing import Union

from util_logger import LoggerFactory, ComponentType

from .aurora_task import AuroraTask
from .models.task import JobKey, PartitionPolicy, TaskConfig
from .models.thermos import ThermosExecutor
from .models.update import (
    BatchJobUpdateStrategy,
    JobUpdateRequest,
    JobUpdateSettings,
    QueueJobUpdateStrategy,
    Range,
    VariableBatchJobUpdateStrategy,
)

logger = LoggerFactory.create_logger(ComponentType.BUILDER, "JobUpdate")

Duration = Union[timedelta, int, float]


def _to_millis(duration: Duration) -> int:
    """Convert a duration (timedelta or seconds) to whole milliseconds."""
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    else:
        seconds = duration
    return int(seconds * 1000)


class JobUpdate:
    """
    Chainable builder for a job update request.

    Construction:
        JobUpdate()                          # new default task
        JobUpdate(task)                      # deep copy of an AuroraTask
        JobUpdate.from_aurora_task(task)     # same as JobUpdate(task)
        JobUpdate.from_config(task_config)   # deep copy of a bare TaskConfig

    Settings start at the conventional defaults (see UpdateDefaults).
    """

    def __init__(self, task: AuroraTask = None):
        self._task = task.clone() if task is not None else AuroraTask()
        self._request = JobUpdateRequest(
            task_config=self._task.task_config(),
            settings=JobUpdateSettings(),
        )

    @classmethod
    def from_aurora_task(cls, task: AuroraTask) -> "JobUpdate":
        """
        Create an update around a copy of an AuroraTask.

        The task is deep copied: later changes to task do not reach the
        update and the other way round.
        """
        return cls(task)

    @classmethod
    def from_config(cls, config: TaskConfig) -> "JobUpdate":
        """
        Create an update around a copy of a bare TaskConfig.

        Only use this if the implications of a bare config are understood:
        it has no notion of Thermos, so build_thermos_payload() is a no-op
        until a ThermosExecutor is attached.
        """
        return cls(AuroraTask.from_thrift(config))

    # ------------------------------------------------------------------
    # Update settings
    # ------------------------------------------------------------------

    def instance_count(self, count: int) -> "JobUpdate":
        """Number of instances the job has after the update."""
        self._request.instance_count = count
        return self

    def batch_size(self, size: int) -> "JobUpdate":
        """Max number of instances being updated at any given moment."""
        self._request.settings.update_group_size = size
        return self

    def watch_time(self, timeout: Duration) -> "JobUpdate":
        """Minimum time an instance must remain RUNNING to count as a success."""
        self._request.settings.min_wait_in_instance_running_ms = _to_millis(timeout)
        return self

    def wait_for_batch_completion(self, batch_wait: bool) -> "JobUpdate":
        """Wait for all instances in a group to be done before moving on."""
        self._request.settings.wait_for_batch_completion = batch_wait
        return self

    def max_per_instance_failures(self, failures: int) -> "JobUpdate":
        """Instance failures tolerated before the instance is marked FAILED."""
        self._request.settings.max_per_instance_failures = failures
        return self

    def max_failed_instances(self, instances: int) -> "JobUpdate":
        """FAILED instances tolerated before the update is terminated."""
        self._request.settings.max_failed_instances = instances
        return self

    def rollback_on_fail(self, rollback: bool) -> "JobUpdate":
        """When False, a failed update is not rolled back automatically."""
        self._request.settings.rollback_on_failure = rollback
        return self

    def pulse_interval_timeout(self, timeout: Duration) -> "JobUpdate":
        """Interval within which the update must be pulsed or it blocks."""
        self._request.settings.block_if_no_pulses_after_ms = _to_millis(timeout)
        return self

    def batch_update_strategy(self, auto_pause: bool, batch_size: int) -> "JobUpdate":
        self._set_strategy(BatchJobUpdateStrategy(
            group_size=batch_size,
            autopause_after_batch=auto_pause,
        ))
        return self

    def queue_update_strategy(self, group_size: int) -> "JobUpdate":
        self._set_strategy(QueueJobUpdateStrategy(group_size=group_size))
        return self

    def variable_batch_strategy(self, auto_pause: bool, *batch_sizes: int) -> "JobUpdate":
        self._set_strategy(VariableBatchJobUpdateStrategy(
            group_sizes=list(batch_sizes),
            autopause_after_batch=auto_pause,
        ))
        return self

    def _set_strategy(self, strategy) -> None:
        previous = self._request.settings.update_strategy
        if previous is not None:
            logger.debug(f"Update strategy {previous.kind} replaced by {strategy.kind}")
        self._request.settings.update_strategy = strategy

    def sla_aware(self, sla_aware: bool) -> "JobUpdate":
        """
        Have the scheduler enforce its SLA aware policy if the job qualifies.

        By default the scheduler only applies SLA awareness to production
        tier jobs with 20 or more instances.
        """
        self._request.settings.sla_aware = sla_aware
        return self

    def add_instance_range(self, first: int, last: int) -> "JobUpdate":
        """
        Restrict the update to instances first..last (inclusive).

        Ranges are appended as given; keeping them disjoint is up to the caller.
        """
        self._request.settings.update_only_these_instances.append(Range(first=first, last=last))
        return self

    # ------------------------------------------------------------------
    # Task pass-throughs (see AuroraTask)
    # ------------------------------------------------------------------

    def environment(self, env: str) -> "JobUpdate":
        self._task.environment(env)
        return self

    def role(self, role: str) -> "JobUpdate":
        self._task.role(role)
        return self

    def name(self, name: str) -> "JobUpdate":
        self._task.name(name)
        return self

    def executor_name(self, name: str) -> "JobUpdate":
        self._task.executor_name(name)
        return self

    def executor_data(self, data: str) -> "JobUpdate":
        self._task.executor_data(data)
        return self

    def cpu(self, cpus: float) -> "JobUpdate":
        self._task.cpu(cpus)
        return self

    def ram(self, ram_mb: int) -> "JobUpdate":
        self._task.ram(ram_mb)
        return self

    def disk(self, disk_mb: int) -> "JobUpdate":
        self._task.disk(disk_mb)
        return self

    def gpu(self, gpus: int) -> "JobUpdate":
        self._task.gpu(gpus)
        return self

    def tier(self, tier: str) -> "JobUpdate":
        self._task.tier(tier)
        return self

    def task_max_failure(self, max_fail: int) -> "JobUpdate":
        self._task.max_failure(max_fail)
        return self

    def is_service(self, is_service: bool) -> "JobUpdate":
        self._task.is_service(is_service)
        return self

    def add_uris(self, extract: bool, cache: bool, *values: str) -> "JobUpdate":
        self._task.add_uris(extract, cache, *values)
        return self

    def add_label(self, key: str, value: str) -> "JobUpdate":
        self._task.add_label(key, value)
        return self

    def add_named_ports(self, *names: str) -> "JobUpdate":
        self._task.add_named_ports(*names)
        return self

    def add_ports(self, num: int) -> "JobUpdate":
        self._task.add_ports(num)
        return self

    def add_value_constraint(self, name: str, negated: bool, *values: str) -> "JobUpdate":
        self._task.add_value_constraint(name, negated, *values)
        return self

    def add_limit_constraint(self, name: str, limit: int) -> "JobUpdate":
        self._task.add_limit_constraint(name, limit)
        return self

    def add_dedicated_constraint(self, role: str, name: str) -> "JobUpdate":
        self._task.add_dedicated_constraint(role, name)
        return self

    def container(self, container) -> "JobUpdate":
        self._task.container(container)
        return self

    def thermos_executor(self, thermos: ThermosExecutor) -> "JobUpdate":
        self._task.thermos_executor(thermos)
        return self

    def build_thermos_payload(self) -> "JobUpdate":
        """Render the attached Thermos executor. Raises ThermosPayloadError on failure."""
        self._task.build_thermos_payload()
        return self

    def partition_policy(self, reschedule: bool, delay_secs: int) -> "JobUpdate":
        self._task.partition_policy(PartitionPolicy(reschedule=reschedule, delay_secs=delay_secs))
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def task_config(self) -> TaskConfig:
        return self._task.task_config()

    def job_key(self) -> JobKey:
        return self._task.job_key()

    def settings(self) -> JobUpdateSettings:
        return self._request.settings

    def request(self) -> JobUpdateRequest:
        """The finished request, embedding this update's task configuration."""
        self._request.task_config = self._task.task_config()
        return self._request
