"""
Aurora Task Builder.

Chainable builder owning one TaskConfig. Job update builders embed an
AuroraTask and forward their task mutators to it.

Unlike a bare TaskConfig, an AuroraTask knows about Thermos: it can hold
a ThermosExecutor and render it into the executor payload with resources
taken from the task itself.

Exports:
    AuroraTask: Task configuration builder
"""

from typing import Optional, Union

from config.defaults import SchedulerDefaults
from exceptions import ContractViolationError, ThermosPayloadError
from util_logger import LoggerFactory, ComponentType

from .models.task import (
    Constraint,
    Container,
    ExecutorConfig,
    JobKey,
    LimitConstraint,
    MesosFetcherURI,
    Metadata,
    PartitionPolicy,
    Resource,
    TaskConfig,
    TaskConstraint,
    ValueConstraint,
)
from .models.thermos import ThermosExecutor, ThermosResources

logger = LoggerFactory.create_logger(ComponentType.BUILDER, "AuroraTask")

# Resource fields every task carries, created at zero
_BASE_RESOURCES = ("num_cpus", "ram_mb", "disk_mb")


class AuroraTask:
    """
    Builder for a single task configuration.

    Construction:
        AuroraTask()                        # empty task, zero cpu/ram/disk
        AuroraTask.from_thrift(config)      # deep copy of a bare TaskConfig
        task.clone()                        # deep copy, Thermos wiring included
    """

    def __init__(self, config: Optional[TaskConfig] = None):
        self._config = config if config is not None else TaskConfig()
        for field_name in _BASE_RESOURCES:
            if self._find_resource(field_name) is None:
                self._config.resources.append(Resource(**{field_name: 0}))
        self._port_count = sum(1 for r in self._config.resources if r.named_port is not None)
        self._thermos: Optional[ThermosExecutor] = None

    @classmethod
    def from_thrift(cls, config: TaskConfig) -> "AuroraTask":
        """
        Create a task from a bare TaskConfig.

        The config is deep copied. A bare config has no Thermos wiring, so
        any executor payload it carries is kept as opaque data.
        """
        return cls(config.model_copy(deep=True))

    def clone(self) -> "AuroraTask":
        """Deep copy of this task, Thermos executor included."""
        copy = AuroraTask(self._config.model_copy(deep=True))
        if self._thermos is not None:
            copy._thermos = self._thermos.model_copy(deep=True)
        return copy

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def _find_resource(self, field_name: str) -> Optional[Resource]:
        for resource in self._config.resources:
            if getattr(resource, field_name) is not None:
                return resource
        return None

    def _set_resource(self, field_name: str, value) -> None:
        resource = self._find_resource(field_name)
        if resource is None:
            self._config.resources.append(Resource(**{field_name: value}))
        else:
            setattr(resource, field_name, value)

    def cpu(self, cpus: float) -> "AuroraTask":
        self._set_resource("num_cpus", cpus)
        return self

    def ram(self, ram_mb: int) -> "AuroraTask":
        self._set_resource("ram_mb", ram_mb)
        return self

    def disk(self, disk_mb: int) -> "AuroraTask":
        self._set_resource("disk_mb", disk_mb)
        return self

    def gpu(self, gpus: int) -> "AuroraTask":
        self._set_resource("num_gpus", gpus)
        return self

    # ------------------------------------------------------------------
    # Identity and scheduling
    # ------------------------------------------------------------------

    def environment(self, env: str) -> "AuroraTask":
        self._config.job.environment = env
        return self

    def role(self, role: str) -> "AuroraTask":
        self._config.job.role = role
        self._config.owner.user = role
        return self

    def name(self, name: str) -> "AuroraTask":
        self._config.job.name = name
        return self

    def executor_name(self, name: str) -> "AuroraTask":
        if self._config.executor_config is None:
            self._config.executor_config = ExecutorConfig()
        self._config.executor_config.name = name
        return self

    def executor_data(self, data: str) -> "AuroraTask":
        if self._config.executor_config is None:
            self._config.executor_config = ExecutorConfig()
        self._config.executor_config.data = data
        return self

    def tier(self, tier: str) -> "AuroraTask":
        self._config.tier = tier
        return self

    def max_failure(self, max_fail: int) -> "AuroraTask":
        self._config.max_task_failures = max_fail
        return self

    def is_service(self, is_service: bool) -> "AuroraTask":
        self._config.is_service = is_service
        return self

    def partition_policy(self, policy: PartitionPolicy) -> "AuroraTask":
        self._config.partition_policy = policy.model_copy()
        return self

    # ------------------------------------------------------------------
    # Sandbox, labels and ports
    # ------------------------------------------------------------------

    def add_uris(self, extract: bool, cache: bool, *values: str) -> "AuroraTask":
        for value in values:
            self._config.mesos_fetcher_uris.append(
                MesosFetcherURI(value=value, extract=extract, cache=cache)
            )
        return self

    def add_label(self, key: str, value: str) -> "AuroraTask":
        self._config.metadata.append(Metadata(key=key, value=value))
        return self

    def add_named_ports(self, *names: str) -> "AuroraTask":
        for name in names:
            self._config.resources.append(Resource(named_port=name))
        self._port_count += len(names)
        return self

    def add_ports(self, num: int) -> "AuroraTask":
        """Request num ports with generated names, numbered after existing ports."""
        start = self._port_count
        for index in range(start, start + num):
            self._config.resources.append(
                Resource(named_port=f"{SchedulerDefaults.PORT_NAME_PREFIX}{index}")
            )
        self._port_count += num
        return self

    # ------------------------------------------------------------------
    # Constraints and container
    # ------------------------------------------------------------------

    def add_value_constraint(self, name: str, negated: bool, *values: str) -> "AuroraTask":
        self._config.constraints.append(Constraint(
            name=name,
            constraint=TaskConstraint(value=ValueConstraint(negated=negated, values=list(values))),
        ))
        return self

    def add_limit_constraint(self, name: str, limit: int) -> "AuroraTask":
        self._config.constraints.append(Constraint(
            name=name,
            constraint=TaskConstraint(limit=LimitConstraint(limit=limit)),
        ))
        return self

    def add_dedicated_constraint(self, role: str, name: str) -> "AuroraTask":
        """Pin the task to hosts dedicated to role/name."""
        return self.add_value_constraint(SchedulerDefaults.DEDICATED_CONSTRAINT, False, f"{role}/{name}")

    def container(self, container: Union[Container, object]) -> "AuroraTask":
        """Set the container from a Container or a container builder."""
        if isinstance(container, Container):
            self._config.container = container.model_copy(deep=True)
        elif callable(getattr(container, "build", None)):
            self._config.container = container.build()
        else:
            raise ContractViolationError(
                f"container must be a Container or provide build(), got {type(container).__name__}"
            )
        return self

    # ------------------------------------------------------------------
    # Thermos
    # ------------------------------------------------------------------

    def thermos_executor(self, thermos: ThermosExecutor) -> "AuroraTask":
        if not isinstance(thermos, ThermosExecutor):
            raise ContractViolationError(
                f"thermos must be ThermosExecutor, got {type(thermos).__name__}"
            )
        self._thermos = thermos.model_copy(deep=True)
        return self

    def build_thermos_payload(self) -> "AuroraTask":
        """
        Render the Thermos executor into the task's executor config.

        Does nothing when no Thermos executor is attached. On failure the
        executor config and the attached executor are left as they were.

        Raises:
            ThermosPayloadError: process order names an unknown process,
                or the payload cannot be serialized
        """
        if self._thermos is None:
            return self

        thermos = self._thermos.model_copy(deep=True)

        unknown = [n for n in thermos.ordered_names() if n not in thermos.task.processes]
        if unknown:
            raise ThermosPayloadError(f"process order references unknown processes: {unknown}")

        gpu = self._find_resource("num_gpus")
        thermos.task.resources = ThermosResources(
            cpu=self._find_resource("num_cpus").num_cpus,
            ram=self._find_resource("ram_mb").ram_mb,
            disk=self._find_resource("disk_mb").disk_mb,
            gpu=gpu.num_gpus if gpu is not None else None,
        )

        try:
            payload = thermos.to_json()
        except (TypeError, ValueError) as e:
            raise ThermosPayloadError(f"unable to serialize thermos payload: {e}") from e

        self._thermos = thermos
        self.executor_name(SchedulerDefaults.EXECUTOR_NAME)
        self.executor_data(payload)
        logger.debug(f"Thermos payload built with {len(thermos.task.processes)} process(es)")
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def task_config(self) -> TaskConfig:
        """The owned configuration (not a copy)."""
        return self._config

    def job_key(self) -> JobKey:
        """Copy of the job key."""
        return self._config.job.model_copy()

    def thermos(self) -> Optional[ThermosExecutor]:
        """Attached Thermos executor, if any."""
        return self._thermos

    def port_count(self) -> int:
        return self._port_count
