"""
Task Configuration Wire Models.

Pydantic representation of the scheduler's task configuration - what
one instance of a job runs with. Union-shaped scheduler types (Resource,
TaskConstraint, Container, Image) enforce that exactly one member is set.

Fields are mutable so builders can edit a configuration in place; models
edited that way validate every assignment. Use model_copy(deep=True) to
detach a copy.

Exports:
    JobKey, Identity: Job identity
    Resource: One resource request (cpu, ram, disk, gpu or named port)
    ValueConstraint, LimitConstraint, TaskConstraint, Constraint: Placement constraints
    MesosFetcherURI: Artifact fetched into the sandbox
    Metadata: Key/value label
    ExecutorConfig: Executor name and opaque payload
    DockerParameter, DockerContainer: Docker containerizer
    DockerImage, AppcImage, Image, Volume, VolumeMode, MesosContainer: Mesos containerizer
    Container: Containerizer union
    PartitionPolicy: Behaviour when an agent is partitioned
    TaskConfig: Complete task configuration
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator


def _exactly_one_set(model: BaseModel, fields: List[str]) -> None:
    """Raise ValueError unless exactly one of the union fields is set."""
    set_fields = [name for name in fields if getattr(model, name) is not None]
    if len(set_fields) != 1:
        raise ValueError(
            f"{type(model).__name__} requires exactly one of {fields}, got {set_fields or 'none'}"
        )


class JobKey(BaseModel):
    """Unique job identity: role/environment/name."""

    model_config = ConfigDict(validate_assignment=True)

    role: str = ""
    environment: str = ""
    name: str = ""


class Identity(BaseModel):
    """Owner of the job."""

    model_config = ConfigDict(validate_assignment=True)

    user: str = ""


class Resource(BaseModel):
    """
    Single resource request. Exactly one field is set.
    """

    model_config = ConfigDict(validate_assignment=True)

    num_cpus: Optional[float] = Field(default=None, ge=0)
    ram_mb: Optional[int] = Field(default=None, ge=0)
    disk_mb: Optional[int] = Field(default=None, ge=0)
    num_gpus: Optional[int] = Field(default=None, ge=0)
    named_port: Optional[str] = None

    @model_validator(mode="after")
    def _one_resource(self) -> "Resource":
        _exactly_one_set(self, ["num_cpus", "ram_mb", "disk_mb", "num_gpus", "named_port"])
        return self


class ValueConstraint(BaseModel):
    """Attribute must (or, when negated, must not) match one of values."""

    negated: bool = False
    values: List[str] = Field(default_factory=list)


class LimitConstraint(BaseModel):
    """At most limit instances per attribute value."""

    limit: int


class TaskConstraint(BaseModel):
    """Value or limit constraint. Exactly one field is set."""

    value: Optional[ValueConstraint] = None
    limit: Optional[LimitConstraint] = None

    @model_validator(mode="after")
    def _one_constraint(self) -> "TaskConstraint":
        _exactly_one_set(self, ["value", "limit"])
        return self


class Constraint(BaseModel):
    """Placement constraint on a host attribute."""

    name: str
    constraint: TaskConstraint


class MesosFetcherURI(BaseModel):
    """Artifact the agent downloads into the task sandbox."""

    value: str
    extract: Optional[bool] = None
    cache: Optional[bool] = None


class Metadata(BaseModel):
    """Free-form key/value label."""

    key: str
    value: str


class ExecutorConfig(BaseModel):
    """Executor name and its opaque payload."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    data: str = ""


class DockerParameter(BaseModel):
    """Arbitrary docker run parameter."""

    name: str
    value: str


class DockerContainer(BaseModel):
    """Docker containerizer settings."""

    image: str
    parameters: List[DockerParameter] = Field(default_factory=list)


class DockerImage(BaseModel):
    name: str
    tag: str


class AppcImage(BaseModel):
    name: str
    image_id: str


class Image(BaseModel):
    """Mesos containerizer image. Exactly one field is set."""

    docker: Optional[DockerImage] = None
    appc: Optional[AppcImage] = None

    @model_validator(mode="after")
    def _one_image(self) -> "Image":
        _exactly_one_set(self, ["docker", "appc"])
        return self


class VolumeMode(Enum):
    """Volume access mode. Values are the scheduler's wire integers."""

    RW = 1
    RO = 2


class Volume(BaseModel):
    """Host path mounted into the container."""

    container_path: str
    host_path: str
    mode: VolumeMode = VolumeMode.RO


class MesosContainer(BaseModel):
    """Mesos containerizer settings. No image means the host filesystem."""

    image: Optional[Image] = None
    volumes: List[Volume] = Field(default_factory=list)


class Container(BaseModel):
    """Containerizer union. Exactly one field is set."""

    mesos: Optional[MesosContainer] = None
    docker: Optional[DockerContainer] = None

    @model_validator(mode="after")
    def _one_container(self) -> "Container":
        _exactly_one_set(self, ["mesos", "docker"])
        return self


class PartitionPolicy(BaseModel):
    """Whether and when to reschedule tasks on a partitioned agent."""

    reschedule: bool = True
    delay_secs: Optional[int] = Field(default=None, ge=0)


class TaskConfig(BaseModel):
    """
    Complete configuration of one job instance.

    This is the value embedded in a job update request. Builders own one
    instance each and mutate it in place.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    job: JobKey = Field(default_factory=JobKey, description="Job identity")
    owner: Identity = Field(default_factory=Identity, description="Job owner")
    is_service: bool = Field(default=False, description="Restart instances when they finish")
    priority: int = Field(default=0, description="Preemption priority")
    max_task_failures: int = Field(default=0, description="Failures tolerated per instance")
    production: bool = Field(default=False, description="Counts against production quota")
    tier: Optional[str] = Field(default=None, description="Scheduling tier")
    resources: List[Resource] = Field(default_factory=list)
    constraints: List[Constraint] = Field(default_factory=list)
    mesos_fetcher_uris: List[MesosFetcherURI] = Field(default_factory=list)
    metadata: List[Metadata] = Field(default_factory=list)
    container: Container = Field(default_factory=lambda: Container(mesos=MesosContainer()))
    executor_config: Optional[ExecutorConfig] = None
    partition_policy: Optional[PartitionPolicy] = None
