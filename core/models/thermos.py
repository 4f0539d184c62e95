"""
Thermos Executor Payload Models.

Thermos is the scheduler's default executor. Its configuration travels
as a JSON document in the task's executor data; these models describe
that document and render it.

Payload shape:
    {"task": {"processes": [...],
              "constraints": [{"order": ["setup", "run"]}],
              "resources": {"cpu": 1.0, "ram": 64, "disk": 128}}}

Exports:
    ThermosProcess: One process of the Thermos task
    ThermosResources: Resources copied from the task configuration
    ThermosConstraint: Process ordering constraint
    ThermosTask: Processes, constraints and resources
    ThermosExecutor: Executor wiring attached to a task
"""

import json
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class ThermosProcess(BaseModel):
    """
    Single process run by Thermos.

    Defaults match the ones Thermos applies to processes in job files.
    """

    name: str
    cmdline: str
    daemon: bool = False
    ephemeral: bool = False
    max_failures: int = Field(default=1, ge=0)
    min_duration: int = Field(default=5, ge=0)
    final: bool = False


class ThermosResources(BaseModel):
    """Resources of the Thermos task. Unset values are left out of the payload."""

    cpu: Optional[float] = None
    ram: Optional[int] = None
    disk: Optional[int] = None
    gpu: Optional[int] = None


class ThermosConstraint(BaseModel):
    """Processes listed in order run one after the other."""

    order: List[str] = Field(default_factory=list)


class ThermosTask(BaseModel):
    """Processes keyed by name, plus constraints and resources."""

    processes: Dict[str, ThermosProcess] = Field(default_factory=dict)
    constraints: List[ThermosConstraint] = Field(default_factory=list)
    resources: ThermosResources = Field(default_factory=ThermosResources)


class ThermosExecutor(BaseModel):
    """
    Thermos executor wiring for a task.

    Resources are filled in from the task configuration when the payload
    is built, so they never drift from what the scheduler allocates.

    Example:
        thermos = ThermosExecutor()
        thermos.process(ThermosProcess(name="setup", cmdline="./setup.sh"))
        thermos.process(ThermosProcess(name="run", cmdline="./run.sh"))
        thermos.process_order("setup", "run")
    """

    task: ThermosTask = Field(default_factory=ThermosTask)
    order: Optional[ThermosConstraint] = None

    def process(self, process: ThermosProcess) -> "ThermosExecutor":
        """Add a process. A process with the same name is replaced."""
        self.task.processes[process.name] = process
        return self

    def process_order(self, *names: str) -> "ThermosExecutor":
        """Append names to the process ordering constraint."""
        if self.order is None:
            self.order = ThermosConstraint()
        self.order.order.extend(names)
        return self

    def ordered_names(self) -> List[str]:
        """Process names referenced by ordering constraints."""
        names = []
        if self.order is not None:
            names.extend(self.order.order)
        for constraint in self.task.constraints:
            names.extend(constraint.order)
        return names

    def to_json(self) -> str:
        """Render the executor payload."""
        constraints = [c.model_dump() for c in self.task.constraints]
        if self.order is not None and self.order.order:
            constraints.append(self.order.model_dump())

        task = {}
        if self.task.processes:
            task["processes"] = [p.model_dump() for p in self.task.processes.values()]
        if constraints:
            task["constraints"] = constraints
        task["resources"] = self.task.resources.model_dump(exclude_none=True)

        return json.dumps({"task": task})
