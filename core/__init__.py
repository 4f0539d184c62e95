"""
Core Update Components.

Builders for job update requests and the pure logic used to track an
update while it runs.

Structure:
    models/: Pure data structures (no business logic)
    logic/: Status tables and batch calculations
    aurora_task.py: Task configuration builder
    containers.py: Container builders
    job_update.py: Job update request builder

Exports:
    AuroraTask: Task configuration builder
    JobUpdate: Job update request builder
    DockerContainerBuilder, MesosContainerBuilder: Container builders
"""

from . import models
from . import logic

from .aurora_task import AuroraTask
from .containers import DockerContainerBuilder, MesosContainerBuilder
from .job_update import JobUpdate

__all__ = [
    'AuroraTask',
    'JobUpdate',
    'DockerContainerBuilder',
    'MesosContainerBuilder',
    'models',
    'logic',
]
