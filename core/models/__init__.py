"""
Core Data Models Package.

Contains pure data structures without business logic.
All business logic is in the core.logic package.

Exports:
    ScheduleStatus, JobUpdateStatus: Status enums
    TaskConfig, JobKey, Resource, Constraint, Container, ...: Task wire models
    ThermosExecutor, ThermosProcess: Thermos payload models
    JobUpdateSettings, JobUpdateRequest, Range, strategies: Update wire models
"""

# Enums
from .enums import (
    ScheduleStatus,
    JobUpdateStatus,
)

# Task models
from .task import (
    JobKey,
    Identity,
    Resource,
    ValueConstraint,
    LimitConstraint,
    TaskConstraint,
    Constraint,
    MesosFetcherURI,
    Metadata,
    ExecutorConfig,
    DockerParameter,
    DockerContainer,
    DockerImage,
    AppcImage,
    Image,
    Volume,
    VolumeMode,
    MesosContainer,
    Container,
    PartitionPolicy,
    TaskConfig,
)

# Thermos models
from .thermos import (
    ThermosProcess,
    ThermosResources,
    ThermosConstraint,
    ThermosTask,
    ThermosExecutor,
)

# Update models
from .update import (
    Range,
    BatchJobUpdateStrategy,
    QueueJobUpdateStrategy,
    VariableBatchJobUpdateStrategy,
    JobUpdateStrategy,
    JobUpdateSettings,
    JobUpdateRequest,
)

__all__ = [
    'ScheduleStatus',
    'JobUpdateStatus',
    'JobKey',
    'Identity',
    'Resource',
    'ValueConstraint',
    'LimitConstraint',
    'TaskConstraint',
    'Constraint',
    'MesosFetcherURI',
    'Metadata',
    'ExecutorConfig',
    'DockerParameter',
    'DockerContainer',
    'DockerImage',
    'AppcImage',
    'Image',
    'Volume',
    'VolumeMode',
    'MesosContainer',
    'Container',
    'PartitionPolicy',
    'TaskConfig',
    'ThermosProcess',
    'ThermosResources',
    'ThermosConstraint',
    'ThermosTask',
    'ThermosExecutor',
    'Range',
    'BatchJobUpdateStrategy',
    'QueueJobUpdateStrategy',
    'VariableBatchJobUpdateStrategy',
    'JobUpdateStrategy',
    'JobUpdateSettings',
    'JobUpdateRequest',
]
