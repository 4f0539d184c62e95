"""
Randomized model factories - anti-overfitting design.

Every factory call generates randomized non-identity fields
(resource sizes, label values, name suffixes) so tests cannot
rely on specific default values.
"""

import random
import string


def _random_suffix(length: int = 6) -> str:
    """Generate random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def make_task_config(**overrides):
    """
    Build a TaskConfig with randomized fields.

    Args:
        **overrides: Any field override

    Returns:
        TaskConfig instance
    """
    from core.models.task import JobKey, Identity, Metadata, Resource, TaskConfig

    suffix = _random_suffix()
    role = f"role-{suffix}"

    base = {
        "job": JobKey(role=role, environment="devel", name=f"job-{suffix}"),
        "owner": Identity(user=role),
        "is_service": random.choice([True, False]),
        "max_task_failures": random.randint(1, 5),
        "resources": [
            Resource(num_cpus=round(random.uniform(0.1, 8.0), 2)),
            Resource(ram_mb=random.randint(32, 4096)),
            Resource(disk_mb=random.randint(64, 8192)),
        ],
        "metadata": [Metadata(key="suffix", value=suffix)],
    }
    base.update(overrides)
    return TaskConfig(**base)


def make_aurora_task(**overrides):
    """
    Build an AuroraTask with randomized identity and resources.

    Args:
        **overrides: role, environment, name, cpu, ram, disk

    Returns:
        AuroraTask instance
    """
    from core.aurora_task import AuroraTask

    suffix = _random_suffix()
    values = {
        "role": f"role-{suffix}",
        "environment": random.choice(["prod", "staging", "devel"]),
        "name": f"job-{suffix}",
        "cpu": round(random.uniform(0.1, 8.0), 2),
        "ram": random.randint(32, 4096),
        "disk": random.randint(64, 8192),
    }
    values.update(overrides)

    return (
        AuroraTask()
        .role(values["role"])
        .environment(values["environment"])
        .name(values["name"])
        .cpu(values["cpu"])
        .ram(values["ram"])
        .disk(values["disk"])
    )
