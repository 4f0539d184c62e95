"""
Unit test fixtures - factory-built models.
"""

import pytest

from tests.factories.model_factories import make_aurora_task, make_task_config


@pytest.fixture
def aurora_task():
    """Return a randomized AuroraTask."""
    return make_aurora_task()


@pytest.fixture
def task_config():
    """Return a randomized TaskConfig."""
    return make_task_config()
