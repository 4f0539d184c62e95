"""
Root conftest.py - sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without a scheduler to talk to.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'core', 'config', 'infrastructure', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Every test starts without a cached configuration."""
    from config import reset_config
    reset_config()
    yield
    reset_config()


@pytest.fixture
def job_key_parts():
    """A fixed role/environment/name triple."""
    return {"role": "www-data", "environment": "prod", "name": "hello"}
