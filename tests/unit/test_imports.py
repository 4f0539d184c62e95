"""
Import order tests.

Each top-level module must import cleanly as the first import of a fresh
interpreter, whatever the test session has already loaded.
"""

import os
import subprocess
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _run_fresh(code: str) -> subprocess.CompletedProcess:
    env = {k: v for k, v in os.environ.items()
           if k not in ("AURORA_SCHEDULER_URL", "AURORA_LOG_LEVEL", "DEBUG_LOGGING")}
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestFreshImports:

    @pytest.mark.parametrize("code", [
        "from infrastructure.validators import validate_aurora_address; "
        "assert validate_aurora_address('example.com') == 'http://example.com:8081/api'",
        "import infrastructure, config; assert config.get_config().scheduler_url",
        "import config; import infrastructure",
        "from config import get_config; get_config()",
        "from util_logger import LoggerFactory, ComponentType; "
        "LoggerFactory.create_logger(ComponentType.BUILDER, 'fresh')",
        "from core import JobUpdate; JobUpdate().request()",
        "import core.logic",
    ], ids=["validators", "infrastructure-then-config", "config-then-infrastructure",
            "config", "util_logger", "core", "core.logic"])
    def test_first_import(self, code):
        result = _run_fresh(code)
        assert result.returncode == 0, result.stderr
