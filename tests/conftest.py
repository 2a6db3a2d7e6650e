"""Shared pytest fixtures for exebridge tests.

For helpers that create fake executables, see tests/utils.py which can be
imported directly.
"""

import pytest

from exebridge.context import ExecutionContext

BRIDGE_ENV_VARS = (
    "EXEBRIDGE_LOCAL_DRIVE_PATTERN",
    "EXEBRIDGE_HOST_SHELL",
    "EXEBRIDGE_PATH_TRANSLATOR",
    "EXEBRIDGE_STRICT_TRANSLATION",
    "EXEBRIDGE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_bridge_env(monkeypatch):
    """Make sure the developer's own EXEBRIDGE_* settings never leak in."""
    for key in BRIDGE_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def bin_dir(tmp_path):
    """Empty directory used as the whole search path."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def search_path(bin_dir):
    """Search path string containing only bin_dir."""
    return str(bin_dir)


@pytest.fixture
def local_context():
    """Context of a working directory on a local drive."""
    return ExecutionContext(is_restricted=False, cwd="/mnt/c/work")


@pytest.fixture
def restricted_context():
    """Context of a working directory on a network share."""
    return ExecutionContext(is_restricted=True, cwd="/home/user")
