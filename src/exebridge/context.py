"""Execution context probe.

Decides whether the current working directory is a restricted location.
From WSL, a directory outside a /mnt/<drive> mount is reached by Windows
through a UNC path, and cmd.exe refuses to start batch files there.
"""

import logging
import os
import re
from dataclasses import dataclass

from exebridge.config import get_local_drive_pattern
from exebridge.constants import NETWORK_SHARE_PREFIXES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionContext:
    """Restriction state of the invocation, computed once at startup."""

    is_restricted: bool
    cwd: str | None = None


def is_restricted_path(path: str, pattern: re.Pattern | None = None) -> bool:
    """Classify a canonical directory path.

    Args:
        path: Canonical (symlink-free) directory path.
        pattern: Local-drive pattern. Defaults to the configured one.

    Returns:
        True if the path is a network share or not on a local drive mount.
    """
    if pattern is None:
        pattern = get_local_drive_pattern()
    if path.startswith(NETWORK_SHARE_PREFIXES):
        return True
    return pattern.match(path) is None


def probe(cwd: str | None = None, pattern: re.Pattern | None = None) -> ExecutionContext:
    """Determine the execution context for this invocation.

    Never raises: if the working directory cannot be determined the
    context is classified as restricted.

    Args:
        cwd: Directory to classify. Defaults to os.getcwd().
        pattern: Local-drive pattern override.

    Returns:
        The ExecutionContext.
    """
    try:
        if cwd is None:
            cwd = os.getcwd()
        canonical = os.path.realpath(cwd)
    except (OSError, ValueError) as e:
        logger.debug("Cannot determine working directory (%s), assuming restricted", e)
        return ExecutionContext(is_restricted=True)

    restricted = is_restricted_path(canonical, pattern)
    logger.debug("Working directory %s restricted=%s", canonical, restricted)
    return ExecutionContext(is_restricted=restricted, cwd=canonical)
