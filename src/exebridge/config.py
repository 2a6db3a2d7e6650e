"""Configuration module.

Loads bridge settings from environment variables. There is no config file;
every value is read at call time so tests can patch ``os.environ``.

Environment Variables
---------------------
EXEBRIDGE_LOCAL_DRIVE_PATTERN : str
    Regular expression matched against the canonical working directory.
    A directory that matches is a local drive; anything else is treated as
    a restricted (network) location.
    Default: ^/mnt/[A-Za-z](/|$)

EXEBRIDGE_HOST_SHELL : str
    Host shell used to launch .bat/.cmd wrappers.
    Default: cmd.exe

EXEBRIDGE_PATH_TRANSLATOR : str
    Utility converting Linux paths into host paths (invoked with -w).
    Default: wslpath

EXEBRIDGE_STRICT_TRANSLATION : str
    When truthy (1, true, yes, on), any path translation failure aborts the
    launch instead of falling back to the untranslated path.
    Default: off

EXEBRIDGE_LOG_LEVEL : str
    Logging level name for bridge diagnostics.
    Default: WARNING
"""

import logging
import os
import re

from exebridge.constants import (
    DEFAULT_HOST_SHELL,
    DEFAULT_LOCAL_DRIVE_PATTERN,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PATH_TRANSLATOR,
    TRUTHY_VALUES,
)

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _get_env(key: str) -> str | None:
    """Read an environment variable, treating blank values as unset."""
    value = os.environ.get(key)
    if value and value.strip():
        return value.strip()
    return None


def get_local_drive_pattern() -> re.Pattern:
    """Get the compiled local-drive pattern.

    Reads EXEBRIDGE_LOCAL_DRIVE_PATTERN. An invalid regular expression is
    reported and the default pattern is used instead.

    Returns:
        Compiled regular expression.
    """
    raw = _get_env("EXEBRIDGE_LOCAL_DRIVE_PATTERN")
    if raw is not None:
        try:
            return re.compile(raw)
        except re.error as e:
            logger.warning(
                "Invalid EXEBRIDGE_LOCAL_DRIVE_PATTERN '%s' (%s), using default",
                raw,
                e,
            )
    return re.compile(DEFAULT_LOCAL_DRIVE_PATTERN)


def get_host_shell() -> str:
    """Get the host shell used for scripted wrappers."""
    return _get_env("EXEBRIDGE_HOST_SHELL") or DEFAULT_HOST_SHELL


def get_path_translator() -> str:
    """Get the path translation utility."""
    return _get_env("EXEBRIDGE_PATH_TRANSLATOR") or DEFAULT_PATH_TRANSLATOR


def is_strict_translation() -> bool:
    """Check whether any translation failure should abort the launch."""
    raw = _get_env("EXEBRIDGE_STRICT_TRANSLATION")
    return raw is not None and raw.lower() in TRUTHY_VALUES


def get_log_level() -> str:
    """Get the logging level name.

    Invalid values fall back to the default.

    Returns:
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    """
    raw = _get_env("EXEBRIDGE_LOG_LEVEL")
    if raw is not None and raw.upper() in VALID_LOG_LEVELS:
        return raw.upper()
    return DEFAULT_LOG_LEVEL
