"""Process launch and exit mapping.

Builds the child command line for the selected plan, spawns it, and turns
its termination status into the bridge's exit code.
"""

import logging
import subprocess

from exebridge.config import get_host_shell, is_strict_translation
from exebridge.constants import DEFAULT_FAILURE_CODE, HOST_SHELL_RUN_FLAG
from exebridge.errors import SpawnError, TranslationError, WaitError
from exebridge.locator import ResolvedExecutable
from exebridge.relay import join_relays
from exebridge.strategy import ExecutionPlan
from exebridge.translator import translate

logger = logging.getLogger(__name__)


def _host_path(resolved: ResolvedExecutable) -> str:
    """Get the executable path as the host shell should see it.

    Falls back to the untranslated path when translation fails in a
    recoverable way and strict translation is off.

    Raises:
        SpawnError: Translation failed and no fallback is allowed.
    """
    try:
        return translate(resolved.path)
    except TranslationError as e:
        if not e.recoverable or is_strict_translation():
            raise SpawnError(resolved.path, e.reason) from e
        logger.info("Path translation failed (%s), using %s", e.reason, resolved.path)
        return str(resolved.path)


def build_command(
    plan: ExecutionPlan,
    resolved: ResolvedExecutable,
    args: list[str],
) -> list[str]:
    """Build the argv for the child process.

    Args:
        plan: Selected execution plan.
        resolved: Resolved executable.
        args: Passthrough arguments, forwarded verbatim.

    Returns:
        Argument vector for subprocess.Popen.
    """
    if plan.use_shell_wrapper:
        return [get_host_shell(), HOST_SHELL_RUN_FLAG, _host_path(resolved), *args]
    return [str(resolved.path), *args]


def launch(
    plan: ExecutionPlan,
    resolved: ResolvedExecutable,
    args: list[str],
) -> subprocess.Popen:
    """Spawn the child process.

    Args:
        plan: Selected execution plan.
        resolved: Resolved executable.
        args: Passthrough arguments.

    Returns:
        The running child. Its stdout/stderr are binary pipes when the
        plan captures streams, otherwise None (inherited).

    Raises:
        SpawnError: The command could not be built or started.
    """
    command = build_command(plan, resolved, args)
    pipe = subprocess.PIPE if plan.capture_streams else None
    logger.debug("Launching %s (capture=%s)", command, plan.capture_streams)

    try:
        return subprocess.Popen(command, stdout=pipe, stderr=pipe)
    except OSError as e:
        raise SpawnError(resolved.path, e.strerror or str(e)) from e


def exit_code_from_status(returncode: int | None) -> int:
    """Map a Popen return code to this process's exit code.

    Negative codes (killed by a signal) and missing codes become
    DEFAULT_FAILURE_CODE.
    """
    if returncode is None or returncode < 0:
        return DEFAULT_FAILURE_CODE
    return returncode


def finish(
    child: subprocess.Popen,
    resolved: ResolvedExecutable,
    relays=(),
) -> int:
    """Wait for the child, drain relays and return the exit code.

    Relays are joined after the wait returns: a child can exit while its
    last lines are still in the pipe.

    Raises:
        WaitError: The OS failed to report termination.
    """
    try:
        returncode = child.wait()
    except OSError as e:
        raise WaitError(resolved.path, e.strerror or str(e)) from e

    join_relays(relays)

    exit_code = exit_code_from_status(returncode)
    logger.debug("%s exited with status %s -> %d", resolved.path, returncode, exit_code)
    return exit_code
