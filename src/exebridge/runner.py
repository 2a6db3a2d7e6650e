"""Invocation runner.

Wires the bridge together: probe, locate, select, launch, relay, finish.
"""

import logging

from exebridge.context import ExecutionContext, probe
from exebridge.executor import finish, launch
from exebridge.locator import locate
from exebridge.relay import start_relays
from exebridge.strategy import select

logger = logging.getLogger(__name__)


def run_command(
    command: str,
    args: list[str],
    ctx: ExecutionContext | None = None,
    search_path: str | None = None,
) -> int:
    """Run a command through the bridge.

    Args:
        command: Bare command name, optionally with an extension.
        args: Passthrough arguments.
        ctx: Execution context. Probed from the working directory if None.
        search_path: Directories to search. Defaults to $PATH.

    Returns:
        Exit code of the child.

    Raises:
        BridgeError: Resolution, launch or wait failed.
    """
    if ctx is None:
        ctx = probe()

    resolved = locate(command, ctx, search_path=search_path)
    plan = select(resolved)
    logger.debug("Resolved %s -> %s (%s)", command, resolved.path, plan)

    child = launch(plan, resolved, args)
    relays = start_relays(child) if plan.capture_streams else []
    return finish(child, resolved, relays)
