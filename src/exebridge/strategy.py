"""Execution strategy selection.

Kept apart from path resolution so the wrapper and capture policy can
change without touching the locator.
"""

from dataclasses import dataclass

from exebridge.locator import ResolvedExecutable


@dataclass(frozen=True)
class ExecutionPlan:
    """How the child process is launched."""

    use_shell_wrapper: bool
    capture_streams: bool


def select(resolved: ResolvedExecutable) -> ExecutionPlan:
    """Project a resolved executable onto an execution plan."""
    return ExecutionPlan(
        use_shell_wrapper=resolved.requires_shell_wrapper,
        capture_streams=resolved.requires_stream_capture,
    )
