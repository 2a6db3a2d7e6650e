"""Executable locator module.

Resolves a bare command name to a concrete executable on PATH by trying
each extension convention in priority order. A candidate compatible with
the current context always beats an incompatible one, even when the
incompatible one has higher priority.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from exebridge.context import ExecutionContext
from exebridge.errors import FoundButRestrictedError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionRule:
    """One executable suffix convention and its launch requirements."""

    suffix: str
    supports_restricted_context: bool
    requires_stream_capture: bool
    requires_shell_wrapper: bool


@dataclass(frozen=True)
class ResolvedExecutable:
    """Outcome of a successful resolution."""

    path: Path
    requires_shell_wrapper: bool = False
    requires_stream_capture: bool = False


# Native binaries first, then batch wrappers. Order is the tie-break priority.
EXTENSION_RULES: tuple[ExtensionRule, ...] = (
    ExtensionRule(
        suffix=".exe",
        supports_restricted_context=True,
        requires_stream_capture=False,
        requires_shell_wrapper=False,
    ),
    ExtensionRule(
        suffix=".bat",
        supports_restricted_context=False,
        requires_stream_capture=True,
        requires_shell_wrapper=True,
    ),
    ExtensionRule(
        suffix=".cmd",
        supports_restricted_context=False,
        requires_stream_capture=True,
        requires_shell_wrapper=True,
    ),
)


def has_explicit_extension(command: str) -> bool:
    """Check if the command name already carries an extension.

    Dotfiles such as ".profile" have no extension.
    """
    return Path(command).suffix != ""


def _lookup(candidate: str, search_path: str | None) -> Path | None:
    found = shutil.which(candidate, path=search_path)
    logger.debug("Lookup %s -> %s", candidate, found)
    return Path(found) if found else None


def locate(
    command: str,
    ctx: ExecutionContext,
    search_path: str | None = None,
    rules: tuple[ExtensionRule, ...] = EXTENSION_RULES,
) -> ResolvedExecutable:
    """Locate the executable for a command name.

    Args:
        command: Command name as typed by the user (e.g. "npm" or "npm.cmd").
        ctx: Execution context of this invocation.
        search_path: os.pathsep separated directories. Defaults to $PATH.
        rules: Extension rules in priority order.

    Returns:
        The ResolvedExecutable.

    Raises:
        FoundButRestrictedError: Only candidates that cannot run in a
            restricted context were found.
        NotFoundError: No candidate was found at all.
    """
    if has_explicit_extension(command):
        path = _lookup(command, search_path)
        if path is None:
            raise NotFoundError(command)
        return ResolvedExecutable(path=path)

    found_unsupported: Path | None = None

    for rule in rules:
        path = _lookup(command + rule.suffix, search_path)
        if path is None:
            continue

        if ctx.is_restricted and not rule.supports_restricted_context:
            # Keep looking: a lower-priority compatible candidate still wins
            found_unsupported = path
            continue

        return ResolvedExecutable(
            path=path,
            requires_shell_wrapper=rule.requires_shell_wrapper,
            requires_stream_capture=rule.requires_stream_capture,
        )

    if found_unsupported is not None:
        raise FoundButRestrictedError(found_unsupported)

    raise NotFoundError(command)
