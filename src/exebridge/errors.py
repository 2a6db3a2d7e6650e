"""Error types raised by the bridge.

Components raise these; only the CLI entry point catches them, prints the
one-line diagnostic to stderr and exits with ``exit_code``.
"""

from exebridge.constants import DEFAULT_FAILURE_CODE


class BridgeError(Exception):
    """Base class for all bridge failures."""

    exit_code = DEFAULT_FAILURE_CODE

    def diagnostic(self) -> str:
        """Return the single line reported to the user."""
        return f"Error: {self}"


class UsageError(BridgeError):
    """Raised when no command was given."""

    def __init__(self, program: str):
        super().__init__(f"Usage: {program} <command> [args...]")
        self.program = program

    def diagnostic(self) -> str:
        return str(self)


class NotFoundError(BridgeError):
    """No candidate executable exists on the search path."""

    def __init__(self, command: str):
        super().__init__(f"Command '{command}' not found")
        self.command = command


class FoundButRestrictedError(BridgeError):
    """A candidate exists but cannot run from the current directory."""

    def __init__(self, path):
        super().__init__(
            f"Command '{path}' found but cannot be executed from UNC path "
            "(network drive). Use .exe files or run from a local drive."
        )
        self.path = path


class SpawnError(BridgeError):
    """The OS refused to create the child process."""

    def __init__(self, path, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason

    def diagnostic(self) -> str:
        return f"Error starting '{self.path}': {self.reason}"


class WaitError(BridgeError):
    """The OS failed to report the child's termination."""

    def __init__(self, path, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason

    def diagnostic(self) -> str:
        return f"Error waiting for '{self.path}': {self.reason}"


class TranslationError(BridgeError):
    """The path translation utility failed.

    ``recoverable`` is True when the untranslated path may be used instead.
    """

    def __init__(self, path, reason: str, recoverable: bool = True):
        super().__init__(reason)
        self.path = path
        self.reason = reason
        self.recoverable = recoverable

    def diagnostic(self) -> str:
        return f"Error starting '{self.path}': {self.reason}"
