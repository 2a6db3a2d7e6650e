"""Constants shared across exebridge modules."""

# Exit code used for every bridge failure and for abnormal child termination
DEFAULT_FAILURE_CODE = 1

# Local drive mounts look like /mnt/c or /mnt/c/Users/...
DEFAULT_LOCAL_DRIVE_PATTERN = r"^/mnt/[A-Za-z](/|$)"

# Prefixes marking a network share path
NETWORK_SHARE_PREFIXES = ("//", "\\\\")

# Host shell used to run scripted wrappers (.bat/.cmd)
DEFAULT_HOST_SHELL = "cmd.exe"
HOST_SHELL_RUN_FLAG = "/c"

# Utility converting a Linux path to the host's form
DEFAULT_PATH_TRANSLATOR = "wslpath"
PATH_TRANSLATOR_FLAG = "-w"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "exebridge: %(levelname)s: %(message)s"

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})
