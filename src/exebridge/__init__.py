"""exebridge - run host executables from a Linux shell with the right strategy."""

__version__ = "0.1.0"
