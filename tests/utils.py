"""Shared test utilities for exebridge tests.

Fake executables are small /bin/sh scripts, so a "foo.exe" or "foo.bat"
can be spawned for real on the test machine.
"""

import os
import stat
from pathlib import Path


def make_executable(directory: Path, name: str, body: str = "exit 0") -> Path:
    """Create an executable shell script.

    Args:
        directory: Directory to create the script in.
        name: File name, including any extension (e.g. "foo.exe").
        body: Shell script body.

    Returns:
        Path to the script.
    """
    path = directory / name
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def make_plain_file(directory: Path, name: str) -> Path:
    """Create a non-executable file, which PATH lookup must ignore."""
    path = directory / name
    path.write_text("not executable\n")
    os.chmod(path, 0o644)
    return path
