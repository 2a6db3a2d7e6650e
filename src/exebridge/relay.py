"""Stream relay module.

Copies a captured child stream to the parent's matching stream one line at
a time, flushing after each line so output appears as it is produced.
One thread per stream; the threads share nothing.
"""

import logging
import sys
import threading

logger = logging.getLogger(__name__)


def _write_line(sink, line: bytes) -> None:
    """Write raw bytes to a binary sink, or decoded text to a text sink."""
    binary = getattr(sink, "buffer", None)
    if binary is not None:
        binary.write(line)
        binary.flush()
        return
    try:
        sink.write(line)
    except TypeError:
        sink.write(line.decode(errors="replace"))
    sink.flush()


def relay_stream(source, sink) -> None:
    """Copy lines from a binary pipe to a sink until end of stream.

    A line is every byte up to and including b"\\n", or the final partial
    line. The source is closed once exhausted.

    Args:
        source: Binary file object (the child's pipe).
        sink: Parent stream (text stream with .buffer, or binary file).
    """
    try:
        for line in iter(source.readline, b""):
            try:
                _write_line(sink, line)
            except (BrokenPipeError, ValueError) as e:
                logger.debug("Parent stream closed, stopping relay: %s", e)
                break
    finally:
        source.close()


def start_relays(child) -> list[threading.Thread]:
    """Start relay threads for every captured stream of a child process.

    The parent streams are looked up at call time so redirected
    sys.stdout/sys.stderr are honored.

    Args:
        child: subprocess.Popen started with stdout/stderr pipes.

    Returns:
        The started threads, to be passed to join_relays().
    """
    threads = []
    for name, source, sink in (
        ("stdout", child.stdout, sys.stdout),
        ("stderr", child.stderr, sys.stderr),
    ):
        if source is None:
            continue
        thread = threading.Thread(
            target=relay_stream,
            args=(source, sink),
            name=f"exebridge-relay-{name}",
            daemon=True,
        )
        thread.start()
        threads.append(thread)
    return threads


def join_relays(threads) -> None:
    """Wait until every relay thread has drained its stream."""
    for thread in threads:
        thread.join()
