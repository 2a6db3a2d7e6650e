"""Tests for the stream relay."""

import io
import subprocess
import sys
import textwrap

from exebridge.relay import join_relays, relay_stream, start_relays


class TestRelayStream:

    def test_copies_lines_verbatim(self):
        source = io.BytesIO(b"one\ntwo\r\n\nthree")
        sink = io.BytesIO()

        relay_stream(source, sink)

        assert sink.getvalue() == b"one\ntwo\r\n\nthree"

    def test_flushes_after_every_line(self, mocker):
        source = io.BytesIO(b"a\nb\nc")
        sink = mocker.Mock(spec=["write", "flush"])

        relay_stream(source, sink)

        assert sink.write.call_count == 3
        assert sink.flush.call_count == 3

    def test_writes_to_binary_buffer_of_text_stream(self):
        source = io.BytesIO("café\n".encode())
        raw = io.BytesIO()
        sink = io.TextIOWrapper(raw, encoding="utf-8")

        relay_stream(source, sink)

        assert raw.getvalue() == "café\n".encode()

    def test_text_only_sink_gets_decoded_lines(self):
        source = io.BytesIO(b"hello\nworld\n")
        sink = io.StringIO()

        relay_stream(source, sink)

        assert sink.getvalue() == "hello\nworld\n"

    def test_source_closed_at_end_of_stream(self):
        source = io.BytesIO(b"x\n")

        relay_stream(source, io.BytesIO())

        assert source.closed

    def test_closed_sink_stops_relay(self):
        source = io.BytesIO(b"x\ny\n")
        sink = io.BytesIO()
        sink.close()

        relay_stream(source, sink)

        assert source.closed

    def test_empty_stream(self):
        sink = io.BytesIO()

        relay_stream(io.BytesIO(b""), sink)

        assert sink.getvalue() == b""


class TestStartRelays:

    def test_no_threads_without_pipes(self, mocker):
        child = mocker.Mock(stdout=None, stderr=None)

        assert start_relays(child) == []

    def test_round_trip_preserves_each_stream(self, capsys):
        """N stdout lines and M stderr lines come out intact and in order."""
        out_lines = [f"out {i}" for i in range(200)]
        err_lines = [f"err {i}" for i in range(150)]
        script = textwrap.dedent(
            f"""
            import sys
            out = {out_lines!r}
            err = {err_lines!r}
            for i in range(max(len(out), len(err))):
                if i < len(out):
                    sys.stdout.write(out[i] + "\\n")
                    sys.stdout.flush()
                if i < len(err):
                    sys.stderr.write(err[i] + "\\n")
                    sys.stderr.flush()
            sys.stdout.write("tail without newline")
            """
        )
        child = subprocess.Popen(
            [sys.executable, "-c", script],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )

        threads = start_relays(child)
        child.wait()
        join_relays(threads)

        captured = capsys.readouterr()
        assert len(threads) == 2
        assert captured.out.splitlines() == out_lines + ["tail without newline"]
        assert captured.err.splitlines() == err_lines
