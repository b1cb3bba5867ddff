"""Tests for head: line and byte limits, headers and errors."""

from __future__ import annotations

from textutils.head import main, preprocess_argv

TEN_PLUS = b"".join(f"{i}\n".encode() for i in range(1, 16))


class TestPreprocessArgv:
    """Verify the historical -NUMBER syntax is rewritten."""

    def test_number_option(self) -> None:
        """-20 becomes -n 20."""
        assert preprocess_argv(["-20", "f"]) == ["-n", "20", "f"]

    def test_other_arguments_untouched(self) -> None:
        """Ordinary options and '-' pass through."""
        assert preprocess_argv(["-q", "-", "-n5"]) == ["-q", "-", "-n5"]


class TestMain:
    """Verify head output for stdin and files."""

    def test_default_ten_lines(self, fake_stdin, run_tool) -> None:
        """With no options, the first ten lines are printed."""
        fake_stdin(TEN_PLUS)
        code, out, _ = run_tool(main, [])
        assert code == 0
        assert out == b"".join(f"{i}\n".encode() for i in range(1, 11))

    def test_line_count(self, fake_stdin, run_tool) -> None:
        """-n and -NUMBER both set the line count."""
        fake_stdin(TEN_PLUS)
        _, out, _ = run_tool(main, ["-3"])
        assert out == b"1\n2\n3\n"

    def test_byte_count(self, fake_stdin, run_tool) -> None:
        """-c prints a byte prefix regardless of line breaks."""
        fake_stdin(b"abc\ndef\n")
        _, out, _ = run_tool(main, ["-c", "5"])
        assert out == b"abc\nd"

    def test_headers_for_multiple_files(self, tmp_path, run_tool) -> None:
        """Each file gets a header, separated by a blank line."""
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.write_bytes(b"1\n2\n")
        b.write_bytes(b"3\n")
        code, out, _ = run_tool(main, ["-n", "1", str(a), str(b)])
        assert code == 0
        assert out == f"==> {a} <==\n1\n\n==> {b} <==\n3\n".encode()

    def test_quiet_and_verbose(self, tmp_path, fake_stdin, run_tool) -> None:
        """-q hides headers for many files; -v shows them for one."""
        a = tmp_path / "a"
        a.write_bytes(b"x\n")
        _, out, _ = run_tool(main, ["-q", str(a), str(a)])
        assert out == b"x\nx\n"
        fake_stdin(b"y\n")
        _, out, _ = run_tool(main, ["-v"])
        assert out == b"==> standard input <==\ny\n"

    def test_missing_and_directory(self, tmp_path, run_tool) -> None:
        """Bad inputs are reported, good ones still print, status is 1."""
        a = tmp_path / "a"
        a.write_bytes(b"x\n")
        code, out, err = run_tool(main, ["-q", str(tmp_path / "nope"), str(tmp_path), str(a)])
        assert code == 1
        assert out == b"x\n"
        assert b"No such file or directory" in err
        assert b"Is a directory" in err

    def test_negative_count_rejected(self, run_tool) -> None:
        """A negative count is a usage error."""
        code, out, _ = run_tool(main, ["-n", "-2"])
        assert code == 2
        assert out == b""
