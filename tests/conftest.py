"""Shared fixtures for the tool tests."""

from __future__ import annotations

import io
import sys

import pytest


@pytest.fixture
def fake_stdin(monkeypatch):
    """Replace stdin with a byte-backed stream readable as text or bytes."""

    def _install(data: bytes) -> None:
        stream = io.TextIOWrapper(io.BytesIO(data), encoding="utf-8", newline="")
        monkeypatch.setattr(sys, "stdin", stream)

    return _install


@pytest.fixture
def run_tool(capsysbinary):
    """Run a tool's main() and return (exit code, stdout bytes, stderr bytes)."""

    def _run(main, argv: list[str]) -> tuple[int, bytes, bytes]:
        with pytest.raises(SystemExit) as exc:
            main(argv)
        captured = capsysbinary.readouterr()
        code = exc.value.code
        return (0 if code is None else code), captured.out, captured.err

    return _run
