"""Tests for pwd: logical versus physical working directory."""

from __future__ import annotations

import os

import pytest

from textutils.pwd import get_logical_pwd, get_physical_pwd, main


@pytest.fixture
def linked_dir(tmp_path, monkeypatch):
    """Change into a directory reached through a symlink."""
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    link.symlink_to(real)
    monkeypatch.chdir(link)
    return real, link


class TestLogicalPwd:
    """Verify when $PWD is trusted."""

    def test_uses_pwd_when_it_names_cwd(self, linked_dir) -> None:
        """A valid $PWD keeps the symlinked spelling."""
        _real, link = linked_dir
        assert get_logical_pwd({"PWD": str(link)}) == str(link)

    def test_falls_back_when_pwd_unset(self, linked_dir) -> None:
        """Without $PWD, the physical path is printed."""
        real, _link = linked_dir
        assert get_logical_pwd({}) == os.path.realpath(real)

    def test_rejects_relative_or_dotted_pwd(self, linked_dir) -> None:
        """$PWD with '.' or '..' components, or relative, is ignored."""
        real, link = linked_dir
        expected = os.path.realpath(real)
        assert get_logical_pwd({"PWD": f"{link}/../link"}) == expected
        assert get_logical_pwd({"PWD": "link"}) == expected

    def test_rejects_stale_pwd(self, linked_dir, tmp_path) -> None:
        """$PWD naming some other directory is ignored."""
        real, _link = linked_dir
        assert get_logical_pwd({"PWD": str(tmp_path)}) == os.path.realpath(real)


class TestMain:
    """Verify the -L / -P switches."""

    def test_physical(self, linked_dir, run_tool) -> None:
        """-P resolves symlinks."""
        real, _link = linked_dir
        code, out, _ = run_tool(main, ["-P"])
        assert code == 0
        assert out.decode() == os.path.realpath(real) + "\n"
        assert get_physical_pwd() == os.path.realpath(real)

    def test_logical_default(self, linked_dir, monkeypatch, run_tool) -> None:
        """With no flag, a valid $PWD is printed."""
        _real, link = linked_dir
        monkeypatch.setenv("PWD", str(link))
        code, out, _ = run_tool(main, [])
        assert code == 0
        assert out.decode() == f"{link}\n"

    def test_flags_are_exclusive(self, run_tool) -> None:
        """-L and -P cannot be combined."""
        code, _, _ = run_tool(main, ["-L", "-P"])
        assert code == 2
