"""Tests for the pacman invocation primitive."""

from unittest.mock import patch, MagicMock

import pytest

from aurgate.errors import PacmanError
from aurgate.pacman import Pacman


def _proc(returncode=0, stdout="", stderr=""):
    return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)


class TestPacman:
    """output / success / run."""

    @patch("aurgate.pacman.subprocess.run")
    def test_output_returns_stdout(self, mock_run):
        mock_run.return_value = _proc(stdout="foo 1.0-1\n")
        assert Pacman().output(["-Qm"]) == "foo 1.0-1\n"
        assert mock_run.call_args[0][0] == ["pacman", "-Qm"]

    @patch("aurgate.pacman.subprocess.run")
    def test_output_ignores_exit_status(self, mock_run):
        mock_run.return_value = _proc(returncode=127, stdout="x>=2\n")
        assert Pacman().output(["-T", "x>=2"]) == "x>=2\n"

    @patch("aurgate.pacman.subprocess.run")
    def test_success(self, mock_run):
        mock_run.return_value = _proc(returncode=0)
        assert Pacman().success(["-Qq", "bash"]) is True
        mock_run.return_value = _proc(returncode=1)
        assert Pacman().success(["-Qq", "nope"]) is False

    @patch("aurgate.pacman.subprocess.run")
    def test_run_raises_on_failure(self, mock_run):
        mock_run.return_value = _proc(returncode=1, stderr="error: target not found: nope\n")
        with pytest.raises(PacmanError) as exc:
            Pacman("/usr/bin/pacman").run(["-Rsu", "nope"])
        assert exc.value.returncode == 1
        assert exc.value.pacman_args == ["-Rsu", "nope"]
        assert "target not found" in str(exc.value)
        assert mock_run.call_args[0][0] == ["/usr/bin/pacman", "-Rsu", "nope"]

    @patch("aurgate.pacman.subprocess.run")
    def test_run_success(self, mock_run):
        mock_run.return_value = _proc(returncode=0)
        assert Pacman().run(["-Rsu", "foo"]) is None
