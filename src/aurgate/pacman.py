"""Thin wrapper around the ``pacman`` executable.

Three call shapes cover everything the core needs: captured stdout, a bare
success flag, and a call that must succeed.
"""

from __future__ import annotations

import logging
import subprocess
from typing import List, Sequence

from .common.logging_utils import extra_context, is_debug_enabled, Timer
from .constants import Constants
from .errors import PacmanError

logger = logging.getLogger(__name__)


class Pacman:
    """Runs pacman with a fixed executable path."""

    def __init__(self, executable: str = Constants.PACMAN_BIN):
        self.executable = executable

    def _run(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        cmd: List[str] = [self.executable, *args]
        with Timer() as t:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
            )
        if is_debug_enabled(logger):
            logger.debug(
                "pacman call",
                extra=extra_context(
                    event="subprocess",
                    component="pacman",
                    action=" ".join(args),
                    returncode=proc.returncode,
                    duration_ms=t.duration_ms(),
                )
            )
        return proc

    def output(self, args: Sequence[str]) -> str:
        """Captured standard output, whatever the exit status."""
        return self._run(args).stdout or ""

    def success(self, args: Sequence[str]) -> bool:
        """True when pacman exits zero."""
        return self._run(args).returncode == 0

    def run(self, args: Sequence[str]) -> None:
        """Run a call that must succeed.

        Raises:
            PacmanError: pacman exited non-zero.
        """
        proc = self._run(args)
        if proc.returncode != 0:
            raise PacmanError(args, proc.returncode, proc.stderr or "")
