"""Failure kinds raised by guarded operations."""

from __future__ import annotations

from typing import Sequence

from .constants import Messages


class AurgateError(Exception):
    """Base class for all failures raised by aurgate."""


class PrivilegeError(AurgateError):
    """The current user may not perform the requested action."""


class MustBeRootError(PrivilegeError):
    """Raised when an action needs root (directly or through sudo)."""

    def __init__(self, message: str = Messages.MUST_BE_ROOT):
        super().__init__(message)


class TrueRootError(PrivilegeError):
    """Raised when building would happen as the true root account."""

    def __init__(self, message: str = Messages.TRUE_ROOT):
        super().__init__(message)


class PacmanError(AurgateError):
    """A pacman call that must succeed exited non-zero."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.pacman_args = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(
            f"pacman {' '.join(self.pacman_args)} exited with {returncode}{detail}"
        )
