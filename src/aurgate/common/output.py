"""Operator-facing messages.

notify/warn/scold map onto INFO/WARNING/ERROR of a dedicated logger so the
caller decides how (and whether) they reach the terminal.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..constants import Messages
from ..settings import Settings
from ..versioning.models import PkgName

logger = logging.getLogger("aurgate.output")

Emitter = Callable[[Settings, str], None]


def notify(settings: Settings, message: str) -> None:
    """Print a routine status message."""
    logger.info(message)


def warn(settings: Settings, message: str) -> None:
    """Print something the operator should look at."""
    logger.warning(message)


def scold(settings: Settings, message: str) -> None:
    """Print an error the operator has to act on."""
    logger.error(message)


def report(
    settings: Settings,
    emit: Emitter,
    message: str,
    names: Iterable[PkgName],
) -> None:
    """Emit a header message followed by one line per package name.

    Usually a list of packages that could not be found or built.
    """
    emit(settings, message)
    for name in sorted(names):
        emit(settings, f"  {name}")


def report_unresolved(
    settings: Settings,
    names: Iterable[PkgName],
    emit: Emitter = scold,
) -> None:
    """Report the names a resolution left unresolved, if any."""
    names = sorted(names)
    if names:
        report(settings, emit, Messages.NOT_FOUND, names)
