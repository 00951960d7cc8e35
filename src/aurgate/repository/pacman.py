"""Binary repository backend backed by pacman's sync databases."""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional

from ..pacman import Pacman as PacmanCmd
from ..settings import Settings
from ..versioning.models import Pacman, PkgName
from ..versioning.parser import parse_name
from .base import LookupResult, Repository

logger = logging.getLogger(__name__)


def sync_names(pacman: PacmanCmd) -> FrozenSet[PkgName]:
    """Every package name the sync databases know about (``pacman -Slq``)."""
    names = (parse_name(line) for line in pacman.output(["-Slq"]).splitlines() if line.strip())
    return frozenset(n for n in names if n is not None)


def pacman_repo(pacman: Optional[PacmanCmd] = None) -> Repository:
    """Repository resolving names found in the sync databases to Pacman packages.

    One pacman call answers the whole batch.
    """
    cmd = pacman if pacman is not None else PacmanCmd()

    def lookup(settings: Settings, names: FrozenSet[PkgName]) -> LookupResult:
        known = sync_names(cmd)
        found = names & known
        logger.debug("Sync databases resolved %d of %d names", len(found), len(names))
        return LookupResult(names - found, frozenset(Pacman(n) for n in found))

    return Repository(lookup, name="pacman")
