"""Queries against the installed system's package database.

Everything here is read-only except remove_pkgs. Each function takes the
pacman primitive explicitly so callers (and tests) choose the executable.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional

from .constants import Constants
from .pacman import Pacman
from .repository.base import require_names
from .settings import Settings
from .versioning.models import Dep, PkgName, SimplePkg
from .versioning.parser import parse_name, parse_simple_pkg

logger = logging.getLogger(__name__)


def foreign_packages(pacman: Pacman) -> FrozenSet[SimplePkg]:
    """Installed packages that came from no sync database (``-Qm``)."""
    pkgs = (parse_simple_pkg(line) for line in pacman.output(["-Qm"]).splitlines())
    return frozenset(p for p in pkgs if p is not None)


def orphans(pacman: Pacman) -> FrozenSet[PkgName]:
    """Packages installed as dependencies that nothing requires anymore."""
    names = (parse_name(line) for line in pacman.output(["-Qqdt"]).splitlines() if line.strip())
    return frozenset(n for n in names if n is not None)


def is_devel_pkg(name: PkgName) -> bool:
    """True for VCS packages such as ``foo-git``."""
    return name.value.endswith(Constants.DEVEL_SUFFIXES)


def devel_pkgs(pacman: Pacman) -> FrozenSet[PkgName]:
    """Foreign packages built from a VCS checkout."""
    return frozenset(p.name for p in foreign_packages(pacman) if is_devel_pkg(p.name))


def is_installed(pacman: Pacman, name: PkgName) -> Optional[PkgName]:
    """Return ``name`` if it is installed, otherwise None."""
    return name if pacman.success(["-Qq", name.value]) else None


def is_satisfied(pacman: Pacman, dep: Dep) -> bool:
    """True if an installed package satisfies ``dep``.

    ``pacman -T`` prints the dependencies it cannot satisfy, so empty output
    means success.
    """
    return not pacman.output(["-T", dep.render()]).strip()


def remove_pkgs(settings: Settings, pacman: Pacman, names: Iterable[PkgName]) -> None:
    """Remove packages with their unneeded dependencies (``-Rsu``).

    Raises:
        PacmanError: pacman refused or failed.
    """
    targets = sorted(require_names(names))
    logger.info("Removing %d package(s)", len(targets))
    pacman.run(["-Rsu", *(n.value for n in targets), *settings.pacman_flags])
