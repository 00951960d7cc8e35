"""Batch lookup backends and their fallback composition.

A Repository answers, for a non-empty set of names, which of them it can
provide (as Packages) and which it cannot. Repositories compose left to right:
a later backend only ever sees the names every earlier backend left
unresolved, and is not called at all once nothing is left.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import AbstractSet, Callable, FrozenSet, Iterable, NamedTuple

from ..common.logging_utils import extra_context, is_debug_enabled
from ..settings import Settings
from ..versioning.models import Build, Package, Pacman, PkgName

logger = logging.getLogger(__name__)


class LookupResult(NamedTuple):
    """Outcome of one lookup: names left over, and what was resolved."""

    unresolved: FrozenSet[PkgName]
    resolved: FrozenSet[Package]


LookupFn = Callable[[Settings, FrozenSet[PkgName]], LookupResult]


def package_name(pkg: Package) -> PkgName:
    """Name a resolved Package answers for."""
    if isinstance(pkg, Pacman):
        return pkg.name
    if isinstance(pkg, Build):
        return pkg.buildable.name
    raise TypeError(f"not a Package: {pkg!r}")


def require_names(names: Iterable[PkgName]) -> FrozenSet[PkgName]:
    """Freeze a request, refusing an empty one."""
    frozen = frozenset(names)
    if not frozen:
        raise ValueError("a lookup needs at least one package name")
    return frozen


class Repository:
    """A named batch-lookup backend.

    Args:
        lookup: Callable taking (settings, names) and returning a LookupResult.
        name: Label used in logs.
    """

    def __init__(self, lookup: LookupFn, name: str = "repository"):
        self._lookup = lookup
        self.name = name

    def lookup(self, settings: Settings, names: AbstractSet[PkgName]) -> LookupResult:
        """Resolve ``names``; every name ends up unresolved or resolved, not both."""
        request = require_names(names)
        unresolved, resolved = self._lookup(settings, request)
        result = LookupResult(frozenset(unresolved), frozenset(resolved))
        if is_debug_enabled(logger):
            logger.debug(
                "Repository lookup",
                extra=extra_context(
                    event="lookup",
                    component="repository",
                    action=self.name,
                    requested=len(request),
                    resolved=len(result.resolved),
                    unresolved=len(result.unresolved),
                )
            )
        return result

    def __repr__(self) -> str:
        return f"Repository({self.name!r})"


def combine(first: Repository, second: Repository) -> Repository:
    """Fallback from ``first`` to ``second``.

    ``second`` is asked only about what ``first`` could not resolve, and only
    if that is non-empty. Resolutions from ``first`` always win.
    """

    def lookup(settings: Settings, names: FrozenSet[PkgName]) -> LookupResult:
        bads, goods = first.lookup(settings, names)
        if not bads:
            return LookupResult(bads, goods)
        more_bads, more_goods = second.lookup(settings, bads)
        return LookupResult(more_bads, goods | more_goods)

    return Repository(lookup, name=f"{first.name}+{second.name}")


def chain(repositories: Iterable[Repository]) -> Repository:
    """Reduce an ordered list of backends to one Repository via ``combine``."""
    repos = list(repositories)
    if not repos:
        raise ValueError("chain needs at least one repository")
    return reduce(combine, repos)


def resolve(
    settings: Settings,
    repositories: Iterable[Repository],
    names: Iterable[PkgName],
) -> LookupResult:
    """Run a request through the fallback chain of ``repositories``."""
    return chain(repositories).lookup(settings, require_names(names))
