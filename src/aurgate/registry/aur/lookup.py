"""AUR resolution: batch lookups into Buildables, search/info, and cloning.

aur_lookup makes one RPC call for the whole request, then fetches one
PKGBUILD per package base. Names the AUR does not know, and names whose
PKGBUILD could not be fetched, come back unresolved.
"""
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from ...common.logging_utils import extra_context, is_debug_enabled
from ...constants import Constants, SortMode
from ...repository.base import LookupResult, Repository, require_names
from ...settings import Settings
from ...versioning.models import Build, Buildable, Package, PkgName, Provides
from ...versioning.parser import parse_dep, parse_name, parse_version
from .client import AurClient, AurInfo

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Optional[str]]


def pkg_url(name: PkgName, aur_url: str = Constants.AUR_URL) -> str:
    """A package's home page on the AUR."""
    return f"{aur_url.rstrip('/')}/packages/{name}"


def _provides(info: AurInfo, own: PkgName) -> Provides:
    # Only the first declared alternate is kept.
    if info.provides:
        dep = parse_dep(info.provides[0])
        if dep is not None:
            return Provides(dep.name)
    return Provides(own)


def to_buildable(info: AurInfo, pkgbuild: str) -> Optional[Buildable]:
    """Build the Buildable for one RPC record and its fetched PKGBUILD.

    Dependency strings that fail to parse are dropped, as is an unparsable
    version. Returns None only if the record's own names are invalid.
    """
    name = parse_name(info.name)
    base = parse_name(info.package_base)
    if name is None or base is None:
        return None
    deps = (parse_dep(d) for d in [*info.depends, *info.make_depends])
    return Buildable(
        name=name,
        base=base,
        pkgbuild=pkgbuild,
        provides=_provides(info, name),
        deps=tuple(d for d in deps if d is not None),
        version=parse_version(info.version),
        is_explicit=False,
    )


def aur_lookup(
    settings: Settings,
    names: Iterable[PkgName],
    client: Optional[AurClient] = None,
    fetch: Optional[Fetcher] = None,
) -> Tuple[FrozenSet[PkgName], FrozenSet[Buildable]]:
    """Resolve names against the AUR.

    Args:
        settings: Runtime settings.
        names: Non-empty set of requested names.
        client: AUR RPC client; built from settings when omitted.
        fetch: PKGBUILD fetcher taking a base name; defaults to client.pkgbuild.

    Returns:
        Tuple of (unresolved names, buildables).
    """
    request = require_names(names)
    aur = client if client is not None else AurClient.from_settings(settings)
    fetch_pkgbuild = fetch if fetch is not None else aur.pkgbuild

    infos = aur.info(n.value for n in request)

    pkgbuilds: Dict[str, Optional[str]] = {}
    bads = set()
    goods: List[Buildable] = []
    for info in infos:
        base = info.package_base
        if base not in pkgbuilds:
            pkgbuilds[base] = fetch_pkgbuild(base)
        pkgbuild = pkgbuilds[base]
        bld = to_buildable(info, pkgbuild) if pkgbuild is not None else None
        if bld is None:
            bad = parse_name(info.name)
            if bad is not None:
                bads.add(bad)
            continue
        goods.append(bld)

    good_names = {b.name for b in goods}
    unresolved = frozenset((bads | request) - good_names)

    if is_debug_enabled(logger):
        logger.debug(
            "AUR lookup",
            extra=extra_context(
                event="lookup",
                component="aur",
                action="aur_lookup",
                requested=len(request),
                records=len(infos),
                bases=len(pkgbuilds),
                resolved=len(goods),
                unresolved=len(unresolved),
            )
        )
    return unresolved, frozenset(goods)


def package_buildable(settings: Settings, buildable: Buildable) -> Package:
    """Turn a freshly resolved Buildable into an installable Package."""
    return Build(buildable)


def aur_repo(
    client: Optional[AurClient] = None,
    fetch: Optional[Fetcher] = None,
) -> Repository:
    """The AUR as a Repository backend yielding Build packages."""

    def lookup(settings: Settings, names: FrozenSet[PkgName]) -> LookupResult:
        bads, goods = aur_lookup(settings, names, client=client, fetch=fetch)
        return LookupResult(bads, frozenset(package_buildable(settings, b) for b in goods))

    return Repository(lookup, name="aur")


def sort_aur_info(infos: Iterable[AurInfo], mode: SortMode = SortMode.VOTES) -> List[AurInfo]:
    """Most votes first, or alphabetical by name."""
    if mode is SortMode.ALPHABETICAL:
        return sorted(infos, key=lambda i: i.name)
    if mode is SortMode.VOTES:
        return sorted(infos, key=lambda i: i.votes, reverse=True)
    raise ValueError(f"unknown sort mode: {mode!r}")


def aur_search(
    settings: Settings,
    term: str,
    client: Optional[AurClient] = None,
) -> List[AurInfo]:
    """Search the AUR, ordered per ``settings.sort_alphabetically``."""
    aur = client if client is not None else AurClient.from_settings(settings)
    mode = SortMode.ALPHABETICAL if settings.sort_alphabetically else SortMode.VOTES
    return sort_aur_info(aur.search(term), mode)


def aur_info(
    settings: Settings,
    names: Iterable[PkgName],
    client: Optional[AurClient] = None,
) -> List[AurInfo]:
    """RPC info for explicit names, alphabetically."""
    aur = client if client is not None else AurClient.from_settings(settings)
    return sort_aur_info(aur.info(n.value for n in names), SortMode.ALPHABETICAL)


def clone(
    buildable: Buildable,
    aur_url: str = Constants.AUR_URL,
    cwd: Optional[str] = None,
) -> Optional[Path]:
    """Shallow-clone a package's AUR git repository.

    The checkout lands in ``cwd`` (default: the current directory) under the
    package base name.

    Returns:
        Path of the checkout, or None if git failed.
    """
    base = buildable.base.value
    url = f"{aur_url.rstrip('/')}/{base}.git"
    try:
        proc = subprocess.run(
            [Constants.GIT_BIN, "clone", "--depth", "1", url],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.warning("Could not run git for %s: %s", base, exc)
        return None
    if proc.returncode != 0:
        logger.debug("git clone of %s exited with %s", base, proc.returncode)
        return None
    return Path(cwd if cwd is not None else os.getcwd()) / base
