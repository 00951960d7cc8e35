"""Split resolved packages into binary installs and build groups."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, List, Sequence, Tuple

from .versioning.models import Build, Buildable, Package, Pacman, PkgName


def partition_pkgs(
    groups: Sequence[AbstractSet[Package]],
) -> Tuple[List[PkgName], List[FrozenSet[Buildable]]]:
    """Separate each group into pacman names and buildables.

    Pacman names from all groups are flattened into one list (sorted within
    each group). Buildables keep their group, and groups with none are
    dropped. This is a pure reshape; build ordering is the caller's job.
    """
    if not groups:
        raise ValueError("partition_pkgs needs at least one group")

    names: List[PkgName] = []
    builds: List[FrozenSet[Buildable]] = []
    for group in groups:
        group_names = []
        group_builds = []
        for pkg in group:
            if isinstance(pkg, Pacman):
                group_names.append(pkg.name)
            elif isinstance(pkg, Build):
                group_builds.append(pkg.buildable)
            else:
                raise TypeError(f"not a Package: {pkg!r}")
        names.extend(sorted(group_names))
        if group_builds:
            builds.append(frozenset(group_builds))
    return names, builds
