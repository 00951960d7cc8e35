"""Best-effort parsing of names, versions and dependency strings.

Every parser returns None on malformed input instead of raising. Callers
that build collections drop those entries; only existence matters further
down, never the reason a string failed to parse.
"""

import re
from typing import Optional

from .models import Demand, Dep, PkgName, SimplePkg, Version, VersionDemand

_VERSION_RE = re.compile(r"^(?:(\d+):)?([A-Za-z0-9._+~]+)(?:-([A-Za-z0-9._+~]+))?$")
_DEP_RE = re.compile(r"^([^<>=\s]+)(?:(<|>=|>|=)(.+))?$")

_OPERATORS = {d.value: d for d in Demand if d is not Demand.ANYTHING}


def parse_name(text: str) -> Optional[PkgName]:
    """Return a PkgName, or None if ``text`` is not a valid name."""
    try:
        return PkgName(text.strip())
    except (ValueError, AttributeError):
        return None


def parse_version(text: str) -> Optional[Version]:
    """Parse ``[epoch:]pkgver[-pkgrel]``."""
    if not isinstance(text, str):
        return None
    m = _VERSION_RE.match(text.strip())
    if not m:
        return None
    epoch, pkgver, pkgrel = m.groups()
    return Version(pkgver=pkgver, pkgrel=pkgrel, epoch=int(epoch) if epoch else 0)


def parse_dep(text: str) -> Optional[Dep]:
    """Parse a dependency string such as ``glibc>=2.30`` or ``bash``.

    ``<=`` is not an operator this model knows, so such strings fail.
    """
    if not isinstance(text, str):
        return None
    m = _DEP_RE.match(text.strip())
    if not m:
        return None
    raw_name, op, raw_version = m.groups()
    name = parse_name(raw_name)
    if name is None:
        return None
    if op is None:
        return Dep(name, VersionDemand.anything())
    version = parse_version(raw_version)
    if version is None:
        return None
    return Dep(name, VersionDemand(_OPERATORS[op], version))


def parse_simple_pkg(line: str) -> Optional[SimplePkg]:
    """Parse a ``name version`` line as printed by ``pacman -Qm``."""
    parts = line.split()
    if len(parts) != 2:
        return None
    name = parse_name(parts[0])
    version = parse_version(parts[1])
    if name is None or version is None:
        return None
    return SimplePkg(name, version)
