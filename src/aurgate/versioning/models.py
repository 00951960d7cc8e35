"""Data models for package identity, versions and resolution results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple, Union

from .vercmp import fragment_key, rpmvercmp, vercmp


@dataclass(frozen=True, order=True)
class PkgName:
    """A validated package name without any repository prefix."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("package name must be a non-empty string")
        if any(c in "/<>=" or c.isspace() for c in self.value):
            raise ValueError(f"invalid package name: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A parsed ``[epoch:]pkgver[-pkgrel]`` version.

    Equality, hashing and ordering all follow pacman's vercmp, so ``1.0``
    and ``1.00`` are the same version. A version without a release sorts
    before the same version with one.
    """

    pkgver: str
    pkgrel: Optional[str] = None
    epoch: int = 0

    def __str__(self) -> str:
        text = self.pkgver
        if self.pkgrel is not None:
            text = f"{text}-{self.pkgrel}"
        if self.epoch:
            text = f"{self.epoch}:{text}"
        return text

    def _cmp(self, other: "Version") -> int:
        if self.epoch != other.epoch:
            return -1 if self.epoch < other.epoch else 1
        ret = rpmvercmp(self.pkgver, other.pkgver)
        if ret or self.pkgrel == other.pkgrel:
            return ret
        if self.pkgrel is None:
            return -1
        if other.pkgrel is None:
            return 1
        return rpmvercmp(self.pkgrel, other.pkgrel)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) == 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) < 0

    def __hash__(self) -> int:
        rel = fragment_key(self.pkgrel) if self.pkgrel is not None else None
        return hash((self.epoch, fragment_key(self.pkgver), rel))


class Demand(Enum):
    """Comparison kinds a dependency can place on a version.

    The value is the operator pacman understands in ``-T`` queries.
    """

    LESS_THAN = "<"
    AT_LEAST = ">="
    MORE_THAN = ">"
    MUST_BE = "="
    ANYTHING = ""


@dataclass(frozen=True)
class VersionDemand:
    """One version constraint. Every kind but ANYTHING carries a version."""

    kind: Demand
    version: Optional[Version] = None

    def __post_init__(self):
        if self.kind is Demand.ANYTHING and self.version is not None:
            raise ValueError("an ANYTHING demand carries no version")
        if self.kind is not Demand.ANYTHING and self.version is None:
            raise ValueError(f"a {self.kind.name} demand needs a version")

    @classmethod
    def less_than(cls, version: Version) -> "VersionDemand":
        return cls(Demand.LESS_THAN, version)

    @classmethod
    def at_least(cls, version: Version) -> "VersionDemand":
        return cls(Demand.AT_LEAST, version)

    @classmethod
    def more_than(cls, version: Version) -> "VersionDemand":
        return cls(Demand.MORE_THAN, version)

    @classmethod
    def must_be(cls, version: Version) -> "VersionDemand":
        return cls(Demand.MUST_BE, version)

    @classmethod
    def anything(cls) -> "VersionDemand":
        return cls(Demand.ANYTHING)

    def render(self) -> str:
        """Operator followed by the version, e.g. ``>=1.2``; empty for ANYTHING."""
        if self.version is None:
            return self.kind.value
        return f"{self.kind.value}{self.version}"

    def accepts(self, version: Version) -> bool:
        """True if ``version`` meets this demand."""
        if self.kind is Demand.ANYTHING:
            return True
        ret = vercmp(str(version), str(self.version))
        if self.kind is Demand.LESS_THAN:
            return ret < 0
        if self.kind is Demand.AT_LEAST:
            return ret >= 0
        if self.kind is Demand.MORE_THAN:
            return ret > 0
        if self.kind is Demand.MUST_BE:
            return ret == 0
        raise TypeError(f"unhandled demand kind: {self.kind!r}")


@dataclass(frozen=True)
class Dep:
    """A dependency: this name, constrained this way."""

    name: PkgName
    demand: VersionDemand

    def render(self) -> str:
        """The ``name<op><version>`` form pacman -T expects."""
        return f"{self.name}{self.demand.render()}"


@dataclass(frozen=True, order=True)
class SimplePkg:
    """A concrete installed package."""

    name: PkgName
    version: Version


@dataclass(frozen=True)
class Provides:
    """A name a package satisfies besides (or as) its own."""

    name: PkgName


@dataclass(frozen=True)
class Buildable:
    """A package to be built from a fetched PKGBUILD.

    Split packages share ``base`` (and the PKGBUILD) but never ``name``.
    """

    name: PkgName
    base: PkgName
    pkgbuild: str
    provides: Provides
    deps: Tuple[Dep, ...] = ()
    version: Optional[Version] = None
    is_explicit: bool = False


@dataclass(frozen=True)
class Pacman:
    """Install from the binary repositories."""

    name: PkgName


@dataclass(frozen=True)
class Build:
    """Install by building from source."""

    buildable: Buildable

    @property
    def name(self) -> PkgName:
        return self.buildable.name


# Closed union; consumers must handle both members.
Package = Union[Pacman, Build]
