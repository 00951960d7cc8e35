"""Package identity and version model."""

from .models import (
    Build,
    Buildable,
    Demand,
    Dep,
    Package,
    Pacman,
    PkgName,
    Provides,
    SimplePkg,
    Version,
    VersionDemand,
)

__all__ = [
    "Build",
    "Buildable",
    "Demand",
    "Dep",
    "Package",
    "Pacman",
    "PkgName",
    "Provides",
    "SimplePkg",
    "Version",
    "VersionDemand",
]
