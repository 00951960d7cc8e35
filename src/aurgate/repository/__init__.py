"""Repository backends and their fallback composition."""

from .base import LookupResult, Repository, chain, combine, package_name, resolve
from .pacman import pacman_repo

__all__ = [
    "LookupResult",
    "Repository",
    "chain",
    "combine",
    "package_name",
    "pacman_repo",
    "resolve",
]
