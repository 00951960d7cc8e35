"""AUR backend: RPC client and resolution pipeline."""

from .client import AurClient, AurInfo
from .lookup import (
    aur_info,
    aur_lookup,
    aur_repo,
    aur_search,
    clone,
    package_buildable,
    pkg_url,
    sort_aur_info,
    to_buildable,
)

__all__ = [
    "AurClient",
    "AurInfo",
    "aur_info",
    "aur_lookup",
    "aur_repo",
    "aur_search",
    "clone",
    "package_buildable",
    "pkg_url",
    "sort_aur_info",
    "to_buildable",
]
