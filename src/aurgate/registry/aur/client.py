"""AUR RPC client: batch info, search and PKGBUILD retrieval.

Network and decoding failures collapse to absence (an empty result list or
None) after being logged; callers only see what was actually found.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import requests

from ...common.http_client import build_url, get_json, robust_get
from ...common.logging_utils import extra_context, is_debug_enabled, safe_url
from ...constants import Constants
from ...settings import Settings

logger = logging.getLogger(__name__)

HEADERS_JSON = {"Accept": "application/json"}


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if isinstance(v, (str, int, float))]


@dataclass(frozen=True)
class AurInfo:
    """Metadata the AUR RPC reports for one package."""

    name: str
    package_base: str
    version: str
    votes: int = 0
    popularity: float = 0.0
    description: Optional[str] = None
    url: Optional[str] = None
    maintainer: Optional[str] = None
    out_of_date: Optional[int] = None
    provides: List[str] = field(default_factory=list)
    depends: List[str] = field(default_factory=list)
    make_depends: List[str] = field(default_factory=list)

    @classmethod
    def from_rpc(cls, raw: Dict[str, Any]) -> Optional["AurInfo"]:
        """Build from one RPC ``results`` entry; None if it lacks a name."""
        name = raw.get("Name")
        if not isinstance(name, str) or not name:
            return None
        base = raw.get("PackageBase")
        try:
            votes = int(raw.get("NumVotes") or 0)
        except (TypeError, ValueError):
            votes = 0
        try:
            popularity = float(raw.get("Popularity") or 0.0)
        except (TypeError, ValueError):
            popularity = 0.0
        return cls(
            name=name,
            package_base=base if isinstance(base, str) and base else name,
            version=str(raw.get("Version") or ""),
            votes=votes,
            popularity=popularity,
            description=raw.get("Description"),
            url=raw.get("URL"),
            maintainer=raw.get("Maintainer"),
            out_of_date=raw.get("OutOfDate"),
            provides=_str_list(raw.get("Provides")),
            depends=_str_list(raw.get("Depends")),
            make_depends=_str_list(raw.get("MakeDepends")),
        )


class AurClient:
    """Talks to one AUR instance.

    Args:
        base_url: AUR root, e.g. ``https://aur.archlinux.org``.
        timeout: Per-request timeout in seconds.
        session: Optional requests session to reuse connections.
    """

    def __init__(
        self,
        base_url: str = Constants.AUR_URL,
        timeout: float = Constants.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_settings(cls, settings: Settings) -> "AurClient":
        return cls(base_url=settings.aur_url, timeout=settings.request_timeout)

    @property
    def rpc_url(self) -> str:
        return f"{self.base_url}{Constants.AUR_RPC_PATH}"

    def _rpc(self, params: List[tuple]) -> List[AurInfo]:
        url = build_url(self.rpc_url, [("v", Constants.AUR_RPC_VERSION), *params])
        status_code, _, data = get_json(
            url, headers=HEADERS_JSON, timeout=self.timeout, session=self.session
        )
        if status_code != 200 or not isinstance(data, dict):
            logger.warning(
                "AUR RPC call failed",
                extra=extra_context(
                    event="http_response",
                    component="aur_client",
                    outcome="rpc_failure",
                    status_code=status_code,
                    target=safe_url(url),
                )
            )
            return []
        if data.get("type") == "error":
            logger.warning("AUR RPC error: %s", data.get("error"))
            return []

        results = data.get("results")
        if not isinstance(results, list):
            return []
        infos = [AurInfo.from_rpc(r) for r in results if isinstance(r, dict)]
        return [i for i in infos if i is not None]

    def info(self, names: Iterable[str]) -> List[AurInfo]:
        """Metadata for every name the AUR knows, in one round trip."""
        args = sorted(set(names))
        if not args:
            return []
        infos = self._rpc([("type", "info"), *(("arg[]", n) for n in args)])
        if is_debug_enabled(logger):
            logger.debug(
                "AUR info",
                extra=extra_context(
                    event="rpc",
                    component="aur_client",
                    action="info",
                    requested=len(args),
                    found=len(infos),
                )
            )
        return infos

    def search(self, term: str) -> List[AurInfo]:
        """Packages whose name or description matches ``term``."""
        return self._rpc([("type", "search"), ("arg", term)])

    def pkgbuild(self, base: str) -> Optional[str]:
        """Raw PKGBUILD text for a package base, or None if unavailable."""
        url = build_url(f"{self.base_url}{Constants.AUR_PKGBUILD_PATH}", {"h": base})
        status_code, _, text = robust_get(url, timeout=self.timeout, session=self.session)
        if status_code != 200 or not text:
            logger.debug("No PKGBUILD for %s (status %s)", base, status_code)
            return None
        return text
