"""Version comparison with pacman's ``vercmp`` ordering.

Versions have the shape ``[epoch:]pkgver[-pkgrel]``. Segments of digits
compare numerically, segments of letters lexically, a numeric segment beats
an alphabetic one, and trailing letters mark a pre-release (``1.0a < 1.0``).
"""
from __future__ import annotations

from string import ascii_letters, digits
from typing import Any, List, Optional, Tuple

_ALNUM = frozenset(ascii_letters + digits)
_ALPHA = frozenset(ascii_letters)
_DIGIT = frozenset(digits)


def _is_alpha(s: str) -> bool:
    return bool(s) and s[0] in _ALPHA


def rpmvercmp(a: str, b: str) -> int:
    """Compare two version fragments.

    Returns:
        -1, 0 or 1 as ``a`` is older than, equal to or newer than ``b``.
    """
    if a == b:
        return 0

    i, j, n, m = 0, 0, len(a), len(b)
    while i < n and j < m:
        si, sj = i, j
        while i < n and a[i] not in _ALNUM:
            i += 1
        while j < m and b[j] not in _ALNUM:
            j += 1
        if i >= n or j >= m:
            break
        # Different separator runs settle it
        if (i - si) != (j - sj):
            return -1 if (i - si) < (j - sj) else 1

        pi, pj = i, j
        isnum = a[i] in _DIGIT
        kind = _DIGIT if isnum else _ALPHA
        while i < n and a[i] in kind:
            i += 1
        while j < m and b[j] in kind:
            j += 1
        seg1, seg2 = a[pi:i], b[pj:j]

        # Segment types differ: numeric is newer
        if not seg2:
            return 1 if isnum else -1

        if isnum:
            seg1, seg2 = seg1.lstrip("0"), seg2.lstrip("0")
            if len(seg1) != len(seg2):
                return 1 if len(seg1) > len(seg2) else -1
        if seg1 != seg2:
            return -1 if seg1 < seg2 else 1

    rest_a, rest_b = a[i:], b[j:]
    if not rest_a and not rest_b:
        return 0
    if (not rest_a and not _is_alpha(rest_b)) or _is_alpha(rest_a):
        return -1
    return 1


def fragment_key(text: str) -> Tuple[Tuple[Any, ...], ...]:
    """Normalised form of a version fragment.

    Two fragments have equal keys exactly when rpmvercmp calls them equal:
    separator runs count by length, numbers ignore leading zeros, and a
    trailing separator run is kept as a marker.
    """
    key: List[Tuple[Any, ...]] = []
    i, n = 0, len(text)
    while i < n:
        start = i
        while i < n and text[i] not in _ALNUM:
            i += 1
        if i >= n:
            key.append(("end",))
            break
        sep, p = i - start, i
        kind = _DIGIT if text[i] in _DIGIT else _ALPHA
        while i < n and text[i] in kind:
            i += 1
        if kind is _DIGIT:
            key.append(("num", sep, text[p:i].lstrip("0")))
        else:
            key.append(("alpha", sep, text[p:i]))
    return tuple(key)


def split_evr(version: str) -> Tuple[str, str, Optional[str]]:
    """Split ``[epoch:]pkgver[-pkgrel]`` into its three parts.

    A missing epoch is reported as ``"0"``.
    """
    epoch = "0"
    rest = version
    head, sep, tail = version.partition(":")
    if sep and head.isdigit():
        epoch, rest = head, tail
    pkgver, sep, pkgrel = rest.rpartition("-")
    if not sep:
        return epoch, rest, None
    return epoch, pkgver, pkgrel


def vercmp(a: str, b: str) -> int:
    """Compare two full package versions the way pacman does."""
    if a == b:
        return 0
    epoch_a, ver_a, rel_a = split_evr(a)
    epoch_b, ver_b, rel_b = split_evr(b)

    ret = rpmvercmp(epoch_a, epoch_b)
    if ret == 0:
        ret = rpmvercmp(ver_a, ver_b)
        if ret == 0 and rel_a is not None and rel_b is not None:
            ret = rpmvercmp(rel_a, rel_b)
    return ret
