"""Shared HTTP helpers used by the AUR client.

Each call makes exactly one request and keeps no state between calls.
Transport failures never raise: they come back as status code 0 and the
caller treats them as absence.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

import requests

from ..constants import Constants
from .logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)

Params = Union[Dict[str, Any], Sequence[Tuple[str, Any]]]
Response = Tuple[int, Dict[str, str], str]


def build_url(url: str, params: Optional[Params] = None) -> str:
    """Append encoded query parameters to a URL.

    A sequence of pairs keeps repeated keys such as ``arg[]``.
    """
    if not params:
        return url
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{urlencode(params)}"


def _trace(message: str, target: str, **fields: Any) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            message,
            extra=extra_context(component="http_client", action="GET", target=target, **fields),
        )


def robust_get(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = Constants.REQUEST_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Response:
    """GET with a timeout and DEBUG traces.

    Returns:
        Tuple of (status_code, headers_dict, text). status_code is 0 when
        the request failed at the transport level.
    """
    target = safe_url(url)
    getter = session.get if session is not None else requests.get

    _trace("HTTP request", target, event="http_request")
    with Timer() as t:
        try:
            resp = getter(url, timeout=timeout, headers=headers)
        except requests.Timeout:
            failure = "timeout"
        except requests.RequestException as exc:
            failure = str(exc)
        else:
            _trace(
                "HTTP response",
                target,
                event="http_response",
                status_code=resp.status_code,
                duration_ms=t.duration_ms(),
            )
            return resp.status_code, dict(resp.headers), resp.text

    logger.warning("GET %s failed: %s", target, failure)
    return 0, {}, f"Request failed: {failure}"


def get_json(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> Tuple[int, Dict[str, str], Optional[Any]]:
    """GET ``url`` and decode a 200 body as JSON.

    Extra keyword arguments (timeout, session) go to robust_get. The payload
    is None for any other status or for a body that is not JSON.
    """
    status, resp_headers, text = robust_get(url, headers=headers, **kwargs)
    if status != 200 or not text:
        return status, resp_headers, None
    try:
        return status, resp_headers, json.loads(text)
    except json.JSONDecodeError:
        _trace("JSON decode error", safe_url(url), event="parse", outcome="json_decode_error")
        return status, resp_headers, None
