"""Access to the incoming request that a pagination strip is rendered for.

The state reads the requested page number and the live query string through
a ``RequestContext`` instead of reaching for globals, so any web framework
can supply them and tests can pass a fixed request.
"""

from __future__ import annotations

import logging
import re
import urllib.parse
from dataclasses import dataclass
from typing import Protocol

from fastapi import Request

from pagestrip.core.types import PropagationMethod
from pagestrip.urls import page_token_pattern

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class RequestContext(Protocol):
    """What pagestrip needs to know about the current request."""

    def current_request_path(self) -> str: ...

    def current_query_string(self) -> str: ...


@dataclass(frozen=True)
class StaticRequestContext:
    """A fixed request, for tests, the CLI and offline rendering."""

    path: str = "/"
    query_string: str = ""

    @classmethod
    def from_url(cls, url: str) -> StaticRequestContext:
        parts = urllib.parse.urlsplit(url)
        return cls(path=parts.path or "/", query_string=parts.query)

    def current_request_path(self) -> str:
        return self.path

    def current_query_string(self) -> str:
        return self.query_string


class StarletteRequestContext:
    """Adapts a FastAPI/Starlette ``Request``."""

    def __init__(self, request: Request) -> None:
        self._request = request

    def current_request_path(self) -> str:
        return self._request.url.path

    def current_query_string(self) -> str:
        return self._request.url.query


def coerce_page(raw: str) -> int:
    """Parse the leading integer of *raw*; text without one reads as 0."""
    match = _LEADING_INT_RE.match(raw)
    return int(match.group(1)) if match else 0


def extract_requested_page(
    context: RequestContext,
    variable_name: str,
    method: PropagationMethod = "get",
) -> int | None:
    """Return the page number the request asks for, or ``None``.

    In ``url`` mode a ``<variable_name><digits>`` path token wins; otherwise,
    and as a fallback, the last ``variable_name`` query parameter is used.
    """
    if method == "url":
        match = page_token_pattern(variable_name).search(context.current_request_path())
        if match:
            page = int(match.group(1))
            logger.debug("Requested page %d from path token", page)
            return page

    query = urllib.parse.parse_qs(context.current_query_string(), keep_blank_values=True)
    values = query.get(variable_name)
    if values:
        page = coerce_page(values[-1])
        logger.debug("Requested page %d from query parameter %r", page, variable_name)
        return page
    return None
