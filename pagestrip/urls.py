"""Construction of the URL that each page link points to.

The page number travels either as a query parameter (``?page=3``) or as a
path segment (``/articles/page3/``). When duplicate-content avoidance is on,
the canonical page (page 1, or the last page under reverse order) gets a URL
without any page marker, so it is never reachable under two addresses.
"""

from __future__ import annotations

import re
import urllib.parse
from dataclasses import dataclass, field
from functools import lru_cache

from pagestrip.core.types import PropagationMethod


@lru_cache(maxsize=32)
def page_token_pattern(variable_name: str) -> re.Pattern[str]:
    """Regex matching a ``<variable_name><digits>`` path token."""
    return re.compile(r"\b" + re.escape(variable_name) + r"([0-9]+)\b", re.IGNORECASE)


def split_base_url(base_url: str) -> tuple[str, list[tuple[str, str]]]:
    """Split *base_url* into its path and its decoded query parameters.

    Scheme and host are dropped; page links are site-relative.
    """
    parts = urllib.parse.urlsplit(base_url)
    return parts.path, urllib.parse.parse_qsl(parts.query, keep_blank_values=True)


@dataclass(frozen=True)
class PageUrlBuilder:
    """Builds page URLs for one render pass.

    ``base_query`` holds the parameters captured when the base URL was
    configured; ``current_query`` is the live query string of the request,
    used instead when ``preserve_query_string`` is set.
    """

    base_path: str
    variable_name: str
    canonical_page: int
    method: PropagationMethod = "get"
    base_query: list[tuple[str, str]] = field(default_factory=list)
    current_query: str = ""
    preserve_query_string: bool = True
    trailing_slash: bool = True
    avoid_duplicate_content: bool = True

    def is_canonical(self, page: int) -> bool:
        return self.avoid_duplicate_content and page == self.canonical_page

    def build(self, page: int) -> str:
        """Return the URL for *page*."""
        if self.method == "url":
            return self._build_path_url(page)
        return self._build_query_url(page)

    def _query_params(self) -> list[tuple[str, str]]:
        if self.preserve_query_string:
            return urllib.parse.parse_qsl(self.current_query, keep_blank_values=True)
        return list(self.base_query)

    def _build_query_url(self, page: int) -> str:
        params = self._query_params()
        if self.is_canonical(page):
            params = [(key, value) for key, value in params if key != self.variable_name]
        else:
            params = _set_param(params, self.variable_name, str(page))
        query = urllib.parse.urlencode(params)
        return (self.base_path or "/") + ("?" + query if query else "")

    def _build_path_url(self, page: int) -> str:
        pattern = page_token_pattern(self.variable_name)
        token = "" if self.is_canonical(page) else f"{self.variable_name}{page}"

        if pattern.search(self.base_path):
            url = re.sub(r"/{2,}", "/", pattern.sub(lambda _: token, self.base_path))
        else:
            url = self.base_path.rstrip("/") + (f"/{token}" if token else "")

        url = url.rstrip("/") + ("/" if self.trailing_slash else "")
        if not url:
            url = "/"

        # The page travels in the path; a leftover page parameter would override it.
        params = [(key, value) for key, value in self._query_params() if key != self.variable_name]
        query = urllib.parse.urlencode(params)
        return url + ("?" + query if query else "")


def _set_param(params: list[tuple[str, str]], key: str, value: str) -> list[tuple[str, str]]:
    """Set *key* to *value*, keeping the position of its first occurrence."""
    result: list[tuple[str, str]] = []
    replaced = False
    for name, current in params:
        if name != key:
            result.append((name, current))
        elif not replaced:
            result.append((key, value))
            replaced = True
    if not replaced:
        result.append((key, value))
    return result
