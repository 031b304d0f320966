"""Pagination state: options plus the resolved current page.

A ``PaginationState`` is created per render pass, configured through its
setters, then read. Setters validate immediately and raise
``ConfigurationError`` on bad input. The current page is resolved lazily on
first read, from the injected request context unless the caller set it.

Usage::

    state = PaginationState(request_context=StarletteRequestContext(request))
    state.set_record_count(total).set_page_size(20)
    offset = (state.current_page() - 1) * 20
    nav_html = state.render()
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from pydantic import ValidationError

from pagestrip.core.errors import ConfigurationError
from pagestrip.core.types import CssClasses, Link, PaginationConfig
from pagestrip.plan import build_link_plan
from pagestrip.rendering import render_pagination_nav
from pagestrip.request_context import RequestContext, StaticRequestContext, extract_requested_page

logger = logging.getLogger(__name__)


def _as_int(value: object, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return math.floor(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc


class PaginationState:
    """Holds a ``PaginationConfig`` and the current page for one render pass.

    Not safe for concurrent mutation; scope one instance to one request.
    """

    def __init__(
        self,
        config: PaginationConfig | None = None,
        request_context: RequestContext | None = None,
    ) -> None:
        self.config = config if config is not None else PaginationConfig()
        self.request_context: RequestContext = (
            request_context if request_context is not None else StaticRequestContext()
        )
        self._page = 1
        self.explicitly_set = False

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def _update(self, **changes: object) -> PaginationState:
        try:
            for name, value in changes.items():
                setattr(self.config, name, value)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
        return self

    def set_record_count(self, count: int) -> PaginationState:
        count = _as_int(count, "record_count")
        if count < 0:
            raise ConfigurationError(f"record_count must not be negative, got {count}")
        return self._update(record_count=count)

    def set_page_size(self, size: int) -> PaginationState:
        size = _as_int(size, "page_size")
        if size < 1:
            raise ConfigurationError(f"page_size must be at least 1, got {size}")
        return self._update(page_size=size)

    def set_selectable_window(self, size: int) -> PaginationState:
        size = _as_int(size, "selectable_window")
        if size < 1:
            raise ConfigurationError(f"selectable_window must be at least 1, got {size}")
        return self._update(selectable_window=size)

    def set_page(self, page: int) -> PaginationState:
        """Force the current page. Values below 1 become 1."""
        self._page = max(1, _as_int(page, "page"))
        self.explicitly_set = True
        return self

    def set_reverse_order(self, reverse: bool = True) -> PaginationState:
        return self._update(reverse_order=reverse)

    def set_always_show_nav(self, status: bool = True) -> PaginationState:
        return self._update(always_show_nav=status)

    def set_avoid_duplicate_content(self, status: bool = True) -> PaginationState:
        return self._update(avoid_duplicate_content=status)

    def set_nav_position(self, position: str) -> PaginationState:
        return self._update(nav_position=position)

    def set_pad_numbers(self, status: bool = True) -> PaginationState:
        return self._update(pad_numbers=status)

    def set_method(self, method: str) -> PaginationState:
        return self._update(method=method)

    def set_variable_name(self, name: str) -> PaginationState:
        return self._update(variable_name=name)

    def set_trailing_slash(self, status: bool = True) -> PaginationState:
        return self._update(trailing_slash=status)

    def set_labels(self, previous: str = "&laquo;", next: str = "&raquo;") -> PaginationState:
        return self._update(previous_label=previous, next_label=next)

    def set_base_url(self, base_url: str = "", preserve_query_string: bool = True) -> PaginationState:
        """Set the URL page links are built from.

        An empty *base_url* means the path and query of the current request.
        """
        return self._update(
            base_url=base_url or None,
            preserve_query_string=preserve_query_string,
        )

    def set_css_classes(self, css_classes: Mapping[str, str]) -> PaginationState:
        """Merge class names for the ``list``, ``list_item`` and ``anchor`` hooks."""
        if not isinstance(css_classes, Mapping) or not css_classes:
            raise ConfigurationError(
                "css_classes must be a non-empty mapping with keys from: list, list_item, anchor"
            )
        unknown = sorted(set(css_classes) - set(CssClasses.model_fields))
        if unknown:
            raise ConfigurationError(
                f"Unknown css_classes key(s) {unknown}; expected list, list_item, anchor"
            )
        merged = {**self.config.css_classes.model_dump(), **css_classes}
        try:
            classes = CssClasses.model_validate(merged)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
        return self._update(css_classes=classes)

    # Aliases for the long-form setter names.
    set_records = set_record_count
    set_records_per_page = set_page_size
    set_selectable_pages = set_selectable_window
    set_reverse = set_reverse_order
    set_always_show_navigation = set_always_show_nav
    set_navigation_position = set_nav_position
    set_padding = set_pad_numbers

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def total_pages(self) -> int:
        """Number of pages; 0 when there are no records or totals are unset."""
        records = self.config.record_count
        size = self.config.page_size
        if not records or not size:
            return 0
        return math.ceil(records / size)

    def current_page(self) -> int:
        """Resolve and return the current page, clamped to ``[1, total_pages]``.

        Raises:
            ConfigurationError: reverse order is on but the record count or
                page size has not been set yet.
        """
        config = self.config
        if not self.explicitly_set:
            requested = extract_requested_page(
                self.request_context, config.variable_name, config.method
            )
            if requested is not None:
                self.set_page(requested)

        if config.reverse_order and config.record_count is None:
            raise ConfigurationError(
                "Reverse order needs the record count set before the current page is read"
            )
        if config.reverse_order and config.page_size is None:
            raise ConfigurationError(
                "Reverse order needs the page size set before the current page is read"
            )

        total_pages = self.total_pages()
        if total_pages > 0:
            clamped = min(max(self._page, 1), total_pages)
            if clamped != self._page:
                logger.debug("Clamped page %d to %d (of %d)", self._page, clamped, total_pages)
                self._page = clamped

        if not self.explicitly_set and config.reverse_order:
            self.set_page(total_pages)

        return self._page

    def link_plan(self) -> list[Link]:
        """The ordered links of the navigation strip."""
        return build_link_plan(self)

    def render(self) -> str:
        """Render the strip as HTML.

        Returns an empty string when there is at most one page and
        navigation is not forced on.
        """
        plan = self.link_plan()
        if self.total_pages() <= 1 and not self.config.always_show_nav:
            return ""
        return render_pagination_nav(plan, self.config.css_classes)
