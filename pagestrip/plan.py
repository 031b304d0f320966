"""Link plan construction.

Turns a ``PaginationState`` into the ordered list of links making up the
navigation strip: numbered pages and ellipses from ``compute_window`` plus
the previous/next links, each carrying its URL and active/disabled flags.
"""

from __future__ import annotations

import urllib.parse
from typing import TYPE_CHECKING

from pagestrip.core.types import INERT_URL, EllipsisLink, Link, NavLink, PageLink
from pagestrip.urls import PageUrlBuilder, split_base_url
from pagestrip.window import ELLIPSIS, compute_window, format_page_number

if TYPE_CHECKING:
    from pagestrip.state import PaginationState


def url_builder_for(state: PaginationState) -> PageUrlBuilder:
    """Build the URL builder for the state's current configuration."""
    config = state.config
    context = state.request_context

    if config.base_url is None:
        base_path = context.current_request_path()
        base_query = urllib.parse.parse_qsl(context.current_query_string(), keep_blank_values=True)
    else:
        base_path, base_query = split_base_url(config.base_url)

    total_pages = state.total_pages()
    return PageUrlBuilder(
        base_path=base_path,
        variable_name=config.variable_name,
        canonical_page=total_pages if config.reverse_order else 1,
        method=config.method,
        base_query=base_query,
        current_query=context.current_query_string(),
        preserve_query_string=config.preserve_query_string,
        trailing_slash=config.trailing_slash,
        avoid_duplicate_content=config.avoid_duplicate_content,
    )


def build_link_plan(state: PaginationState) -> list[Link]:
    """Compute the full navigation strip for *state*.

    The plan is rebuilt on every call; calling twice on an unchanged state
    returns equal plans.
    """
    config = state.config
    current = state.current_page()
    total_pages = state.total_pages()
    urls = url_builder_for(state)

    pages: list[Link] = []
    for page in compute_window(total_pages, config.selectable_window, current, config.reverse_order):
        if page is ELLIPSIS:
            pages.append(EllipsisLink())
            continue
        pages.append(
            PageLink(
                number=page,
                text=format_page_number(page, total_pages, config.pad_numbers),
                url=urls.build(page),
                is_active=page == current,
            )
        )

    if not (config.always_show_nav or total_pages > config.selectable_window):
        return pages

    # On screen, "prev" leads toward the first displayed page. Under reverse
    # order that is the higher page number.
    step = 1 if config.reverse_order else -1
    prev_link = _nav_link("prev", current + step, config.previous_label, current, total_pages, urls)
    next_link = _nav_link("next", current - step, config.next_label, current, total_pages, urls)

    if config.nav_position == "left":
        return [prev_link, next_link, *pages]
    if config.nav_position == "right":
        return [*pages, prev_link, next_link]
    return [prev_link, *pages, next_link]


def _nav_link(
    kind: str,
    target: int,
    text: str,
    current: int,
    total_pages: int,
    urls: PageUrlBuilder,
) -> NavLink:
    disabled = total_pages == 0 or not 1 <= target <= total_pages
    return NavLink(
        kind=kind,
        text=text,
        url=INERT_URL if disabled else urls.build(target),
        target_page=target,
        rel="next" if target > current else "prev",
        is_disabled=disabled,
    )
