"""Selection of the page numbers shown in a pagination strip.

``compute_window`` is a pure function of the total page count, the
selectable window size, the current page and the ordering direction. It
returns page numbers in display order with ``ELLIPSIS`` marking each run
of hidden pages, and knows nothing about URLs or markup.

Example, 100 pages, a window of 11 and page 50 current::

    >>> compute_window(100, 11, 50)
    [1, None, 46, 47, 48, 49, 50, 51, 52, 53, 54, None, 100]
"""

from __future__ import annotations

ELLIPSIS = None


def compute_window(
    total_pages: int,
    selectable_window: int,
    current_page: int,
    reverse: bool = False,
) -> list[int | None]:
    """Return the page numbers to display, in display order.

    Args:
        total_pages: Number of pages (``T``). Zero yields an empty window.
        selectable_window: Numbered links shown at once (``W``), counting
            both endpoints but not ellipses or previous/next.
        current_page: The current page (``C``), already clamped to
            ``[1, total_pages]``.
        reverse: Display pages from ``T`` down to 1.

    Returns:
        Page numbers, with ``ELLIPSIS`` (``None``) wherever consecutive
        entries are not adjacent pages.
    """
    if total_pages <= 0:
        return []

    if total_pages <= selectable_window:
        if reverse:
            return list(range(total_pages, 0, -1))
        return list(range(1, total_pages + 1))

    # Work in natural order; reverse order is the mirror image, page p
    # sitting where page T + 1 - p would.
    def mirror(page: int) -> int:
        return total_pages + 1 - page if reverse else page

    current = mirror(current_page)

    # Links shown around the current page and links between the endpoints.
    # Windows narrower than 3 still show both endpoints and the current page.
    adjacent = max(1, (selectable_window - 3) // 2)
    interior = max(1, selectable_window - 2)
    scroll_from = selectable_window - adjacent

    starting_page = 2
    if current >= scroll_from:
        starting_page = current - adjacent
        if total_pages - starting_page < interior:
            starting_page = total_pages - interior

    if 1 < current < total_pages:
        starting_page = min(max(starting_page, current - interior + 1), current)
    starting_page = max(2, min(starting_page, total_pages - interior))
    ending_page = min(starting_page + interior - 1, total_pages - 1)

    pages = [1, *range(starting_page, ending_page + 1), total_pages]

    window: list[int | None] = []
    for page in pages:
        if window and page - window[-1] > 1:
            window.append(ELLIPSIS)
        window.append(page)

    return [ELLIPSIS if page is ELLIPSIS else mirror(page) for page in window]


def format_page_number(page: int, total_pages: int, pad: bool) -> str:
    """Render *page* as text, zero-padded to the width of *total_pages*."""
    if pad:
        return str(page).zfill(len(str(total_pages)))
    return str(page)
