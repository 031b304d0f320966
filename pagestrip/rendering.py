"""HTML rendering of a link plan."""

from __future__ import annotations

import html

from pagestrip.core.types import CssClasses, EllipsisLink, Link, NavLink


def _class_attr(*names: str) -> str:
    classes = " ".join(name.strip() for name in names if name and name.strip())
    return ' class="{}"'.format(html.escape(classes)) if classes else ""


def render_link(link: Link, css_classes: CssClasses) -> str:
    """Render one ``<li>`` of the strip."""
    anchor_class = _class_attr(css_classes.anchor)

    if isinstance(link, EllipsisLink):
        return "<li{li_class}><span{anchor_class}>{text}</span></li>".format(
            li_class=_class_attr(css_classes.list_item),
            anchor_class=anchor_class,
            text=link.text,
        )

    if isinstance(link, NavLink):
        state_class = "disabled" if link.is_disabled else ""
        rel = ' rel="{}"'.format(link.rel)
    else:
        state_class = "active" if link.is_active else ""
        rel = ""

    return '<li{li_class}><a href="{url}"{anchor_class}{rel}>{text}</a></li>'.format(
        li_class=_class_attr(css_classes.list_item, state_class),
        url=html.escape(link.url),
        anchor_class=anchor_class,
        rel=rel,
        text=link.text,
    )


def render_pagination_nav(plan: list[Link], css_classes: CssClasses | None = None) -> str:
    """Render an HTML ``<nav>`` holding the strip as an unordered list.

    Labels and ellipsis text are inserted as-is so callers can pass entities
    such as ``&laquo;``; URLs are escaped for the ``href`` attribute.
    """
    css_classes = css_classes or CssClasses()
    items = "".join(render_link(link, css_classes) for link in plan)
    return '<nav aria-label="Pagination"><ul{list_class}>{items}</ul></nav>'.format(
        list_class=_class_attr(css_classes.list),
        items=items,
    )
