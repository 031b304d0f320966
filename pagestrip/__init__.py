"""pagestrip: page-link strips for paginated lists."""

from pagestrip.core.errors import ConfigurationError
from pagestrip.core.types import (
    CssClasses,
    EllipsisLink,
    Link,
    NavLink,
    PageLink,
    PaginationConfig,
)
from pagestrip.plan import build_link_plan
from pagestrip.rendering import render_pagination_nav
from pagestrip.request_context import (
    RequestContext,
    StarletteRequestContext,
    StaticRequestContext,
)
from pagestrip.state import PaginationState
from pagestrip.urls import PageUrlBuilder
from pagestrip.window import compute_window

__all__ = [
    "ConfigurationError",
    "CssClasses",
    "EllipsisLink",
    "Link",
    "NavLink",
    "PageLink",
    "PageUrlBuilder",
    "PaginationConfig",
    "PaginationState",
    "RequestContext",
    "StarletteRequestContext",
    "StaticRequestContext",
    "build_link_plan",
    "compute_window",
    "render_pagination_nav",
]
