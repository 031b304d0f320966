"""Shared Pydantic models for pagestrip.

Configuration and link-plan structures live here so the state, the plan
builder and the renderer agree on one set of types.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

NavPosition = Literal["left", "right", "outside"]
PropagationMethod = Literal["get", "url"]

# Target used by disabled previous/next links.
INERT_URL = "javascript:void(0)"


class CssClasses(BaseModel):
    """Class names for the three style hooks of the rendered strip."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    list: str = "pagination"
    list_item: str = "page-item"
    anchor: str = "page-link"


class PaginationConfig(BaseModel):
    """Pagination options, validated on every assignment.

    ``record_count`` and ``page_size`` stay ``None`` until the caller sets
    them; ``total_pages`` is 0 while either is unknown.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    record_count: int | None = Field(default=None, ge=0)
    page_size: int | None = Field(default=None, ge=1)
    selectable_window: int = Field(
        default=11,
        ge=1,
        description="Numbered links shown at once, excluding previous/next and ellipses.",
    )
    reverse_order: bool = False
    always_show_nav: bool = True
    avoid_duplicate_content: bool = True
    nav_position: NavPosition = "outside"
    pad_numbers: bool = True
    method: PropagationMethod = Field(
        default="get",
        description="'get' carries the page in a query parameter, 'url' in a path segment.",
    )
    variable_name: str = Field(default="page", min_length=1)
    trailing_slash: bool = True
    base_url: str | None = Field(
        default=None,
        description="Base URL for page links; None derives it from the current request.",
    )
    preserve_query_string: bool = True
    previous_label: str = "&laquo;"
    next_label: str = "&raquo;"
    css_classes: CssClasses = Field(default_factory=CssClasses)

    @field_validator("nav_position", "method", mode="before")
    @classmethod
    def _lower_enum(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("variable_name")
    @classmethod
    def _lower_variable_name(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("variable_name must not be blank")
        return value


# --- Link plan ---


class PageLink(BaseModel):
    """A numbered page link."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["page"] = "page"
    number: int
    text: str
    url: str
    is_active: bool = False
    is_disabled: bool = False


class EllipsisLink(BaseModel):
    """Marker for a run of pages that is not shown."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ellipsis"] = "ellipsis"
    text: str = "&hellip;"


class NavLink(BaseModel):
    """Previous/next link, named by its position on screen.

    ``prev`` sits before the numbered links and ``next`` after them. Under
    reverse order ``next`` walks toward page 1, so ``target_page`` and
    ``rel`` describe where the link actually goes.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["prev", "next"]
    text: str
    url: str
    target_page: int
    rel: Literal["prev", "next"]
    is_disabled: bool = False


Link = Annotated[Union[PageLink, EllipsisLink, NavLink], Field(discriminator="kind")]
LinkPlan = list[Link]
