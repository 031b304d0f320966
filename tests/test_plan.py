"""Tests for pagestrip.plan."""

from __future__ import annotations

import pytest

from pagestrip.core.types import INERT_URL, EllipsisLink, NavLink, PageLink


def _kinds(plan) -> list[str]:
    return [link.kind for link in plan]


def _page_numbers(plan) -> list[int]:
    return [link.number for link in plan if isinstance(link, PageLink)]


def _active(plan) -> list[int]:
    return [link.number for link in plan if isinstance(link, PageLink) and link.is_active]


def _nav(plan, kind: str) -> NavLink:
    return next(link for link in plan if isinstance(link, NavLink) and link.kind == kind)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestBuildLinkPlan:
    def test_all_pages_fit(self, make_state):
        plan = make_state().set_record_count(95).set_page_size(10).link_plan()
        assert _page_numbers(plan) == list(range(1, 11))
        assert not any(isinstance(link, EllipsisLink) for link in plan)
        assert _active(plan) == [1]

    def test_long_list_middle(self, make_state):
        state = make_state().set_record_count(1000).set_page_size(10).set_page(50)
        plan = state.link_plan()
        assert _page_numbers(plan) == [1, *range(46, 55), 100]
        assert _kinds(plan) == ["prev", "page", "ellipsis", *["page"] * 9, "ellipsis", "page", "next"]
        assert _active(plan) == [50]

    def test_page_urls_and_text(self, make_state):
        plan = make_state().set_record_count(95).set_page_size(10).set_page(3).link_plan()
        pages = [link for link in plan if isinstance(link, PageLink)]
        assert pages[0].url == "/articles"
        assert pages[0].text == "01"
        assert pages[1].url == "/articles?page=2"
        assert pages[9].text == "10"

    def test_without_padding(self, make_state):
        state = make_state(pad_numbers=False).set_record_count(1000).set_page_size(10)
        first = next(link for link in state.link_plan() if isinstance(link, PageLink))
        assert first.text == "1"

    def test_no_records(self, make_state):
        plan = make_state().set_record_count(0).set_page_size(10).link_plan()
        assert _kinds(plan) == ["prev", "next"]
        assert all(link.is_disabled and link.url == INERT_URL for link in plan)

    def test_no_records_without_forced_navigation(self, make_state):
        state = make_state(always_show_nav=False).set_record_count(0).set_page_size(10)
        assert state.link_plan() == []

    def test_single_page(self, make_state):
        plan = make_state().set_record_count(3).set_page_size(10).link_plan()
        assert _kinds(plan) == ["prev", "page", "next"]
        assert _nav(plan, "prev").is_disabled
        assert _nav(plan, "next").is_disabled

    def test_navigation_hidden_when_pages_fit(self, make_state):
        state = make_state(always_show_nav=False).set_record_count(95).set_page_size(10)
        assert set(_kinds(state.link_plan())) == {"page"}

    def test_navigation_shown_when_pages_overflow(self, make_state):
        state = make_state(always_show_nav=False).set_record_count(1000).set_page_size(10)
        kinds = _kinds(state.link_plan())
        assert kinds[0] == "prev"
        assert kinds[-1] == "next"

    def test_plan_is_recomputed_identically(self, make_state):
        state = make_state("/articles?page=20").set_record_count(1000).set_page_size(10)
        assert state.link_plan() == state.link_plan()


# ---------------------------------------------------------------------------
# Previous / next
# ---------------------------------------------------------------------------


class TestNavigationLinks:
    def test_first_page(self, make_state):
        plan = make_state().set_record_count(95).set_page_size(10).link_plan()
        prev_link, next_link = _nav(plan, "prev"), _nav(plan, "next")
        assert prev_link.is_disabled and prev_link.url == INERT_URL
        assert not next_link.is_disabled
        assert next_link.url == "/articles?page=2"
        assert next_link.rel == "next"

    def test_last_page(self, make_state):
        plan = make_state().set_record_count(95).set_page_size(10).set_page(10).link_plan()
        assert _nav(plan, "next").is_disabled
        assert _nav(plan, "prev").url == "/articles?page=9"

    def test_previous_to_canonical_page(self, make_state):
        plan = make_state().set_record_count(95).set_page_size(10).set_page(2).link_plan()
        assert _nav(plan, "prev").url == "/articles"

    def test_labels(self, make_state):
        state = make_state().set_record_count(95).set_page_size(10)
        plan = state.set_labels("Previous", "Next").link_plan()
        assert _nav(plan, "prev").text == "Previous"
        assert _nav(plan, "next").text == "Next"

    @pytest.mark.parametrize(
        "position, kinds",
        [
            ("left", ["prev", "next", "page", "page", "page"]),
            ("right", ["page", "page", "page", "prev", "next"]),
            ("outside", ["prev", "page", "page", "page", "next"]),
        ],
    )
    @pytest.mark.parametrize("reverse", [False, True])
    def test_position(self, make_state, position, kinds, reverse):
        state = make_state(nav_position=position, reverse_order=reverse)
        plan = state.set_record_count(30).set_page_size(10).set_page(2).link_plan()
        assert _kinds(plan) == kinds
        assert _page_numbers(plan) == ([3, 2, 1] if reverse else [1, 2, 3])
        # prev always leads toward the first page shown, next toward the last.
        assert _nav(plan, "prev").target_page == (3 if reverse else 1)
        assert _nav(plan, "next").target_page == (1 if reverse else 3)


class TestReversePlan:
    def test_reverse_strip(self, make_state):
        state = make_state().set_record_count(50).set_page_size(10).set_reverse_order()
        plan = state.link_plan()

        assert _page_numbers(plan) == [5, 4, 3, 2, 1]
        assert _active(plan) == [5]

        prev_link, next_link = _nav(plan, "prev"), _nav(plan, "next")
        assert prev_link.is_disabled
        assert prev_link.target_page == 6
        assert prev_link.text == "&laquo;"
        assert next_link.target_page == 4
        assert next_link.rel == "prev"
        assert next_link.url == "/articles?page=4"

    def test_reverse_canonical_page_is_last(self, make_state):
        state = make_state().set_record_count(50).set_page_size(10).set_reverse_order()
        urls = {link.number: link.url for link in state.link_plan() if isinstance(link, PageLink)}
        assert urls[5] == "/articles"
        assert urls[1] == "/articles?page=1"

    def test_reverse_at_page_one(self, make_state):
        state = make_state().set_record_count(50).set_page_size(10).set_reverse_order()
        plan = state.set_page(1).link_plan()
        assert _nav(plan, "next").is_disabled
        assert _nav(plan, "prev").url == "/articles?page=2"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("reverse", [False, True])
@pytest.mark.parametrize("records", [1, 9, 10, 11, 35, 120])
def test_exactly_one_active_page(make_state, records, reverse):
    for page in range(1, records // 3 + 2):
        state = make_state(selectable_window=5, reverse_order=reverse)
        state.set_record_count(records).set_page_size(3).set_page(page)
        assert _active(state.link_plan()) == [state.current_page()]


@pytest.mark.parametrize("method", ["get", "url"])
def test_only_canonical_url_lacks_token(make_state, method):
    state = make_state(method=method).set_record_count(200).set_page_size(10).set_page(10)
    for link in state.link_plan():
        if not isinstance(link, PageLink):
            continue
        has_token = "page=" in link.url if method == "get" else f"page{link.number}" in link.url
        assert has_token == (link.number != 1)
