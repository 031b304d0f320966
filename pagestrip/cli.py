"""pagestrip CLI: render pagination strips from the command line.

Usage:
    pagestrip render --records 1000 --per-page 10 --page 50
    pagestrip plan --records 95 --per-page 10 --url "/articles?sort=new&page=3"
    pagestrip render --records 40 --per-page 10 --config seo --override selectable_window=5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .core.config import load_pagination_config
from .core.errors import ConfigurationError
from .request_context import StaticRequestContext
from .state import PaginationState


def build_state(args: argparse.Namespace) -> PaginationState:
    """Configure a ``PaginationState`` from parsed arguments."""
    config = load_pagination_config(args.config, args.override)
    state = PaginationState(config, StaticRequestContext.from_url(args.url))
    state.set_record_count(args.records).set_page_size(args.per_page)

    if args.window is not None:
        state.set_selectable_window(args.window)
    if args.reverse:
        state.set_reverse_order(True)
    if args.position is not None:
        state.set_nav_position(args.position)
    if args.method is not None:
        state.set_method(args.method)
    if args.variable_name is not None:
        state.set_variable_name(args.variable_name)
    if args.no_padding:
        state.set_pad_numbers(False)
    if args.page is not None:
        state.set_page(args.page)
    return state


def cmd_render(args: argparse.Namespace) -> int:
    """Print the strip as HTML."""
    print(build_state(args).render())
    return 0


def cmd_plan(args: argparse.Namespace) -> int:
    """Print the link plan as JSON."""
    state = build_state(args)
    plan = [link.model_dump(mode="json") for link in state.link_plan()]
    payload = {
        "current_page": state.current_page(),
        "total_pages": state.total_pages(),
        "links": plan,
    }
    print(json.dumps(payload, indent=2))
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--records", type=int, required=True, help="Total number of records")
    parser.add_argument("--per-page", type=int, required=True, help="Records per page")
    parser.add_argument("--page", type=int, default=None, help="Current page (default: read from --url)")
    parser.add_argument("--url", default="/", help="Request URL the strip is rendered for")
    parser.add_argument("--window", type=int, default=None, help="Selectable pages shown at once")
    parser.add_argument("--reverse", action="store_true", help="Show pages in reverse order")
    parser.add_argument(
        "--position",
        choices=["left", "right", "outside"],
        default=None,
        help="Where previous/next links go",
    )
    parser.add_argument(
        "--method",
        choices=["get", "url"],
        default=None,
        help="Carry the page in a query parameter (get) or a path segment (url)",
    )
    parser.add_argument("--variable-name", default=None, help="Name of the page variable")
    parser.add_argument("--no-padding", action="store_true", help="Do not zero-pad page numbers")
    parser.add_argument("--config", default=None, help="Config profile name")
    parser.add_argument(
        "--override",
        action="append",
        default=[],
        help="Hydra override (key=value); may be repeated",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pagestrip",
        description="pagestrip: pagination link strips",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render the strip as HTML")
    _add_common_arguments(render_parser)
    render_parser.set_defaults(func=cmd_render)

    plan_parser = subparsers.add_parser("plan", help="Print the link plan as JSON")
    _add_common_arguments(plan_parser)
    plan_parser.set_defaults(func=cmd_plan)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        return args.func(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
