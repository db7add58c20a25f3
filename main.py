#!/usr/bin/env python3
"""
Idea Log - in-memory idea logging with filtering and sorting.

Command-line entry point:
  - Start a session (seeded with sample ideas unless --no-samples)
  - Apply view / category / tag / search / sort selections
  - Print the rendered list (text or JSON)
  - Or start the web dashboard

Usage:
    python main.py                          # Active ideas, newest first
    python main.py --view archived          # Archived ideas
    python main.py --category tech --tag urgent
    python main.py --search proto --sort title
    python main.py --json                   # JSON output
    python main.py --serve                  # Start the web dashboard

Examples:
    # Everything tagged "ui", oldest first
    python main.py --view all --tag ui --sort oldest

    # Dashboard on a custom port
    python main.py --serve --port 8080
"""

import argparse
import json
import sys

from idealog import __version__
from idealog.actions import Action, Session, dispatch
from idealog.config import (
    DEFAULT_SORT,
    DEFAULT_VIEW,
    print_config_summary,
    validate_config,
)
from idealog.models.idea import CATEGORIES
from idealog.state import SORT_KEYS, VIEWS


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="idea-log",
        description="Browse, filter and sort ideas in an in-memory session.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              Active ideas, newest first
  %(prog)s --view all --sort title      All ideas by title
  %(prog)s --category design            Design ideas only
  %(prog)s --tag urgent --search proto  Combine tag and search filters
  %(prog)s --json                       Print the rendered view as JSON
  %(prog)s --serve --port 8080          Start the web dashboard
        """,
    )

    # View options
    parser.add_argument(
        "--view",
        choices=list(VIEWS),
        default=None,
        help=f"Which ideas to show (default: {DEFAULT_VIEW})",
    )

    parser.add_argument(
        "--category", "-c",
        choices=["all"] + CATEGORIES,
        default=None,
        help="Only show ideas in this category (default: all)",
    )

    parser.add_argument(
        "--tag", "-t",
        default=None,
        metavar="TAG",
        help="Only show ideas with this tag (default: all)",
    )

    parser.add_argument(
        "--search", "-s",
        default=None,
        metavar="TEXT",
        help="Case-insensitive search in title, content and tags",
    )

    parser.add_argument(
        "--sort",
        choices=list(SORT_KEYS),
        default=None,
        help=f"Sort order (default: {DEFAULT_SORT})",
    )

    parser.add_argument(
        "--no-samples",
        action="store_true",
        help="Start with an empty session instead of the sample ideas",
    )

    # Output options
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the rendered view as JSON",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show configuration and session activity",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the idea list",
    )

    # Server options
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the web dashboard instead of printing",
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        metavar="PORT",
        help="Port for --serve (default: WEB_PORT or 5001)",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Idea Log Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ! {error}")
    else:
        print("\nConfiguration valid")
    print("=" * 60)


def apply_selection(session: Session, args: argparse.Namespace) -> list:
    """
    Dispatch the view/filter/sort selections given on the command line.

    Returns:
        Notices of rejected selections. If any selection is rejected, none
        of them are applied.
    """
    selection = {
        key: value
        for key, value in (
            ("view", args.view),
            ("category", args.category),
            ("tag", args.tag),
            ("query", args.search),
            ("sort", args.sort),
        )
        if value is not None
    }
    if not selection:
        return []

    result = dispatch(session, Action.SET_FILTERS, **selection)
    return [] if result.success else [result.notice]


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.show_config:
        show_config()
        return 0

    session = Session.create(load_samples=False if args.no_samples else None)

    if args.serve:
        from web.app import reset_session, run_server

        reset_session(session)
        try:
            run_server(port=args.port)
        except KeyboardInterrupt:
            print("\n\nInterrupted by user")
            return 130
        return 0

    if args.verbose and not args.quiet:
        print("Configuration:")
        print_config_summary()
        print()

    errors = apply_selection(session, args)
    if errors:
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    view = session.render()

    if args.json:
        print(json.dumps(view.to_dict(), indent=2))
    elif args.quiet:
        for row in view.rows:
            print(f"#{row.id}\t{row.category}\t{row.title}")
    else:
        print(view.to_text())

    if args.verbose and not args.quiet:
        print("\nActivity:")
        for entry in session.activity.entries:
            print(f"  {entry['time']} [{entry['level']}] {entry['message']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
