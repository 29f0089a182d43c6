#!/usr/bin/env python3
"""
equifyctl - Equify operational CLI

A lightweight CLI for offline runs of the server logic:
- Insight generation from a request file (equifyctl insights)
- Dashboard stats from a snapshot file (equifyctl stats)
- Version info (equifyctl version)
"""

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from equify import __version__
from equify.config import get_config
from equify.dashboard import DashboardSnapshot, stats_for_snapshot
from equify.health_score import InsightsService, RelationshipHealthScorer


class Colors:
    """ANSI color codes for terminal output."""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    RESET = "\033[0m"
    BOLD = "\033[1m"


def colorize(text: str, color: str) -> str:
    """Colorize text if stderr is a TTY."""
    if sys.stderr.isatty():
        return f"{color}{text}{Colors.RESET}"
    return text


def load_json(path: str) -> Any:
    """Read JSON from a file path, or stdin when path is '-'."""
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def cmd_insights(args) -> int:
    """
    Generate insights for a request file and print the response.

    Returns:
        Exit code (0 on success, 1 on failure)
    """
    try:
        payload = load_json(args.file)
    except (OSError, ValueError) as e:
        print(colorize(f"✗ Could not read {args.file}: {e}", Colors.RED), file=sys.stderr)
        return 1

    config = get_config()
    service = InsightsService(
        scorer=RelationshipHealthScorer(
            recent_window_days=config.insights.recent_window_days
        )
    )
    response = service.generate(payload)

    print(json.dumps(response.to_wire(), indent=args.indent))

    if not response.success:
        print(colorize(f"✗ Insight generation failed: {response.error}", Colors.RED), file=sys.stderr)
        return 1

    print(
        colorize(
            f"✓ {len(response.insights)} insight(s), "
            f"overall health {response.overall_health_score:.0f}",
            Colors.GREEN,
        ),
        file=sys.stderr,
    )
    return 0


def cmd_stats(args) -> int:
    """
    Compute dashboard stats for a snapshot file.

    Returns:
        Exit code (0 on success, 1 on failure)
    """
    try:
        snapshot = DashboardSnapshot.model_validate(load_json(args.file))
    except (OSError, ValueError, ValidationError) as e:
        print(colorize(f"✗ Could not load snapshot {args.file}: {e}", Colors.RED), file=sys.stderr)
        return 1

    stats = stats_for_snapshot(
        snapshot, window_days=get_config().dashboard.window_days
    )
    print(json.dumps(stats.model_dump(by_alias=True), indent=args.indent))
    return 0


def cmd_version(args) -> int:
    """
    Print version information.

    Returns:
        Exit code (always 0)
    """
    print(f"equifyctl version {__version__}")
    print("Equify - relationship and reciprocal favor tracking")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for equifyctl."""
    parser = argparse.ArgumentParser(
        description="Equify operational CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  equifyctl insights request.json    # Generate insights for a request
  cat request.json | equifyctl insights -
  equifyctl stats snapshot.json      # Compute dashboard stats
  equifyctl version                  # Show version information

Environment variables:
  LOG_LEVEL                          # Logging level (default: INFO)
  INSIGHTS_RECENT_WINDOW_DAYS        # Recent activity window (default: 7)
  DASHBOARD_WINDOW_DAYS              # Dashboard week length (default: 7)
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # insights command
    insights_parser = subparsers.add_parser(
        "insights",
        help="Generate insights from a request JSON file"
    )
    insights_parser.add_argument("file", help="Request JSON file, or - for stdin")
    insights_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )

    # stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Compute dashboard stats from a snapshot JSON file"
    )
    stats_parser.add_argument("file", help="Snapshot JSON file, or - for stdin")
    stats_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def main(argv=None):
    """Main entry point for equifyctl CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 0

    # Dispatch to command handlers
    if args.command == "insights":
        return cmd_insights(args)
    elif args.command == "stats":
        return cmd_stats(args)
    elif args.command == "version":
        return cmd_version(args)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
