"""Command line interface for installing component stubs."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .catalog import DEFAULT_CATALOG
from .config import DEFAULT_MODE, MODE_DESTINATIONS, InstallConfig
from .errors import InvalidSelectionError
from .installer import StubInstaller
from .schema import InstallReport

EXIT_FAILURE = 1
EXIT_USAGE = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer '{value}'") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("value must be a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atx-components",
        description="Copy UI component stubs into your project",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging output (repeat for debug output)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report failures")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="add components to your project folder")
    add_parser.add_argument(
        "target_path",
        nargs="?",
        default=None,
        help="Path to the location where you would like to add the files to",
    )
    add_parser.add_argument(
        "-a",
        "--args",
        dest="stubs",
        metavar="ID",
        nargs="+",
        action="extend",
        default=[],
        help="List of specific components to add (default: all)",
    )
    add_parser.add_argument(
        "--mode",
        choices=sorted(MODE_DESTINATIONS),
        default=DEFAULT_MODE,
        help="Deployment mode used to pick the default destination",
    )
    add_parser.add_argument(
        "-j",
        "--jobs",
        type=_positive_int,
        help="Maximum number of files copied concurrently",
    )

    subparsers.add_parser("list", help="list the available components")

    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.ERROR
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _handle_add(args: argparse.Namespace) -> int:
    try:
        config = InstallConfig.from_options(
            args.target_path,
            args.stubs,
            mode=args.mode,
            jobs=args.jobs,
        )
        installer = StubInstaller(max_workers=config.max_workers)
        outcomes = installer.run(config.selection, config.destination)
    except InvalidSelectionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print("Run 'atx-components list' to see the available components.", file=sys.stderr)
        return EXIT_USAGE
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    report = InstallReport(destination_root=config.destination, outcomes=outcomes)
    for outcome in report.outcomes:
        if outcome.ok:
            if not args.quiet:
                print(f"Copied {outcome.stub_id} to {outcome.destination}")
        else:
            print(f"Error copying {outcome.stub_id}: {outcome.reason}", file=sys.stderr)

    summary = f"{len(report.succeeded)} copied, {len(report.failed)} failed"
    if report.ok:
        if not args.quiet:
            print(summary)
        return 0
    print(summary, file=sys.stderr)
    return EXIT_FAILURE


def _handle_list(args: argparse.Namespace) -> int:
    for entry in DEFAULT_CATALOG:
        print(f"{entry.stub_id:<16} {entry.destination}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(0 if args.quiet else args.verbose)
    if args.command == "add":
        return _handle_add(args)
    if args.command == "list":
        return _handle_list(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
