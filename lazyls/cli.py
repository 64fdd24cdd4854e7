"""Command-line front door for lazyls.

Parses flags into a ``ListingOptions`` record merged with persisted
defaults, runs the listing, and writes output to stdout and diagnostics to
stderr.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from . import config
from .errors import IdentityLookupFailure, UsageError
from .listing import run_listing
from .options import ListingOptions

PROG = "lazyls"
USAGE_EXIT_STATUS = 2
FATAL_EXIT_STATUS = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises ``UsageError`` instead of exiting on bad input."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="List directory contents in a compact grid or a long table.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files or directories to list. Defaults to '.'.")
    parser.add_argument("-a", "--all", dest="show_hidden", action="store_true", help="Include entries starting with '.'.")
    parser.add_argument("-r", "--reverse", dest="reverse_order", action="store_true", help="Reverse the sort order.")
    parser.add_argument("-l", "--long", dest="long_format", action="store_true", help="Use the long listing format.")
    parser.add_argument("--no-config", action="store_true", help="Ignore persisted default flags.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given -a/-r/-l flags as defaults for later runs.",
    )
    return parser


@dataclass(frozen=True)
class ParsedCommand:
    """Parsed command line: targets, effective options, and flags as given."""

    paths: list[str]
    options: ListingOptions
    given_flags: dict[str, bool]
    save_defaults: bool = False


def parse_options(argv: Sequence[str] | None = None) -> ParsedCommand:
    """Parse ``argv`` into target paths and options without writing anything.

    Flags only switch options on; persisted defaults fill in the rest unless
    ``--no-config`` is given. Raises ``UsageError`` on unknown flags.
    """
    args = build_parser().parse_args(argv)
    given_flags = {key: bool(getattr(args, key)) for key in config.FLAG_KEYS}
    defaults = {key: False for key in config.FLAG_KEYS} if args.no_config else config.load_default_flags()
    options = ListingOptions(**{key: given_flags[key] or defaults[key] for key in config.FLAG_KEYS})
    return ParsedCommand(
        paths=list(args.paths),
        options=options,
        given_flags=given_flags,
        save_defaults=args.save_defaults,
    )


def save_default_flags(flags: dict[str, bool]) -> None:
    for key, value in flags.items():
        config.save_default_flag(key, value)


def main(argv: Sequence[str] | None = None) -> None:
    """Run lazyls; exits via ``SystemExit`` on usage or identity errors."""
    try:
        command = parse_options(argv)
    except UsageError as exc:
        build_parser().print_usage(sys.stderr)
        sys.stderr.write(f"{PROG}: error: {exc}\n")
        raise SystemExit(USAGE_EXIT_STATUS) from exc

    if command.save_defaults:
        save_default_flags(command.given_flags)

    try:
        report = run_listing(command.paths, command.options)
    except IdentityLookupFailure as exc:
        sys.stderr.write(f"{PROG}: {exc}\n")
        raise SystemExit(FATAL_EXIT_STATUS) from exc

    for line in report.diagnostics:
        sys.stderr.write(f"{line}\n")
    sys.stdout.write(report.output)
    if report.exit_status:
        raise SystemExit(report.exit_status)


if __name__ == "__main__":
    main()
