"""Command-line entry point: fetch a Firebase Realtime Database path and print it."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from . import __version__
from .client import RealtimeDatabaseClient
from .config import Settings
from .config_validator import log_config_issues
from .errors import FireFetchError, UsageError
from .fetch import FetchMode, Invocation, fetch
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(description="Fetch firebase object")
    parser.add_argument("-a", dest="prepend_path", action="store_true",
                        help="Prepend path to keys [-k]")
    parser.add_argument("-k", dest="keys", action="store_true",
                        help="Print top level keys, one per line")
    parser.add_argument("-p", dest="pretty", action="store_true",
                        help="Pretty print JSON")
    parser.add_argument("-s", dest="shallow", action="store_true",
                        help="Shallow Fetch")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("path", help="Database path to fetch")
    return parser


def usage(prog: str) -> str:
    return f"Fetch firebase object\nUsage: {prog} [-a] [-k] [-p] [-s] object"


def parse_invocation(parser: argparse.ArgumentParser, argv: Optional[Sequence[str]] = None) -> Invocation:
    args = parser.parse_args(argv)
    if args.keys:
        mode = FetchMode.KEYS
    elif args.shallow:
        mode = FetchMode.SHALLOW
    else:
        mode = FetchMode.DEEP
    return Invocation(
        path=args.path,
        mode=mode,
        pretty=args.pretty,
        prepend_path=args.prepend_path,
    )


def run(settings: Settings, invocation: Invocation) -> str:
    """Acquire a database client from ``settings`` and perform the fetch."""
    log_config_issues(settings.database_url, settings.service_account_file)
    logger.info(f"Fetching {invocation.path} ({invocation.mode.value})")
    with RealtimeDatabaseClient(
        database_url=settings.database_url,
        service_account_path=settings.service_account_file,
    ) as client:
        return fetch(client, invocation)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()

    try:
        invocation = parse_invocation(parser, argv)
    except UsageError as e:
        print(usage(parser.prog))
        return e.exit_code

    try:
        settings = Settings.from_env()
        configure_logging(level=settings.log_level)
        output = run(settings, invocation)
    except FireFetchError as e:
        logger.debug("Fetch failed", exc_info=True)
        print(e, file=sys.stderr)
        return e.exit_code

    print(output)
    return 0


def entrypoint() -> None:
    sys.exit(main())
