"""Command-line interface for the rss_reader application."""

from __future__ import annotations

import argparse
import asyncio
import functools
import logging
import sys
from pathlib import Path
from typing import List, Optional

import requests

from .categories import DEFAULT_REGISTRY
from .config import parse_env_config
from .exceptions import ReaderError
from .feeds import fetch_feed
from .session import ConsoleSession

logger = logging.getLogger(__name__)

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Pick an Adnkronos news category and print its RSS feed."
    )
    # Overrides for logging/debugging
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING). Overrides environment.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional path to a log file. Overrides environment.",
    )
    return parser


def configure_logging(level_name: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Route log records to stderr and, optionally, to a file.

    stdout carries the menu and the feed, so console records never go there.
    The file gets timestamps; the console does not.
    """
    log_level = logging.getLevelName(level_name.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unsupported log level: {level_name}")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    # Connection-pool chatter stays out of a DEBUG run of the reader.
    logging.getLogger("urllib3").setLevel(max(log_level, logging.INFO))

    logger.debug(
        "Logging at %s to stderr%s",
        level_name.upper(),
        f" and {log_file}" if log_file else "",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config = parse_env_config()
        log_level = args.log_level or app_config.logging.level
        log_file = args.log_file or app_config.logging.file
        configure_logging(log_level, log_file)
    except ValueError as exc:
        parser.error(str(exc))

    with requests.Session() as http:
        fetch = functools.partial(
            fetch_feed, session=http, timeout=app_config.http.timeout
        )
        session = ConsoleSession(registry=DEFAULT_REGISTRY, fetch=fetch)
        try:
            return asyncio.run(session.run())
        except ReaderError as exc:
            logger.debug("Session ended in state %s", session.state.name)
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error during execution.")
            return 1
