"""Single-shot console interaction: menu, selection, fetch, display."""

from __future__ import annotations

import enum
import logging
import re
import sys
from typing import Awaitable, Callable, Optional, TextIO

from .categories import EXIT_SELECTION, MENU_HEADING, CategoryRegistry
from .exceptions import InvalidSelection
from .models import Feed
from .templating import render

logger = logging.getLogger(__name__)

PROMPT = "\nSelect category number: "

MAX_SELECTION = 2**32 - 1

_DIGITS = re.compile(r"[0-9]+")

FeedFetcher = Callable[[str], Awaitable[Feed]]


class SessionState(enum.Enum):
    AWAITING_SELECTION = "awaiting-selection"
    EXITING = "exiting"
    FETCHING = "fetching"
    DISPLAYING = "displaying"
    DONE = "done"


def parse_selection(text: str) -> int:
    """Turn a line of user input into an unsigned category number."""
    value = text.strip()
    if not _DIGITS.fullmatch(value):
        raise InvalidSelection(f"Not a category number: {value!r}")
    selection = int(value)
    if selection > MAX_SELECTION:
        raise InvalidSelection(f"Category number out of range: {value}")
    return selection


class ConsoleSession:
    """Drive one menu interaction through its states.

    ``fetch`` resolves a feed URL to a :class:`Feed`. Menu, prompt and feed
    all go to ``out`` (stdout by default); ``read_line`` then returns the raw
    input line (``input`` by default). Errors from any step propagate to the
    caller; ``state`` records how far the session got.
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        fetch: FeedFetcher,
        read_line: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ) -> None:
        self.registry = registry
        self.fetch = fetch
        self.read_line = read_line
        self.out = out
        self.state = SessionState.AWAITING_SELECTION

    def _write(self, text: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def render_menu(self) -> None:
        self._write(
            render(
                "menu.txt.j2",
                heading=MENU_HEADING,
                exit_selection=EXIT_SELECTION,
                categories=self.registry.labels(),
            )
        )

    def read_selection(self) -> int:
        self._write(PROMPT)
        try:
            line = self.read_line("")
        except EOFError as exc:
            raise InvalidSelection("No category number entered") from exc
        return parse_selection(line)

    def display_feed(self, feed: Feed) -> None:
        self._write(render("feed.txt.j2", feed=feed))

    async def run(self) -> int:
        """Run the session and return the process exit status."""
        self.state = SessionState.AWAITING_SELECTION
        self.render_menu()
        selection = self.read_selection()

        if selection == EXIT_SELECTION:
            self.state = SessionState.EXITING
            logger.debug("Exit selected")
            return 0

        url = self.registry.lookup(selection)
        logger.debug("Category %d resolved to %s", selection, url)

        self.state = SessionState.FETCHING
        feed = await self.fetch(url)

        self.state = SessionState.DISPLAYING
        self.display_feed(feed)

        self.state = SessionState.DONE
        return 0
