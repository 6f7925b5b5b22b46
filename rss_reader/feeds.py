"""Feed retrieval and RSS parsing."""

from __future__ import annotations

import asyncio
import contextlib
import copy
import logging
import threading
from typing import Any, Callable, Optional, Tuple, Union
from xml.etree import ElementTree as ET

import requests

from .exceptions import FeedParseError, TransportError, UnexpectedStatus
from .models import Feed, Item

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT = 10.0
READ_TIMEOUT = 15.0
DEFAULT_TIMEOUT = (CONNECT_TIMEOUT, READ_TIMEOUT)

CHANNEL_FIELDS = ("title", "description", "link")
ITEM_FIELDS = ("title", "link", "description", "pubDate")


def _inner_xml(element: ET.Element) -> str:
    """Return everything between the element's tags, child markup included."""
    parts = [element.text or ""]
    for child in element:
        # tostring() would also emit the tail, escaped; keep it as parsed.
        markup = copy.copy(child)
        markup.tail = None
        parts.append(ET.tostring(markup, encoding="unicode"))
        parts.append(child.tail or "")
    return "".join(parts)


def _required_text(element: ET.Element, tag: str, where: str, url: str) -> str:
    child = element.find(tag)
    if child is None:
        raise FeedParseError(url, f"{where} is missing <{tag}>")
    return _inner_xml(child)


def parse_feed(content: Union[bytes, str], url: str = "") -> Feed:
    """Parse an RSS 2.0 document into a :class:`Feed`.

    Every channel and item field is mandatory; the first missing one aborts
    the parse and nothing is returned. Unescaped markup inside a field is
    kept as written.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise FeedParseError(url, f"malformed XML ({exc})") from exc

    channel = root.find("channel")
    if channel is None:
        raise FeedParseError(url, f"<{root.tag}> has no <channel> element")

    title, description, link = (
        _required_text(channel, tag, "channel", url) for tag in CHANNEL_FIELDS
    )

    items = []
    for position, node in enumerate(channel.findall("item"), start=1):
        where = f"item {position}"
        item_title, item_link, item_description, pub_date = (
            _required_text(node, tag, where, url) for tag in ITEM_FIELDS
        )
        items.append(
            Item(
                title=item_title,
                link=item_link,
                description=item_description,
                pub_date=pub_date,
            )
        )

    return Feed(
        title=title,
        description=description,
        link=link,
        items=tuple(items),
    )


def _settle(future: asyncio.Future, result: Any, error: Optional[BaseException]) -> None:
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(result)


def _in_daemon_thread(func: Callable[..., Any], *args, **kwargs) -> asyncio.Future:
    """Run ``func`` on a daemon thread and expose its outcome as a future.

    A daemon thread left behind by an expired deadline never delays
    interpreter shutdown, unlike the default executor.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def worker() -> None:
        result, error = None, None
        try:
            result = func(*args, **kwargs)
        except BaseException as exc:  # noqa: BLE001 - handed to the awaiting task
            error = exc
        # The loop is gone once the caller stopped waiting and the run ended.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_settle, future, result, error)

    threading.Thread(target=worker, name="rss-reader-fetch", daemon=True).start()
    return future


async def fetch_feed(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Tuple[float, float] = DEFAULT_TIMEOUT,
) -> Feed:
    """Download ``url`` and parse it as RSS.

    ``timeout`` is ``(connect, read)`` seconds. The read part bounds each
    socket read and also the whole request, body download included. The calling task is
    suspended while the request runs on a worker thread.
    """
    http = session if session is not None else requests
    total = timeout[1]
    logger.info("Fetching feed %s", url)
    try:
        response = await asyncio.wait_for(
            _in_daemon_thread(http.get, url, timeout=timeout), timeout=total
        )
    except asyncio.TimeoutError as exc:
        logger.warning("Feed %s did not complete within %gs", url, total)
        cause = requests.Timeout(f"no complete response within {total:g} seconds")
        raise TransportError(url, cause) from exc
    except requests.RequestException as exc:
        logger.warning("Failed to fetch feed %s: %s", url, exc)
        raise TransportError(url, exc) from exc

    if not 200 <= response.status_code < 300:
        logger.warning(
            "Feed %s answered with status %s", url, response.status_code
        )
        raise UnexpectedStatus(url, response.status_code, response.reason)

    feed = parse_feed(response.content, url)
    logger.info("Collected %d items from feed %s", len(feed.items), url)
    return feed
