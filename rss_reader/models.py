"""Shared data models for rss_reader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Category:
    """A selectable feed in the category menu."""

    id: int
    label: str
    url: str


@dataclass(frozen=True)
class Item:
    """A single article from an RSS channel.

    ``description`` is kept exactly as published and may contain markup.
    ``pub_date`` is the raw ``pubDate`` string from the feed.
    """

    title: str
    link: str
    description: str
    pub_date: str


@dataclass(frozen=True)
class Feed:
    """Parsed RSS channel with its items in document order."""

    title: str
    description: str
    link: str
    items: Tuple[Item, ...] = field(default_factory=tuple)
