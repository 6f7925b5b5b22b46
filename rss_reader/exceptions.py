"""Errors raised while running a reader session."""

from __future__ import annotations

from typing import Optional


class ReaderError(Exception):
    """Base class for every error that ends a session."""


class InvalidSelection(ReaderError):
    """Raised when the menu input is not an unsigned integer."""


class CategoryNotFound(ReaderError):
    """Raised when a selection has no matching category."""

    def __init__(self, category_id: int) -> None:
        super().__init__(f"Invalid category number: {category_id}")
        self.category_id = category_id


class FetchError(ReaderError):
    """Raised when a feed cannot be retrieved or understood."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """Raised on network failures and timeouts."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(url, f"Failed to fetch {url}: {cause}")
        self.cause = cause


class UnexpectedStatus(FetchError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, url: str, code: int, reason: Optional[str] = None) -> None:
        message = f"Unexpected status code: {code}"
        if reason:
            message += f" {reason}"
        super().__init__(url, message)
        self.code = code
        self.reason = reason


class FeedParseError(FetchError):
    """Raised when the response body is not a usable RSS document."""

    def __init__(self, url: str, detail: str) -> None:
        source = f" from {url}" if url else ""
        super().__init__(url, f"Invalid RSS document{source}: {detail}")
        self.detail = detail
