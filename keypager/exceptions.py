from collections.abc import Generator
from contextlib import contextmanager
from typing import Any


class PagerError(Exception):
    """Base exception for all keypager errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidConfigError(PagerError):
    """Raised when a pager is constructed with invalid options."""


class LoadFailedError(PagerError):
    """
    Raised when the loader fails to fetch a page.

    Carries the page key the load was attempted with, so the caller can
    retry from the same position. When raised from Pager.all(), partial_items
    holds everything loaded before the failure.
    """

    def __init__(
        self,
        page_key: str,
        original_error: Exception | None = None,
        partial_items: list[Any] | None = None,
    ) -> None:
        super().__init__(f"page {page_key}: {original_error}", original_error)
        self.page_key = page_key
        self.partial_items: list[Any] = partial_items if partial_items is not None else []


class CursorError(PagerError):
    """Raised when an opaque cursor cannot be encoded or decoded."""

    def __init__(
        self, message: str, cursor: Any | None = None, original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)
        self.cursor = cursor


@contextmanager
def handle_loader_errors(page_key: str) -> Generator[None, None, None]:
    """
    Context manager that catches any exception raised by a loader
    and raises LoadFailedError naming the page key that failed.

    Args:
        page_key: The key the loader was called with

    Usage:
        with handle_loader_errors(page_key=key):
            items, next_key = loader.load(context, key, page_size)
    """
    try:
        yield
    except Exception as e:
        raise LoadFailedError(page_key=page_key, original_error=e) from e
