from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from ._logging import logger, redact_key
from .config import Option, PagerOptions, validation_message
from .exceptions import InvalidConfigError, LoadFailedError, handle_loader_errors
from .loaders import Loader
from .pagination import PageResult

T = TypeVar("T")


class Pager(Generic[T]):
    """
    Drives a Loader page by page using opaque string page keys.

    The loader is always called at least once, even when the starting key is
    empty. After that, an empty next page key returned by the loader means
    every page has been loaded.

    Not safe for concurrent use: the cursor is mutated in place by next().
    Use one Pager per pagination run.

    Usage:
        pager = Pager.new(with_next_page_loader(loader), with_page_size(50))
        users = pager.all()
    """

    def __init__(self, options: PagerOptions) -> None:
        if options.loader is None:
            raise InvalidConfigError("next page loader is required")
        self._page_size = options.page_size
        self._next_page_key = options.next_page_key
        self._loader: Loader[T] = options.loader
        self._is_first_page_loaded = False

    @classmethod
    def new(cls, *options: Option) -> Pager[T]:
        """
        Builds a Pager from a list of options applied in order.

        Raises:
            InvalidConfigError: On the first option that fails validation,
                or if no loader was supplied
        """
        pager_options = PagerOptions()
        for option in options:
            option(pager_options)
        return cls(pager_options)

    @classmethod
    def from_config(cls, data: Mapping[str, Any], loader: Any) -> Pager[T]:
        """
        Builds a Pager from a mapping of settings, e.g. request query parameters.

        Recognised keys are ``page_size`` and ``next_page_key``; values are
        coerced the way pydantic coerces them ("20" becomes 20).

        Raises:
            InvalidConfigError: If any setting is invalid or the loader is missing
        """
        try:
            pager_options = PagerOptions.model_validate({**data, "loader": loader})
        except ValidationError as e:
            raise InvalidConfigError(validation_message(e), original_error=e) from e
        return cls(pager_options)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def next_page_key(self) -> str:
        """Key that the next call to next() will load. Empty once exhausted."""
        return self._next_page_key

    @property
    def loader(self) -> Loader[T]:
        return self._loader

    @property
    def is_first_page_loaded(self) -> bool:
        return self._is_first_page_loaded

    def is_all_loaded(self) -> bool:
        """
        True once a page has been loaded and the loader returned no next key.

        Before the first load the key may be empty as well, which is why the
        first-page flag is part of the test.
        """
        return self._next_page_key == "" and self._is_first_page_loaded

    def next(self, context: Any = None) -> list[T] | None:
        """
        Loads the next page of items.

        Args:
            context: Passed through to the loader untouched (cancellation
                     tokens, sessions, request scopes, ...)

        Returns:
            The items of the page, possibly empty, or None if every page
            has already been loaded. In that case the loader is not called.

        Raises:
            LoadFailedError: If the loader raised. The pager state is left
                unchanged, so calling next() again retries the same key.
        """
        if self.is_all_loaded():
            return None
        return self._load(context)

    def _load(self, context: Any) -> list[T]:
        page_key = self._next_page_key
        logger.debug(
            "Loading page",
            extra={
                "operation": "next",
                "page_key_hash": redact_key(page_key),
                "page_size": self._page_size,
            },
        )

        try:
            with handle_loader_errors(page_key=page_key):
                items, next_page_key = self._loader.load(context, page_key, self._page_size)
                page = list(items)
                if next_page_key is not None and not isinstance(next_page_key, str):
                    raise TypeError(
                        "next page key must be str, "
                        f"loader returned {type(next_page_key).__name__}"
                    )
        except LoadFailedError as e:
            logger.warning(
                "Page load failed",
                extra={
                    "operation": "next",
                    "page_key_hash": redact_key(page_key),
                    "error_type": type(e.original_error).__name__,
                },
            )
            raise

        # None is accepted as "no more pages" for loaders written that way.
        if next_page_key is None:
            next_page_key = ""
        self._next_page_key = next_page_key
        self._mark_first_page_loaded()

        logger.debug(
            "Page loaded",
            extra={
                "operation": "next",
                "item_count": len(page),
                "next_page_key_hash": redact_key(next_page_key),
            },
        )
        return page

    def page(self, context: Any = None) -> PageResult[T] | None:
        """
        Loads the next page and returns it together with the key of the page after it.

        Returns:
            PageResult, or None if every page has already been loaded.
        """
        items = self.next(context)
        if items is None:
            return None
        return PageResult(items=items, next_page_key=self._next_page_key, count=len(items))

    def pages(self, context: Any = None) -> Iterator[list[T]]:
        """Yields each remaining page until every page has been loaded."""
        while not self.is_all_loaded():
            yield self._load(context)

    def all(self, context: Any = None) -> list[T]:
        """
        Loads every remaining page and returns their items in order.

        Raises:
            LoadFailedError: On the first failed load. partial_items holds
                the items loaded before the failure. No retry is attempted.
        """
        all_items: list[T] = []
        pages = 0
        try:
            for items in self.pages(context):
                all_items.extend(items)
                pages += 1
        except LoadFailedError as e:
            e.partial_items = all_items
            raise

        logger.info(
            "All pages loaded",
            extra={"operation": "all", "page_count": pages, "item_count": len(all_items)},
        )
        return all_items

    def __iter__(self) -> Iterator[T]:
        for items in self.pages():
            yield from items

    def __repr__(self) -> str:
        return (
            f"Pager(page_size={self._page_size}, "
            f"first_page_loaded={self._is_first_page_loaded}, "
            f"all_loaded={self.is_all_loaded()})"
        )

    def _mark_first_page_loaded(self) -> None:
        if not self._is_first_page_loaded:
            self._is_first_page_loaded = True


def new_pager(*options: Option) -> Pager[Any]:
    """Builds a Pager from options. See Pager.new."""
    return Pager.new(*options)
