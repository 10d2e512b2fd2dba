"""
Loaders fetch a single page of items for the Pager.

A loader is any object with a ``load(context, page_key, page_size)`` method
returning ``(items, next_page_key)``. An empty ``next_page_key`` signals that
there are no further pages. Failures are reported by raising.
"""

from collections.abc import Callable, Sequence
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

LoadFunction = Callable[[Any, str, int], tuple[Sequence[T], str]]


@runtime_checkable
class Loader(Protocol[T_co]):
    """Loads one page of items given a page key and a requested page size."""

    def load(self, context: Any, page_key: str, page_size: int) -> tuple[Sequence[T_co], str]:
        ...


class FunctionLoader(Generic[T]):
    """Adapts a plain function with the load() signature to the Loader protocol."""

    def __init__(self, func: "LoadFunction[T]") -> None:
        self.func = func

    def load(self, context: Any, page_key: str, page_size: int) -> tuple[Sequence[T], str]:
        return self.func(context, page_key, page_size)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"FunctionLoader({name})"


class SequenceLoader(Generic[T]):
    """
    Pages over an in-memory sequence.

    Page keys are decimal offsets into the sequence. The empty key means
    offset 0, and the last page returns an empty next key.

    Example:
        loader = SequenceLoader(["a", "b", "c"])
        loader.load(None, "", 2)   # (["a", "b"], "2")
        loader.load(None, "2", 2)  # (["c"], "")
    """

    def __init__(self, items: Sequence[T]) -> None:
        self.items = items

    def load(self, context: Any, page_key: str, page_size: int) -> tuple[list[T], str]:
        offset = self._parse_offset(page_key)
        end = offset + page_size
        page = list(self.items[offset:end])
        next_key = str(end) if end < len(self.items) else ""
        return page, next_key

    def _parse_offset(self, page_key: str) -> int:
        if page_key == "":
            return 0
        try:
            offset = int(page_key)
        except ValueError as e:
            raise ValueError(f"invalid offset page key {page_key!r}") from e
        if offset < 0 or offset > len(self.items):
            raise ValueError(f"offset page key {page_key!r} out of range")
        return offset
