"""
Page results for external pagination control.

Lets API backends hand the next page key back to their clients
together with the items of the current page.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    """
    Represents a single page of results with pagination cursor.

    Attributes:
        items: Items loaded for this page
        next_page_key: Key of the following page ("" if no more pages)
        count: Number of items in this page
    """

    items: list[T]
    next_page_key: str
    count: int

    @property
    def has_more(self) -> bool:
        """Returns True if there are more pages available."""
        return self.next_page_key != ""
