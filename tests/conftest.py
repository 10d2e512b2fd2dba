"""
Shared pytest fixtures and configuration for keypager tests.

Provides mocked loaders and an in-memory fake loader keyed by page key.
"""

from typing import Any
from unittest.mock import MagicMock

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")


class FakeLoader:
    """
    Serves pages from dictionaries keyed by page key.

    Raises RuntimeError("test error") when asked for err_on_page_key.
    Records every key it was called with.
    """

    def __init__(
        self,
        page_by_key: dict[str, list[Any]],
        next_page_key_by_page_key: dict[str, str],
        err_on_page_key: str | None = None,
    ) -> None:
        self.page_by_key = page_by_key
        self.next_page_key_by_page_key = next_page_key_by_page_key
        self.err_on_page_key = err_on_page_key
        self.calls: list[tuple[str, int]] = []

    def load(self, context: Any, page_key: str, page_size: int) -> tuple[list[Any], str]:
        self.calls.append((page_key, page_size))
        if page_key == self.err_on_page_key:
            raise RuntimeError("test error")
        return self.page_by_key[page_key], self.next_page_key_by_page_key[page_key]


@pytest.fixture
def mock_loader():
    """
    Creates a mocked loader.

    Tests set load.return_value / side_effect as needed.
    """
    loader = MagicMock()
    loader.load.return_value = ([], "")
    return loader


@pytest.fixture
def make_three_page_loader():
    """
    Factory for a loader serving three pages: "" -> "second" -> "third" -> "".
    """

    def _make(err_on_page_key: str | None = None) -> FakeLoader:
        return FakeLoader(
            page_by_key={"": [1, 2, 3], "second": [4, 5, 6], "third": [7, 8]},
            next_page_key_by_page_key={"": "second", "second": "third", "third": ""},
            err_on_page_key=err_on_page_key,
        )

    return _make
