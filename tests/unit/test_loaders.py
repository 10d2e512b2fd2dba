"""
Unit tests for the bundled loaders.
"""

import pytest

from keypager import FunctionLoader, Loader, SequenceLoader


@pytest.mark.unit
class TestSequenceLoader:
    """Test offset-keyed paging over an in-memory sequence."""

    def test_first_page(self) -> None:
        loader = SequenceLoader(["a", "b", "c"])
        assert loader.load(None, "", 2) == (["a", "b"], "2")

    def test_last_page_has_empty_key(self) -> None:
        loader = SequenceLoader(["a", "b", "c"])
        assert loader.load(None, "2", 2) == (["c"], "")

    def test_exact_fit_ends_pagination(self) -> None:
        loader = SequenceLoader([1, 2, 3, 4])
        assert loader.load(None, "2", 2) == ([3, 4], "")

    def test_empty_sequence(self) -> None:
        loader = SequenceLoader([])
        assert loader.load(None, "", 10) == ([], "")

    def test_offset_at_end(self) -> None:
        loader = SequenceLoader([1, 2])
        assert loader.load(None, "2", 5) == ([], "")

    @pytest.mark.parametrize("key", ["abc", "1.5", "-1", "99"])
    def test_invalid_key(self, key: str) -> None:
        loader = SequenceLoader([1, 2, 3])
        with pytest.raises(ValueError, match="page key"):
            loader.load(None, key, 2)

    def test_satisfies_loader_protocol(self) -> None:
        assert isinstance(SequenceLoader([]), Loader)


@pytest.mark.unit
class TestFunctionLoader:
    """Test wrapping plain functions."""

    def test_forwards_arguments(self) -> None:
        calls = []

        def load(context, page_key, page_size):
            calls.append((context, page_key, page_size))
            return [1], "next"

        loader = FunctionLoader(load)

        assert loader.load("ctx", "key", 10) == ([1], "next")
        assert calls == [("ctx", "key", 10)]

    def test_propagates_errors(self) -> None:
        def load(context, page_key, page_size):
            raise ConnectionError("down")

        with pytest.raises(ConnectionError):
            FunctionLoader(load).load(None, "", 1)

    def test_repr_names_function(self) -> None:
        def fetch_users(context, page_key, page_size):
            return [], ""

        assert "fetch_users" in repr(FunctionLoader(fetch_users))
        assert isinstance(FunctionLoader(fetch_users), Loader)
