from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import InvalidConfigError
from .loaders import FunctionLoader

DEFAULT_PAGE_SIZE = 100


class PagerOptions(BaseModel):
    """
    Internal container for Pager settings.
    Options mutate it by assignment, so every assignment is validated.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    page_size: int = DEFAULT_PAGE_SIZE
    next_page_key: str = ""
    loader: Any | None = None

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfigError(validation_message(e), original_error=e) from e

    @field_validator("page_size")
    @classmethod
    def _check_page_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("page size must be positive")
        return value

    @field_validator("next_page_key")
    @classmethod
    def _check_next_page_key(cls, value: str) -> str:
        # The empty key is the "no key" sentinel; it is only valid as the default.
        if value == "":
            raise ValueError("next page key must not be empty")
        return value

    @field_validator("loader")
    @classmethod
    def _check_loader(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("next page loader is required")
        if callable(getattr(value, "load", None)):
            return value
        if callable(value):
            return FunctionLoader(value)
        raise ValueError("next page loader must define load() or be callable")

    def set(self, name: str, value: Any) -> None:
        """
        Assigns a single option, translating validation failures.
        Options are validated strictly: no bool or float page sizes, no bytes keys.

        Raises:
            InvalidConfigError: If the value fails validation
        """
        try:
            self.__pydantic_validator__.validate_assignment(self, name, value, strict=True)
        except ValidationError as e:
            raise InvalidConfigError(validation_message(e), original_error=e) from e


Option = Callable[[PagerOptions], None]


def validation_message(error: ValidationError) -> str:
    """Returns the message of the first validation failure, without pydantic's prefix."""
    first = error.errors()[0]
    cause = first.get("ctx", {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    return f"{first['loc'][0]}: {first['msg']}" if first["loc"] else first["msg"]


def with_page_size(page_size: int) -> Option:
    """Sets the number of items requested per page. Must be positive."""

    def apply(options: PagerOptions) -> None:
        options.set("page_size", page_size)

    return apply


def with_next_page_key(key: str) -> Option:
    """Sets the key of the first page to load. Must not be empty."""

    def apply(options: PagerOptions) -> None:
        options.set("next_page_key", key)

    return apply


def with_next_page_loader(loader: Any) -> Option:
    """
    Sets the loader used to fetch pages.

    Accepts a Loader or a plain function taking (context, page_key, page_size).
    """

    def apply(options: PagerOptions) -> None:
        options.set("loader", loader)

    return apply
