from .config import (
    DEFAULT_PAGE_SIZE,
    Option,
    PagerOptions,
    with_next_page_key,
    with_next_page_loader,
    with_page_size,
)
from .cursor import decode_cursor, decode_dynamo_key, encode_cursor, encode_dynamo_key
from .exceptions import CursorError, InvalidConfigError, LoadFailedError, PagerError
from .loaders import FunctionLoader, Loader, SequenceLoader
from .pager import Pager, new_pager
from .pagination import PageResult

__all__ = [
    "Pager",
    "new_pager",
    "PageResult",
    # Options
    "Option",
    "PagerOptions",
    "DEFAULT_PAGE_SIZE",
    "with_page_size",
    "with_next_page_key",
    "with_next_page_loader",
    # Loaders
    "Loader",
    "FunctionLoader",
    "SequenceLoader",
    # Cursors
    "encode_cursor",
    "decode_cursor",
    "encode_dynamo_key",
    "decode_dynamo_key",
    # Exceptions
    "PagerError",
    "InvalidConfigError",
    "LoadFailedError",
    "CursorError",
]
