"""HTTP media type parsing and serialization.

This package parses media type strings such as ``text/html;charset=utf-8``
into immutable values following the WHATWG MIME Sniffing algorithm, and
renders them back in canonical form.

:var __version__: Current package version
:type __version__: str
"""

from .exceptions import (
    InvalidMediaType,
    InvalidSubTypeError,
    InvalidTypeError,
    MediaTypeError,
    NoSubTypeError,
    NoTypeError,
    ParameterNotFoundError,
    ParseFailure,
)
from .media_type import MediaType, parse

__version__ = "0.1.0"

__all__ = [
    "MediaType",
    "parse",
    "MediaTypeError",
    "InvalidMediaType",
    "NoTypeError",
    "InvalidTypeError",
    "NoSubTypeError",
    "InvalidSubTypeError",
    "ParameterNotFoundError",
    "ParseFailure",
]
