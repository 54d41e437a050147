"""Structured exception classes for HTTP media type handling."""

import json
from enum import Enum
from typing import Any, Dict, Optional


class ParseFailure(str, Enum):
    """Kinds of fatal media type parse failures.

    Each kind aborts parsing of the whole value. Problems with a single
    parameter are never fatal and have no kind here.
    """

    NO_TYPE = "NO_TYPE"
    INVALID_TYPE = "INVALID_TYPE"
    NO_SUBTYPE = "NO_SUBTYPE"
    INVALID_SUBTYPE = "INVALID_SUBTYPE"


class MediaTypeError(Exception):
    """Base exception for all media type errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class InvalidMediaType(MediaTypeError, ValueError):
    """Raised when a string cannot be parsed as a media type.

    Subclasses identify which part of the value was missing or malformed.
    The offending input is kept in ``details["input"]``.

    :param message: Description of the parse failure
    :param input_text: The input that failed to parse
    :param details: Optional extra context merged into the details
    """

    failure: ParseFailure

    def __init__(
        self,
        message: str,
        input_text: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the parse error with message and the failing input."""
        merged: Dict[str, Any] = {"input": input_text}
        if details:
            merged.update(details)
        super().__init__(message=message, code=self.failure.value, details=merged)
        self.input_text = input_text


class NoTypeError(InvalidMediaType):
    """Raised when the value has nothing before the ``/``."""

    failure = ParseFailure.NO_TYPE

    def __init__(self, input_text: str):
        super().__init__("No type", input_text)


class InvalidTypeError(InvalidMediaType):
    """Raised when the type contains characters outside the token class."""

    failure = ParseFailure.INVALID_TYPE

    def __init__(self, input_text: str, type_: str):
        super().__init__(
            "Type contains invalid characters", input_text, {"type": type_}
        )


class NoSubTypeError(InvalidMediaType):
    """Raised when there is no ``/`` or nothing usable after it."""

    failure = ParseFailure.NO_SUBTYPE

    def __init__(self, input_text: str):
        super().__init__("No subtype", input_text)


class InvalidSubTypeError(InvalidMediaType):
    """Raised when the subtype contains characters outside the token class."""

    failure = ParseFailure.INVALID_SUBTYPE

    def __init__(self, input_text: str, subtype: str):
        super().__init__(
            "Subtype contains invalid characters", input_text, {"subtype": subtype}
        )


class ParameterNotFoundError(MediaTypeError, KeyError):
    """Raised when a parameter is requested that the media type does not have.

    :param name: Name of the missing parameter
    """

    def __init__(self, name: str):
        """Initialize with the name of the missing parameter."""
        super().__init__(
            message=f"No parameter named {name!r}",
            code="PARAMETER_NOT_FOUND",
            details={"parameter": name},
        )
        self.name = name

    def __str__(self) -> str:
        return self.message
