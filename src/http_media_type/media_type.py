"""Media type value object with parsing and serialization.

Parsing follows the WHATWG MIME Sniffing "parse a MIME type" algorithm:
a single left-to-right scan over the input that yields a type, a subtype
and an ordered set of parameters, or fails with a classified error.
Malformed parameters never fail the parse; they are dropped.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .exceptions import (
    InvalidSubTypeError,
    InvalidTypeError,
    NoSubTypeError,
    NoTypeError,
    ParameterNotFoundError,
)
from .models import MediaTypeModel
from .scanner import (
    Scanner,
    ascii_lower,
    is_quoted_string_token,
    is_token,
    rstrip_http_whitespace,
    stop_at,
    strip_http_whitespace,
)

_MISSING: Any = object()


class MediaType:
    """An immutable, parsed media type.

    Instances are normally obtained from :meth:`from_string`. The type,
    subtype and parameter names are lowercase; parameter values are stored
    un-escaped and keep the order in which they first appeared.

    :param type_: Lowercase token, e.g. ``text``
    :type type_: str
    :param subtype: Lowercase token, e.g. ``html``
    :type subtype: str
    :param parameters: Parameter names to values, in order
    :type parameters: Optional[Mapping[str, str]]
    """

    __slots__ = ("_type", "_subtype", "_parameters")

    def __init__(
        self,
        type_: str,
        subtype: str,
        parameters: Optional[Mapping[str, str]] = None,
    ) -> None:
        object.__setattr__(self, "_type", type_)
        object.__setattr__(self, "_subtype", subtype)
        object.__setattr__(
            self, "_parameters", MappingProxyType(dict(parameters or {}))
        )

    @classmethod
    def from_string(cls, text: str) -> "MediaType":
        """Parse a media type such as ``text/html;charset=utf-8``.

        :param text: The raw value, e.g. from a ``Content-Type`` header
        :type text: str
        :return: The parsed media type
        :rtype: MediaType
        :raises NoTypeError: If nothing precedes the ``/``
        :raises InvalidTypeError: If the type is not an HTTP token
        :raises NoSubTypeError: If there is no ``/`` or no subtype after it
        :raises InvalidSubTypeError: If the subtype is not an HTTP token
        """
        original = text
        text = strip_http_whitespace(text)
        scanner = Scanner(text)

        type_ = scanner.collect_sequence(stop_at("/"))
        if not type_:
            raise NoTypeError(original)
        if not is_token(type_):
            raise InvalidTypeError(original, type_)
        if scanner.at_end():
            raise NoSubTypeError(original)
        scanner.advance()

        subtype = rstrip_http_whitespace(scanner.collect_sequence(stop_at(";")))
        if not subtype:
            raise NoSubTypeError(original)
        if not is_token(subtype):
            raise InvalidSubTypeError(original, subtype)

        parameters: Dict[str, str] = {}
        while not scanner.at_end():
            scanner.advance()
            scanner.skip_http_whitespace()

            name = ascii_lower(scanner.collect_sequence(stop_at(";", "=")))

            if not scanner.at_end():
                if scanner.peek() == ";":
                    continue
                scanner.advance()

            # A trailing "name=" ends parameter parsing altogether.
            if scanner.at_end():
                break

            if scanner.peek() == '"':
                value = scanner.collect_quoted_string(extract_value=True)
                scanner.collect_sequence(stop_at(";"))
            else:
                value = rstrip_http_whitespace(scanner.collect_sequence(stop_at(";")))
                if not value:
                    continue

            if (
                is_token(name)
                and is_quoted_string_token(value)
                and name not in parameters
            ):
                parameters[name] = value

        return cls(ascii_lower(type_), ascii_lower(subtype), parameters)

    def to_string(self) -> str:
        """Serialize to canonical form.

        Parameter values are quoted, with ``"`` and ``\\`` escaped, when
        they are empty or contain anything outside the HTTP token class.

        :return: e.g. ``text/html;charset=utf-8``
        :rtype: str
        """
        parts = [self.essence]
        for name, value in self._parameters.items():
            if not is_token(value):
                value = '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
            parts.append(f";{name}={value}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return (
            self._type == other._type
            and self._subtype == other._subtype
            and list(self._parameters.items()) == list(other._parameters.items())
        )

    def __hash__(self) -> int:
        return hash((self._type, self._subtype, tuple(self._parameters.items())))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def type(self) -> str:
        return self._type

    @property
    def subtype(self) -> str:
        return self._subtype

    @property
    def essence(self) -> str:
        """``type/subtype`` without parameters."""
        return f"{self._type}/{self._subtype}"

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of the parameters, in first-seen order."""
        return self._parameters

    def has_parameter(self, name: str) -> bool:
        return ascii_lower(name) in self._parameters

    def get_parameter(self, name: str, default: Any = _MISSING) -> Any:
        """Return the value of a parameter.

        Names are matched case-insensitively (ASCII only).

        :param name: Parameter name, e.g. ``charset``
        :type name: str
        :param default: Returned instead of raising when the parameter is absent
        :return: The un-escaped parameter value
        :raises ParameterNotFoundError: If absent and no default was given
        """
        key = ascii_lower(name)
        if key in self._parameters:
            return self._parameters[key]
        if default is _MISSING:
            raise ParameterNotFoundError(name)
        return default

    def to_model(self) -> MediaTypeModel:
        return MediaTypeModel(
            type=self._type,
            subtype=self._subtype,
            essence=self.essence,
            parameters=dict(self._parameters),
        )


def parse(text: str) -> MediaType:
    """Parse ``text`` into a :class:`MediaType`. See :meth:`MediaType.from_string`."""
    return MediaType.from_string(text)


__all__ = ["MediaType", "parse"]
