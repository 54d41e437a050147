"""Code point scanner and character classes for media type strings.

The scanner walks a ``str`` one code point at a time. Python strings are
indexed by code point, so non-ASCII input never splits into bytes.
"""

import re
from typing import Callable, Optional

HTTP_WHITESPACE = " \t\n\r"

_TOKEN_PAT = re.compile(r"[-!#$%&'*+.^_`|~A-Za-z0-9]+")
_QUOTED_STRING_TOKEN_PAT = re.compile(r"[\t\x20-\x7e\x80-\xff]*")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

StopPredicate = Callable[[str], bool]


def is_token(text: str) -> bool:
    """Return True if ``text`` is non-empty and made of HTTP token code points."""
    return _TOKEN_PAT.fullmatch(text) is not None


def is_quoted_string_token(text: str) -> bool:
    """Return True if every code point may appear in an HTTP quoted string."""
    return _QUOTED_STRING_TOKEN_PAT.fullmatch(text) is not None


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only; other code points are left alone."""
    return text.translate(_ASCII_LOWER)


def strip_http_whitespace(text: str) -> str:
    return text.strip(HTTP_WHITESPACE)


def rstrip_http_whitespace(text: str) -> str:
    return text.rstrip(HTTP_WHITESPACE)


def stop_at(*chars: str) -> StopPredicate:
    """Build a predicate that is true for any of the given code points."""
    stops = frozenset(chars)

    def _stop(code_point: str) -> bool:
        return code_point in stops

    return _stop


def _not_http_whitespace(code_point: str) -> bool:
    return code_point not in HTTP_WHITESPACE


class Scanner:
    """Cursor over an immutable input string.

    :param text: The input to scan
    :type text: str
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self.position = 0

    def __repr__(self) -> str:
        return f"Scanner(position={self.position}, length={self.length})"

    def at_end(self) -> bool:
        """Return True once the cursor is past the last code point."""
        return self.position >= self.length

    def peek(self) -> Optional[str]:
        """Return the code point under the cursor, or None past the end."""
        if self.position >= self.length:
            return None
        return self.text[self.position]

    def advance(self, count: int = 1) -> None:
        self.position += count

    def skip_http_whitespace(self) -> None:
        self.collect_sequence(_not_http_whitespace)

    def collect_sequence(self, until: Optional[StopPredicate] = None) -> str:
        """Collect code points until ``until`` matches or the input ends.

        The cursor is left on the code point that stopped the scan, or past
        the end. With no predicate the rest of the input is consumed.

        :param until: Predicate called with each code point
        :type until: Optional[Callable[[str], bool]]
        :return: The collected code points
        :rtype: str
        """
        start = self.position
        if until is None:
            self.position = self.length
            return self.text[start:]

        while True:
            code_point = self.peek()
            if code_point is None or until(code_point):
                break
            self.position += 1
        return self.text[start:self.position]

    def collect_quoted_string(self, extract_value: bool = False) -> str:
        """Collect an HTTP quoted string starting at the cursor.

        Backslash escapes the following code point. A backslash as the very
        last code point of the input is kept literally. An unterminated
        string runs to the end of the input.

        :param extract_value: Return the un-escaped contents instead of the
            raw source text
        :type extract_value: bool
        :return: The value, or the source slice from the opening quote up to
            the cursor
        :rtype: str
        :raises ValueError: If the cursor is not on a ``"``
        """
        start = self.position
        if self.peek() != '"':
            raise ValueError(f"Expected a quote at position {self.position}")
        self.advance()

        value = []
        while True:
            value.append(self.collect_sequence(stop_at('"', "\\")))
            if self.at_end():
                break
            quote_or_backslash = self.peek()
            self.advance()
            if quote_or_backslash == "\\":
                if self.at_end():
                    value.append("\\")
                    break
                value.append(self.peek())
                self.advance()
            else:
                break

        if extract_value:
            return "".join(value)
        return self.text[start:self.position]
