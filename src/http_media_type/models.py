"""Pydantic models for media type output and test fixtures.

The models give parsed values and parse results a stable JSON shape for the
command line tool, and describe the ``{"input", "output"}`` case format used
by conformance fixtures.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class MediaTypeModel(BaseModel):
    """JSON view of a parsed media type.

    :param type: Lowercased type, e.g. ``text``
    :type type: str
    :param subtype: Lowercased subtype, e.g. ``html``
    :type subtype: str
    :param essence: ``type/subtype`` without parameters
    :type essence: str
    :param parameters: Parameters in first-seen order
    :type parameters: Dict[str, str]
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Media type's type")
    subtype: str = Field(..., description="Media type's subtype")
    essence: str = Field(..., description="type/subtype without parameters")
    parameters: Dict[str, str] = Field(
        default_factory=dict, description="Parameters in first-seen order"
    )


class ParseOutcome(BaseModel):
    """Result of parsing one input string.

    Exactly one of ``media_type`` and ``error`` is set.
    """

    input: str
    output: Optional[str] = None
    media_type: Optional[MediaTypeModel] = None
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MediaTypeCase(BaseModel):
    """A single conformance case.

    ``output`` is the expected canonical serialization, or None when the
    input must fail to parse.
    """

    model_config = ConfigDict(extra="ignore")

    input: str
    output: Optional[str] = None


_CASE_LIST = TypeAdapter(List[MediaTypeCase])


def cases_from_json(data: List[Any]) -> List[MediaTypeCase]:
    """Validate decoded fixture data, skipping non-object entries.

    Fixture files interleave plain strings as comments between cases.

    :param data: Decoded JSON array
    :type data: List[Any]
    :return: The validated cases
    :rtype: List[MediaTypeCase]
    """
    return _CASE_LIST.validate_python([entry for entry in data if isinstance(entry, dict)])


__all__ = [
    "MediaTypeModel",
    "ParseOutcome",
    "MediaTypeCase",
    "cases_from_json",
]
