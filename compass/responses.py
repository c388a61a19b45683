"""Unwrapping of Compass JSON service payloads.

Compass wraps most service results, either in an ASP.NET ``{"d": ...}``
envelope (an object whose only key is ``d``) or in a typed
``GenericMobileResponse`` object. These helpers strip the wrappers for
display; the session client itself returns bodies untouched.
"""

import json
from typing import Any

from pydantic import BaseModel

GENERIC_MOBILE_RESPONSE_TYPE = "GenericMobileResponse"


class GenericMobileResponse(BaseModel):
    """Payload of a serialised GenericMobileResponse."""

    data: Any = None


def unwrap(value: Any) -> Any:
    """Strip Compass response wrappers from a decoded JSON value.

    Values that are not wrapped (strings, numbers, lists, plain objects)
    are returned unchanged.
    """
    if not isinstance(value, dict):
        return value
    if value.keys() == {"d"}:
        return unwrap(value["d"])
    if value.get("__type") == GENERIC_MOBILE_RESPONSE_TYPE:
        return GenericMobileResponse(data=value.get("data"))
    return value


def parse_body(text: str) -> Any:
    """Decode a JSON response body and unwrap it.

    Raises:
        ValueError: If the body is not valid JSON
    """
    return unwrap(json.loads(text))


def to_jsonable(value: Any) -> Any:
    """Convert an unwrapped value back into plain JSON types."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value
