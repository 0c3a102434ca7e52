"""Canonical JSON serialization of signing payloads."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from pydantic import BaseModel

from .exceptions import SerializationError


def _to_jsonable(value: Any) -> Any:
    """Convert values the ``json`` module does not know about.

    Conversions are shallow so that ``json`` keeps tracking nested values
    and still detects reference cycles.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

    try:
        return vars(value)
    except TypeError:
        raise TypeError(
            f"Object of type '{type(value).__name__}' from module "
            f"'{type(value).__module__}' is not JSON serializable"
        ) from None


def serialize(payload: Any) -> bytes:
    """Serialize ``payload`` to compact UTF-8 encoded JSON.

    Keys keep the payload's own enumeration order; they are not sorted, so
    the signing and verifying sides must build the payload the same way.

    Raises:
        SerializationError: the payload holds non-finite floats, reference
            cycles or values with no JSON form.
    """
    try:
        text = json.dumps(
            payload,
            default=_to_jsonable,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Cannot serialize payload of type '{type(payload).__name__}': {e}"
        ) from e
    return text.encode("utf-8")
