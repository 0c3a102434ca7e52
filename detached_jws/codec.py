"""Base64URL encoding without padding, as used by JWS compact tokens."""

from __future__ import annotations

import base64
import binascii
import re

from .exceptions import DecodeError

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def encode(data: bytes) -> str:
    """Encode ``data`` with the URL-safe alphabet and strip ``=`` padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(data: str) -> bytes:
    """Decode unpadded Base64URL text back into bytes.

    Raises:
        DecodeError: ``data`` contains characters outside the Base64URL
            alphabet (padding included) or has a length that no byte
            sequence encodes to.
    """
    if not isinstance(data, str):
        raise DecodeError(f"Expected str, got {type(data).__name__}")
    if _ALPHABET.fullmatch(data) is None:
        raise DecodeError("Input contains characters outside the Base64URL alphabet")
    if len(data) % 4 == 1:
        raise DecodeError(f"Invalid Base64URL length: {len(data)}")

    padded = data + "=" * (-len(data) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except binascii.Error as e:
        raise DecodeError(f"Invalid Base64URL input: {e}") from e
