"""HMAC-SHA256 primitives."""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_SIZE = hashlib.sha256().digest_size


def sign(key: bytes, message: bytes) -> bytes:
    """Return the 32 byte HMAC-SHA256 of ``message`` under ``key``."""
    return hmac.new(key, message, hashlib.sha256).digest()


def constant_time_equals(left: bytes, right: bytes) -> bool:
    """Compare two byte strings in time independent of where they differ."""
    return hmac.compare_digest(left, right)
