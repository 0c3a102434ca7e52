"""Error types raised while creating or verifying detached signatures."""

from __future__ import annotations


class DetachedJwsError(Exception):
    """Base class for all detached JWS errors."""


class DecodeError(DetachedJwsError, ValueError):
    """Raised when a Base64URL segment cannot be decoded."""


class MalformedTokenError(DetachedJwsError, ValueError):
    """Raised when a token is not a three part compact serialization."""


class UnsupportedAlgorithmError(DetachedJwsError):
    """Raised when a token header does not declare ``HS256``.

    Undecodable or unparsable headers are reported with this error as well,
    so callers can tell "wrong kind of token" apart from "forged token".
    """


class SerializationError(DetachedJwsError):
    """Raised when a payload has no canonical JSON representation."""
