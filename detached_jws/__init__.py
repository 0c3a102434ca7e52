"""Detached JSON Web Signatures (HS256) in compact serialization."""

from .config import DetachedJwsConfig, load_config
from .exceptions import (
    DecodeError,
    DetachedJwsError,
    MalformedTokenError,
    SerializationError,
    UnsupportedAlgorithmError,
)
from .handler import SIGNING_ALGORITHM, DetachedJwsHandler
from .header import JwsHeader

__version__ = "0.1.0"
__all__ = [
    "DecodeError",
    "DetachedJwsConfig",
    "DetachedJwsError",
    "DetachedJwsHandler",
    "JwsHeader",
    "MalformedTokenError",
    "SIGNING_ALGORITHM",
    "SerializationError",
    "UnsupportedAlgorithmError",
    "load_config",
]
