"""Creation and verification of detached JWS tokens.

A detached JWS in compact notation carries the header and the signature but
leaves the middle (payload) segment empty; the payload travels separately and
is handed to :meth:`DetachedJwsHandler.verify_detached_jws` by the caller.

See https://datatracker.ietf.org/doc/html/rfc7515#appendix-F
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from . import codec, serializer, signer
from .config import DetachedJwsConfig, load_config
from .exceptions import DecodeError, MalformedTokenError, UnsupportedAlgorithmError
from .header import JwsHeader

logger = logging.getLogger(__name__)

SIGNING_ALGORITHM = "HS256"
SEGMENT_COUNT = 3


class DetachedJwsHandler:
    """Creates and verifies HMAC-SHA256 detached JWS tokens.

    The handler keeps a single secret key for its lifetime and no other
    state, so one instance may be shared between threads.

    Args:
        secret_key: The shared secret, either raw bytes or text which is
            encoded as UTF-8. Empty keys are accepted.
    """

    def __init__(self, secret_key: bytes | str) -> None:
        if isinstance(secret_key, str):
            key = secret_key.encode("utf-8")
        elif isinstance(secret_key, (bytes, bytearray, memoryview)):
            key = bytes(secret_key)
        else:
            raise TypeError(
                f"secret_key must be bytes or str, not {type(secret_key).__name__}"
            )
        self._secret_key = key
        self._algorithm = SIGNING_ALGORITHM

    @classmethod
    def from_config(
        cls, config: Optional[DetachedJwsConfig] = None
    ) -> "DetachedJwsHandler":
        """Build a handler from the secret key in ``config``.

        Falls back to :func:`~detached_jws.config.load_config` when no
        configuration is given.
        """
        config = config or load_config()
        if config.secret_key is None:
            raise ValueError(
                "No secret key configured. Set DETACHED_JWS_SECRET_KEY or "
                "'secret_key' in the configuration file."
            )
        return cls(config.secret_key.get_secret_value())

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self._algorithm!r})"

    def create_detached_jws(self, payload: Any) -> str:
        """Sign ``payload`` and return ``<header>..<signature>``.

        Raises:
            SerializationError: the payload cannot be serialized.
        """
        encoded_header = JwsHeader(algorithm=self._algorithm).encode()
        encoded_signature = codec.encode(self._signature_bytes(payload))
        logger.debug("Created detached JWS for payload type %s", type(payload).__name__)
        return f"{encoded_header}..{encoded_signature}"

    def verify_detached_jws(self, payload: Any, detached_signature: str) -> bool:
        """Check ``detached_signature`` against ``payload``.

        Returns:
            ``True`` when the signature matches, ``False`` when it does not or
            when the signature segment cannot be decoded.

        Raises:
            MalformedTokenError: the token does not have exactly three segments.
            UnsupportedAlgorithmError: the header is unreadable or does not
                declare ``HS256``.
            SerializationError: the payload cannot be serialized.
        """
        parts = detached_signature.split(".")
        if len(parts) != SEGMENT_COUNT:
            logger.warning(
                "Rejected detached JWS with %d segments, expected %d",
                len(parts),
                SEGMENT_COUNT,
            )
            raise MalformedTokenError(
                "JWS Compact Serialization string must consist of exactly three parts"
            )

        self._check_header(parts[0])

        computed_signature = self._signature_bytes(payload)
        try:
            provided_signature = codec.decode(parts[2])
        except DecodeError:
            logger.info("Detached JWS signature segment could not be decoded")
            return False

        is_valid = signer.constant_time_equals(provided_signature, computed_signature)
        if is_valid:
            logger.debug("Detached JWS verified for payload type %s", type(payload).__name__)
        else:
            logger.info("Detached JWS signature mismatch")
        return is_valid

    def _signature_bytes(self, payload: Any) -> bytes:
        return signer.sign(self._secret_key, serializer.serialize(payload))

    def _check_header(self, encoded_header: str) -> None:
        try:
            header = JwsHeader.decode(encoded_header)
        except (DecodeError, ValidationError) as e:
            logger.warning("Rejected detached JWS with unreadable header")
            raise UnsupportedAlgorithmError(
                f"Invalid header: only {self._algorithm} is supported as the signing algorithm"
            ) from e

        if header.algorithm != self._algorithm:
            logger.warning("Rejected detached JWS using algorithm %r", header.algorithm)
            raise UnsupportedAlgorithmError(
                f"Invalid header: only {self._algorithm} is supported as the signing "
                f"algorithm, got {header.algorithm!r}"
            )
