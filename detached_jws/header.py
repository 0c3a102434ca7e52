"""JOSE header model for detached signatures."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from . import codec


class JwsHeader(BaseModel):
    """Protected header of a detached JWS.

    Only the ``alg`` member is modelled. Other members found while parsing a
    foreign token are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    algorithm: str = Field(..., alias="alg", description="JWS algorithm")

    def to_json(self) -> bytes:
        """Return the compact JSON form, e.g. ``{"alg":"HS256"}``."""
        return self.model_dump_json(by_alias=True).encode("utf-8")

    def encode(self) -> str:
        """Return the Base64URL encoded header segment."""
        return codec.encode(self.to_json())

    @classmethod
    def decode(cls, segment: str) -> "JwsHeader":
        """Parse a header segment.

        Raises:
            DecodeError: the segment is not valid Base64URL.
            pydantic.ValidationError: the decoded bytes are not a JSON object
                with a string ``alg`` member.
        """
        return cls.model_validate_json(codec.decode(segment))
