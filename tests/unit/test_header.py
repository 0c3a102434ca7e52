"""Tests for the JWS header model."""

import pytest
from pydantic import ValidationError

from detached_jws import codec
from detached_jws.exceptions import DecodeError
from detached_jws.header import JwsHeader


def test_compact_json_uses_alg_key():
    assert JwsHeader(algorithm="HS256").to_json() == b'{"alg":"HS256"}'


def test_encoded_segment():
    assert JwsHeader(algorithm="HS256").encode() == "eyJhbGciOiJIUzI1NiJ9"


def test_decode_reads_alg_member():
    header = JwsHeader.decode("eyJhbGciOiJIUzI1NiJ9")
    assert header.algorithm == "HS256"


def test_decode_ignores_extra_members():
    segment = codec.encode(b'{"typ":"JWT","alg":"RS256","kid":"1"}')
    assert JwsHeader.decode(segment).algorithm == "RS256"


def test_populate_by_alias():
    assert JwsHeader(alg="HS256") == JwsHeader(algorithm="HS256")


def test_header_is_immutable():
    header = JwsHeader(algorithm="HS256")
    with pytest.raises(ValidationError):
        header.algorithm = "none"


@pytest.mark.parametrize(
    "raw",
    [b"not json", b"null", b"[]", b"{}", b'{"alg":256}'],
)
def test_decode_rejects_invalid_documents(raw):
    with pytest.raises(ValidationError):
        JwsHeader.decode(codec.encode(raw))


def test_decode_rejects_invalid_base64url():
    with pytest.raises(DecodeError):
        JwsHeader.decode("e30=")
