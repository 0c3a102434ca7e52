"""Sign a payload with a shared secret and verify the detached JWS."""

from pydantic import BaseModel

from detached_jws import DetachedJwsHandler


class SamplePayload(BaseModel):
    Key: str


def main() -> None:
    payload = SamplePayload(Key="value")
    handler = DetachedJwsHandler("YourSecretKey")

    # Create detached JWS
    detached_signature = handler.create_detached_jws(payload)
    print(detached_signature)

    # Verify detached JWS
    is_signature_valid = handler.verify_detached_jws(payload, detached_signature)
    print(f"Signature is valid: {is_signature_valid}")


if __name__ == "__main__":
    main()
