"""Command line interface for signing and verifying detached JWS tokens."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from detached_jws import DetachedJwsHandler, load_config
from detached_jws.exceptions import (
    MalformedTokenError,
    SerializationError,
    UnsupportedAlgorithmError,
)

app = typer.Typer(help="Create and verify HS256 detached JSON Web Signatures")

EXIT_INVALID = 1
EXIT_USAGE = 2

KeyOption = typer.Option(
    None,
    "--key",
    "-k",
    help="Shared secret. Defaults to DETACHED_JWS_SECRET_KEY or the config file.",
)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML configuration file"
    ),
) -> None:
    """Detached JWS CLI entry point."""
    settings = load_config(str(config) if config else None)
    logging.basicConfig(level=settings.log_level.upper())
    ctx.obj = settings


def _handler(ctx: typer.Context, key: Optional[str]) -> DetachedJwsHandler:
    if key is not None:
        return DetachedJwsHandler(key)
    try:
        return DetachedJwsHandler.from_config(ctx.obj)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE)


def _read_payload(payload_file: str) -> Any:
    try:
        if payload_file == "-":
            text = sys.stdin.read()
        else:
            text = Path(payload_file).read_text(encoding="utf-8")
        return json.loads(text)
    except (OSError, ValueError) as e:
        typer.secho(f"Cannot read payload: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE)


@app.command("sign")
def sign(
    ctx: typer.Context,
    payload_file: str = typer.Argument(..., help="JSON payload file, '-' for stdin"),
    key: Optional[str] = KeyOption,
) -> None:
    """
    Sign a JSON payload and print the detached JWS.

    Example:
        detached-jws sign payload.json --key YourSecretKey
    """
    handler = _handler(ctx, key)
    payload = _read_payload(payload_file)
    try:
        typer.echo(handler.create_detached_jws(payload))
    except SerializationError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE)


@app.command("verify")
def verify(
    ctx: typer.Context,
    payload_file: str = typer.Argument(..., help="JSON payload file, '-' for stdin"),
    token: str = typer.Argument(..., help="Detached JWS to check"),
    key: Optional[str] = KeyOption,
) -> None:
    """
    Verify a detached JWS against a JSON payload.

    Prints ``valid`` and exits with 0 when the signature matches, prints
    ``invalid`` and exits with 1 when it does not. Malformed tokens and
    unsupported algorithms exit with 2.

    Example:
        detached-jws verify payload.json eyJhbGciOiJIUzI1NiJ9..<signature>
    """
    handler = _handler(ctx, key)
    payload = _read_payload(payload_file)
    try:
        is_valid = handler.verify_detached_jws(payload, token)
    except (MalformedTokenError, UnsupportedAlgorithmError, SerializationError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE)

    if not is_valid:
        typer.echo("invalid")
        raise typer.Exit(code=EXIT_INVALID)
    typer.echo("valid")


@app.command("example")
def example(
    key: str = typer.Option("YourSecretKey", "--key", "-k", help="Shared secret"),
) -> None:
    """Sign a sample payload and verify it again."""
    payload = {"Key": "value"}
    handler = DetachedJwsHandler(key)

    detached_signature = handler.create_detached_jws(payload)
    typer.echo(detached_signature)

    is_valid = handler.verify_detached_jws(payload, detached_signature)
    typer.echo(f"Signature is valid: {is_valid}")


if __name__ == "__main__":  # pragma: no cover
    app()
