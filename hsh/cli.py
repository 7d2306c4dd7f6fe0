# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
import logging
import logging.config
from typing import Optional

import typer

from hsh._logging import LogLevel, get_log_level, get_logging_config
from hsh._version import __version__
from hsh.codec import decode
from hsh.config import SettingsManager
from hsh.errors import DerivationError, ParseError, VerificationError
from hsh.models import HashAlgorithm, HashBuilder

APP_NAME = "hsh"
APP_HELP = "Hash and verify passwords with Argon2i, bcrypt or scrypt"

DEFAULT_SETTINGS = SettingsManager.get_settings()

LOG = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_short=True,
)


def _fail(message: str, code: int = 2) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=code)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Shortcut for --log-level DEBUG",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Password hashing command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    if debug:
        log_level = LogLevel.DEBUG
    logging.config.dictConfig(get_logging_config(log_level.value))
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("hash")
def hash_password(
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to hash (prompted if omitted)",
        show_default=False,
    ),
    algorithm: HashAlgorithm = typer.Option(
        default=HashAlgorithm.default(DEFAULT_SETTINGS),
        help="The hash algorithm",
        case_sensitive=False,
    ),
    salt: Optional[str] = typer.Option(
        default=None,
        help="The salt as hex (random if omitted)",
        show_default=False,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the record as JSON instead of the encoded string",
    ),
) -> None:
    """Hash a password and print the encoded record."""
    builder = HashBuilder(algorithm, settings=SettingsManager.get_settings())
    builder.with_password(password)
    if salt is not None:
        try:
            builder.with_salt(bytes.fromhex(salt))
        except ValueError as error:
            raise typer.BadParameter(
                "salt must be hex encoded", param_hint="--salt"
            ) from error
    try:
        record = builder.build()
    except DerivationError as error:
        raise _fail(str(error)) from error
    LOG.debug("Hashed a password with %s", record.algorithm)
    typer.echo(record.to_json() if as_json else str(record))


@app.command()
def verify(
    encoded: str = typer.Argument(..., help="The encoded record"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to check (prompted if omitted)",
        show_default=False,
    ),
) -> None:
    """Check a password against an encoded record (exit code 1 on mismatch)."""
    try:
        record = decode(
            encoded.strip(), settings=SettingsManager.get_settings()
        )
        matches = record.verify(password)
    except (ParseError, VerificationError) as error:
        raise _fail(str(error)) from error
    if not matches:
        typer.echo("Password does not match")
        raise typer.Exit(code=1)
    typer.echo("Password matches")


@app.command("inspect")
def inspect_hash(
    encoded: str = typer.Argument(..., help="The encoded record"),
) -> None:
    """Show the algorithm and field sizes of an encoded record."""
    try:
        record = decode(
            encoded.strip(), settings=SettingsManager.get_settings()
        )
    except ParseError as error:
        raise _fail(str(error)) from error
    typer.echo(f"algorithm: {record.algorithm}")
    typer.echo(f"salt: {len(record.salt)} bytes")
    typer.echo(f"digest: {record.digest_length} bytes")


if __name__ == "__main__":
    app()
