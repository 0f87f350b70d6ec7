"""Command-line interface for dockerauth."""

import functools
import json
from collections.abc import Callable
from pathlib import Path
from typing import IO

import click
from pydantic import TypeAdapter, ValidationError
from safir.click import display_help

from .codec import encode_header, normalize_host
from .config import Config
from .constants import CONFIG_FILE_ENV_VAR, ENV_PREFIX, REDACTED
from .exceptions import DockerAuthError
from .models import RegistryCredentials
from .store import marshal, parse_file

__all__ = ["main"]

_CREDENTIALS_ADAPTER = TypeAdapter(list[RegistryCredentials])


def _common[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Add common Click options and error reporting to a command."""

    @click.option(
        "--debug",
        "-d",
        is_flag=True,
        help="Enable debug logging",
    )
    @click.option(
        "--config-file",
        "-c",
        help="Application configuration file",
        type=click.Path(path_type=Path),
        envvar=CONFIG_FILE_ENV_VAR,
        default=None,
    )
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except DockerAuthError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def _load_config(*, config_file: Path | None, debug: bool) -> Config:
    """Load the configuration, overriding it with CLI options."""
    config = Config.from_file(config_file) if config_file else Config()
    if debug:
        config.debug = debug
    config.configure_logging()
    return config


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(
    package_name="docker-registry-auth", message="%(version)s"
)
def main() -> None:
    """Docker registry credential command-line interface."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.argument("subtopic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None, subtopic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic, subtopic)


@main.command()
@click.argument("path", type=click.Path(path_type=Path), required=False)
@click.option(
    "--show-passwords",
    is_flag=True,
    help="Show passwords instead of redacting them",
)
@_common
def decode(
    *,
    path: Path | None,
    show_passwords: bool,
    config_file: Path | None,
    debug: bool,
) -> None:
    """Print the credentials in a Docker credential store."""
    config = _load_config(config_file=config_file, debug=debug)
    credentials = parse_file(path or config.credentials_path)
    output = []
    for entry in sorted(credentials, key=lambda c: c.address):
        password = entry.password
        if password and not show_passwords:
            password = REDACTED
        output.append(
            {
                "address": entry.address,
                "username": entry.username,
                "password": password,
            }
        )
    click.echo(json.dumps(output, indent=2))


@main.command()
@click.argument("source", type=click.File("r"), default="-")
@_common
def encode(*, source: IO[str], config_file: Path | None, debug: bool) -> None:
    """Build a Docker credential store from a JSON list of credentials.

    Each element of the list must have address, username, and password
    keys.
    """
    _load_config(config_file=config_file, debug=debug)
    try:
        credentials = _CREDENTIALS_ADAPTER.validate_json(source.read())
    except ValidationError as e:
        raise click.ClickException(f"Invalid credentials: {e}") from e
    click.echo(marshal(credentials).decode())


@main.command()
@click.option("--username", "-u", default="", help="Registry username")
@click.option(
    "--password",
    "-p",
    default="",
    envvar=f"{ENV_PREFIX}PASSWORD",
    help="Registry password",
)
@_common
def header(
    *, username: str, password: str, config_file: Path | None, debug: bool
) -> None:
    """Print the value of a registry authentication header."""
    _load_config(config_file=config_file, debug=debug)
    click.echo(encode_header(username, password))


@main.command()
@click.argument("key")
@_common
def normalize(*, key: str, config_file: Path | None, debug: bool) -> None:
    """Print the registry host named by a credential store key."""
    _load_config(config_file=config_file, debug=debug)
    click.echo(normalize_host(key))
