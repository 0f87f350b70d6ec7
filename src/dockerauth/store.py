"""Read and write the Docker credential store format.

The credential store is the JSON document found in
:file:`~/.docker/config.json` and in the ``.dockerconfigjson`` key of
Kubernetes pull secrets. Reading it produces a list of
`~dockerauth.models.RegistryCredentials`, one per key in ``auths``. The
order of that list carries no meaning.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from structlog.stdlib import get_logger

from .codec import encode_auth, normalize_host, try_decode_auth
from .constants import ROOT_LOGGER
from .exceptions import (
    MalformedConfigError,
    SerializationError,
    SourceUnavailableError,
)
from .models import DockerConfig, DockerConfigEntry, RegistryCredentials

__all__ = [
    "find_credentials",
    "marshal",
    "parse",
    "parse_file",
    "parse_string",
]


def parse(source: IO[bytes] | IO[str]) -> list[RegistryCredentials]:
    """Parse registry credentials from a Docker credential store.

    Entries whose ``auth`` token cannot be decoded produce credentials with
    an empty username and password rather than an error, so that one bad
    entry does not make the rest of the store unusable.

    Parameters
    ----------
    source
        Open file or stream containing the credential store as JSON.

    Returns
    -------
    list of RegistryCredentials
        One set of credentials per entry in the store, in no particular
        order. Empty if the store has no entries.

    Raises
    ------
    MalformedConfigError
        Raised if the data is not a JSON object of the expected shape or
        a text source does not contain valid UTF-8.
    SourceUnavailableError
        Raised if reading from the source fails.
    """
    logger = get_logger(ROOT_LOGGER)
    try:
        data = source.read()
    except UnicodeDecodeError as e:
        msg = f"Invalid Docker credential store: {e}"
        raise MalformedConfigError(msg) from e
    except OSError as e:
        raise SourceUnavailableError(f"Cannot read credentials: {e}") from e
    try:
        config = DockerConfig.model_validate_json(data)
    except ValidationError as e:
        msg = f"Invalid Docker credential store: {e}"
        raise MalformedConfigError(msg) from e

    credentials = []
    for key, entry in config.auths.items():
        decoded = try_decode_auth(entry.auth)
        if decoded is None:
            logger.warning("Unusable registry credentials", registry=key)
            decoded = ("", "")
        username, password = decoded
        credentials.append(
            RegistryCredentials(
                address=normalize_host(key),
                username=username,
                password=password,
            )
        )
    logger.debug("Parsed registry credentials", count=len(credentials))
    return credentials


def parse_file(path: Path | str) -> list[RegistryCredentials]:
    """Parse registry credentials from a Docker credential store file.

    Parameters
    ----------
    path
        Path to the credential store.

    Returns
    -------
    list of RegistryCredentials
        One set of credentials per entry in the store, in no particular
        order.

    Raises
    ------
    MalformedConfigError
        Raised if the file is not a JSON object of the expected shape.
    SourceUnavailableError
        Raised if the file cannot be opened or read.
    """
    path = Path(path)
    logger = get_logger(ROOT_LOGGER)
    logger.debug("Reading registry credentials", path=str(path))
    try:
        f = path.open("rb")
    except OSError as e:
        msg = f"Cannot open credentials file {path}: {e}"
        raise SourceUnavailableError(msg) from e
    with f:
        return parse(f)


def parse_string(data: str) -> list[RegistryCredentials]:
    """Parse registry credentials from a Docker credential store string."""
    return parse(io.StringIO(data))


def marshal(credentials: list[RegistryCredentials]) -> bytes:
    """Serialize registry credentials as a Docker credential store.

    Each address is used verbatim as a key. If more than one set of
    credentials has the same address, the last one wins. Keys are sorted so
    that the output is stable.

    Parameters
    ----------
    credentials
        Credentials to serialize.

    Returns
    -------
    bytes
        JSON encoding of the credential store.

    Raises
    ------
    SerializationError
        Raised if some string in the credentials is not valid Unicode.
    """
    try:
        auths: dict[str, DockerConfigEntry] = {}
        for entry in credentials:
            auth = encode_auth(entry.username, entry.password)
            auths[entry.address] = DockerConfigEntry(auth=auth)
        config = DockerConfig(auths=dict(sorted(auths.items())))
        return config.model_dump_json().encode()
    except (PydanticSerializationError, UnicodeError, ValidationError) as e:
        msg = f"Cannot serialize registry credentials: {e}"
        raise SerializationError(msg) from e


def find_credentials(
    credentials: list[RegistryCredentials], host: str
) -> RegistryCredentials | None:
    """Find the credentials to use for a given registry host.

    These may be domain credentials, so if there is no exact match, return
    the credentials for any parent domain found.

    Parameters
    ----------
    credentials
        Credentials as returned by `parse` or one of its variants.
    host
        Host to which to authenticate.

    Returns
    -------
    RegistryCredentials or None
        The corresponding credentials or `None` if there are no credentials
        for that host.
    """
    for entry in credentials:
        if entry.address == host:
            return entry
    for entry in credentials:
        if host.endswith(f".{entry.address}"):
            return entry
    return None
