"""Encoding and decoding of Docker registry credential strings.

Two encodings are in common use. The ``auth`` field of a Docker credential
store holds ``username:password`` in standard base64. The
``X-Registry-Auth`` header used by the Docker Engine API instead carries a
JSON object with optional ``username`` and ``password`` keys, encoded with
URL-safe base64.
"""

from __future__ import annotations

import base64
import re
from urllib.parse import urlsplit

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError
from structlog.stdlib import get_logger

from .constants import ROOT_LOGGER

__all__ = [
    "decode_auth",
    "encode_auth",
    "encode_header",
    "normalize_host",
    "try_decode_auth",
]

_CONTROL_REGEX = re.compile(r"[\x00-\x1f\x7f]")
"""Characters that are never valid anywhere in a URL."""


class _HeaderCredentials(BaseModel):
    """Body of the registry authentication header before encoding."""

    username: str = ""
    password: str = ""


def encode_auth(username: str, password: str) -> str:
    """Encode a username and password as a credential store ``auth`` token.

    Parameters
    ----------
    username
        Authentication username. May be empty.
    password
        Authentication password. May be empty.

    Returns
    -------
    str
        Standard base64 encoding of ``username:password``.

    Raises
    ------
    UnicodeEncodeError
        Raised if either string cannot be encoded as UTF-8.
    """
    auth_data = f"{username}:{password}".encode()
    return base64.b64encode(auth_data).decode()


def decode_auth(token: str) -> tuple[str, str]:
    """Split a credential store ``auth`` token into username and password.

    Only the first colon separates the username from the password, so the
    password may itself contain colons. A decoded token with no colon is
    taken to be a bare username.

    Parameters
    ----------
    token
        Base64-encoded ``username:password`` string.

    Returns
    -------
    tuple of str, str
        The username and password. Both are empty strings if the token is
        not valid base64 or does not decode to UTF-8 text.
    """
    return try_decode_auth(token) or ("", "")


def try_decode_auth(token: str) -> tuple[str, str] | None:
    """Split a credential store ``auth`` token, reporting invalid tokens.

    This is the same as `decode_auth` except that a token that is not valid
    base64 or does not decode to UTF-8 text returns `None`, so that it can
    be told apart from a valid token for empty credentials.
    """
    # Line breaks are permitted inside base64 data but are not part of it.
    token = token.replace("\r", "").replace("\n", "")

    # binascii.Error and UnicodeDecodeError are both ValueError subclasses,
    # as is the error for a token with non-ASCII characters.
    try:
        decoded = base64.b64decode(token, validate=True).decode()
    except ValueError:
        return None
    username, _, password = decoded.partition(":")
    return username, password


def normalize_host(key: str) -> str:
    """Reduce a credential store key to the registry host it names.

    Keys are often URLs such as ``https://index.docker.io/v1/``. If the key
    parses as a URL with a network location, the host (including any port,
    excluding any user information) is returned. Otherwise the key is
    returned unchanged. Keys with control characters or leading
    whitespace, and hosts containing whitespace, are not valid URLs.

    Parameters
    ----------
    key
        Key from the ``auths`` mapping of a credential store.

    Returns
    -------
    str
        Canonical host for that key.
    """
    if _CONTROL_REGEX.search(key) or key[:1].isspace():
        return key
    try:
        url = urlsplit(key)
        # Reading the port rejects URLs with a malformed port.
        _ = url.port
    except ValueError:
        return key
    host = url.netloc.rpartition("@")[2]
    if any(c.isspace() for c in host):
        return key
    return host or key


def encode_header(username: str, password: str) -> str:
    """Encode credentials for the registry authentication header.

    Empty fields are omitted from the encoded JSON object. This function
    never raises. Ordinary strings always serialize, so the only failure is
    a string that is not valid Unicode (for example, one containing a lone
    surrogate); that is logged and an empty string is returned.

    Parameters
    ----------
    username
        Authentication username. Omitted if empty.
    password
        Authentication password. Omitted if empty.

    Returns
    -------
    str
        URL-safe base64 encoding of the JSON credentials object.
    """
    try:
        data = _HeaderCredentials(username=username, password=password)
        body = data.model_dump_json(exclude_defaults=True).encode()
    except (PydanticSerializationError, UnicodeError, ValidationError):
        logger = get_logger(ROOT_LOGGER)
        logger.exception("Unable to serialize credentials for header")
        return ""
    return base64.urlsafe_b64encode(body).decode()
