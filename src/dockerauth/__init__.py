"""Codec for Docker registry credential stores."""

from importlib.metadata import PackageNotFoundError, version

from .codec import (
    decode_auth,
    encode_auth,
    encode_header,
    normalize_host,
    try_decode_auth,
)
from .exceptions import (
    DockerAuthError,
    MalformedConfigError,
    SerializationError,
    SourceUnavailableError,
)
from .models import DockerConfig, DockerConfigEntry, RegistryCredentials
from .store import find_credentials, marshal, parse, parse_file, parse_string

__all__ = [
    "DockerAuthError",
    "DockerConfig",
    "DockerConfigEntry",
    "MalformedConfigError",
    "RegistryCredentials",
    "SerializationError",
    "SourceUnavailableError",
    "__version__",
    "decode_auth",
    "encode_auth",
    "encode_header",
    "find_credentials",
    "marshal",
    "normalize_host",
    "parse",
    "parse_file",
    "parse_string",
    "try_decode_auth",
]


__version__: str
"""The application version string (PEP 440 / SemVer compatible)."""

try:
    __version__ = version("docker-registry-auth")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"
