"""Exceptions for dockerauth."""

from safir.slack.blockkit import SlackException

__all__ = [
    "DockerAuthError",
    "MalformedConfigError",
    "SerializationError",
    "SourceUnavailableError",
]


class DockerAuthError(SlackException):
    """Base class for errors reported by the credential codec."""


class SourceUnavailableError(DockerAuthError):
    """The source of a credential store could not be opened or read."""


class MalformedConfigError(DockerAuthError):
    """A credential store is not a valid Docker configuration document.

    The underlying parse failure is available as ``__cause__``.
    """


class SerializationError(DockerAuthError):
    """Credentials could not be serialized to a Docker configuration."""
