"""Models for Docker registry credentials."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .codec import encode_auth

__all__ = [
    "DockerConfig",
    "DockerConfigEntry",
    "RegistryCredentials",
]


@dataclass
class RegistryCredentials:
    """Holds the credentials for one Docker registry."""

    address: str
    """Canonical registry host, without scheme or path."""

    username: str
    """Authentication username. May be empty."""

    password: str
    """Authentication password. May be empty."""

    @property
    def authorization(self) -> str:
        """Authentication string for ``Authorization`` header."""
        return f"Basic {self.credentials}"

    @property
    def credentials(self) -> str:
        """Credentials in encoded form suitable for ``Authorization``."""
        return encode_auth(self.username, self.password)


class DockerConfigEntry(BaseModel):
    """Credentials for one registry in a Docker credential store.

    Only the ``auth`` field is used. Other fields sometimes found in the
    wild, such as ``username``, ``password``, or ``email``, are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    auth: str = Field(
        "",
        title="Encoded credentials",
        description="Standard base64 encoding of ``username:password``",
        examples=["dXNlcjpwYXNz"],
    )

    @field_validator("auth", mode="before")
    @classmethod
    def _validate_auth(cls, v: object) -> object:
        # A null token is the same as an empty one.
        return "" if v is None else v


class DockerConfig(BaseModel):
    """Docker credential store.

    This is the format of :file:`~/.docker/config.json` and of the
    ``.dockerconfigjson`` key of a Kubernetes pull secret. Only the
    ``auths`` key is used.
    """

    model_config = ConfigDict(extra="ignore")

    auths: dict[str, DockerConfigEntry] = Field(
        {},
        title="Credentials by registry",
        description=(
            "Mapping of registry keys, usually hostnames or URLs, to the"
            " credentials for that registry"
        ),
    )

    @field_validator("auths", mode="before")
    @classmethod
    def _validate_auths(cls, v: object) -> object:
        # A null mapping or a null entry is the same as an empty one.
        if v is None:
            return {}
        if isinstance(v, dict):
            return {k: {} if e is None else e for k, e in v.items()}
        return v
