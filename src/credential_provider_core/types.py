"""Data types exchanged between the host and credential providers.

This module defines the request, credential, metadata and resource records
that every provider consumes or produces, plus the provider type tag the
host dispatches on.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .exceptions import ConfigDecodeError


class ProviderType(str, Enum):
    """Kinds of secret sources known to the host."""

    RANDOM = "random"
    AWS = "aws"
    GITHUB = "github"
    ARTIFACTORY = "artifactory"


@dataclass
class CredentialRequest:
    """A request for credentials routed to a provider by the host.

    The ``config`` payload is opaque to the host: either a JSON document
    (``str`` or ``bytes``), an already parsed mapping, or ``None``.
    """

    type: ProviderType
    name: str
    config: str | bytes | Mapping[str, Any] | None = None

    def decode_config(self) -> dict[str, Any]:
        """Decode the config payload into a mapping.

        Returns:
            The decoded payload. An absent or empty payload decodes to an
            empty mapping.

        Raises:
            ConfigDecodeError: If the payload is not a JSON object.
        """
        payload = self.config
        if payload is None:
            return {}
        if isinstance(payload, Mapping):
            return dict(payload)
        if isinstance(payload, bytes | bytearray):
            try:
                payload = bytes(payload).decode("utf-8")
            except UnicodeDecodeError as e:
                raise ConfigDecodeError(  # noqa: TRY003
                    f"Config for '{self.name}' is not valid UTF-8"
                ) from e
        if not isinstance(payload, str):
            raise ConfigDecodeError(  # noqa: TRY003
                f"Config for '{self.name}' has unsupported type: {type(payload).__name__}"
            )
        if not payload.strip():
            return {}
        try:
            decoded = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ConfigDecodeError(  # noqa: TRY003
                f"Config for '{self.name}' is not valid JSON: {e.msg}"
            ) from e
        if not isinstance(decoded, dict):
            raise ConfigDecodeError(  # noqa: TRY003
                f"Config for '{self.name}' must be a JSON object"
            )
        return decoded


@dataclass
class Credential:
    """An issued secret returned to the host."""

    name: str
    value: str
    description: str
    expiration: datetime

    def to_dict(self) -> dict[str, str]:
        """Render the credential as a plain mapping for the host."""
        return {
            "name": self.name,
            "value": self.value,
            "description": self.description,
            "expiration": self.expiration.isoformat(),
        }


@dataclass
class Metadata:
    """Provider-specific bookkeeping the host keeps to call ``destroy`` later."""

    data: dict[str, str] = field(default_factory=dict)


@dataclass
class Resource:
    """A host-side record of something a provider created."""

    type: ProviderType
    id: str
    expiration: datetime | None = None
    deposed: bool = False
    config: str | bytes | Mapping[str, Any] | None = None
    metadata: Metadata | None = None
