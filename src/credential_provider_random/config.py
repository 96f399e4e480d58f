"""Request and environment configuration for the random provider.

This module decodes the per-request config payload into a typed
``RequestConfig`` and defines the environment settings used when the
provider is built through its factory.

Environment Variables:
    RANDOM_PROVIDER_SEED: Seed for the random source. Default: current time in nanoseconds
    RANDOM_PROVIDER_ROTATION_INTERVAL: Rotation interval in seconds. Default: 604800 (7 days)
    RANDOM_PROVIDER_ALPHABET: Characters eligible for generation. Default: letters, digits and "!@#$%&*"
"""

from dataclasses import dataclass
from typing import NoReturn

import environ
import structlog

from credential_provider_core.exceptions import ConfigDecodeError
from credential_provider_core.types import CredentialRequest

logger = structlog.get_logger(__name__)


def _raise_length_error(request: CredentialRequest, reason: str) -> NoReturn:
    logger.warning(
        "REQUEST_CONFIG_DECODE_FAILED", credential_name=request.name, reason=reason
    )
    raise ConfigDecodeError(  # noqa: TRY003
        f"Bad config for '{request.name}': {reason}", field="length"
    )


@dataclass(frozen=True)
class RequestConfig:
    """Configuration format for random credential requests.

    Example request:

        - type: random
          name: example-random-credential
          config:
            length: 10
    """

    length: int

    @classmethod
    def from_request(cls, request: CredentialRequest) -> "RequestConfig":
        """Decode the request's config payload.

        Raises:
            ConfigDecodeError: If the payload is malformed or ``length`` is
                missing, not an integer, or negative.
        """
        try:
            data = request.decode_config()
        except ConfigDecodeError as e:
            logger.warning(
                "REQUEST_CONFIG_DECODE_FAILED",
                credential_name=request.name,
                reason=e.message,
            )
            raise

        if "length" not in data:
            _raise_length_error(request, "missing required field 'length'")
        length = data["length"]
        # bool is an int subclass
        if isinstance(length, bool) or not isinstance(length, int):
            _raise_length_error(
                request, f"'length' must be an integer, got {type(length).__name__}"
            )
        if length < 0:
            _raise_length_error(request, f"'length' must be non-negative, got {length}")
        return cls(length=length)


def _optional_int(value: str | int | None) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def _optional_str(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    return value


@environ.config(prefix="RANDOM_PROVIDER")
class RandomProviderSettings:
    """Environment settings for the random provider."""

    seed: int | None = environ.var(
        default=None,
        converter=_optional_int,
        help="Seed for the random source (defaults to the current time)",
    )
    rotation_interval: int | None = environ.var(
        default=None,
        converter=_optional_int,
        help="Rotation interval in seconds",
    )
    alphabet: str | None = environ.var(
        default=None,
        converter=_optional_str,
        help="Characters eligible for generation",
    )


def load_settings() -> RandomProviderSettings:
    """Load random provider settings from environment variables."""
    return environ.to_config(RandomProviderSettings)
