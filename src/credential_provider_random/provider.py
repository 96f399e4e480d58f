"""Random string credential provider.

This module provides the RandomProvider class, which issues credentials
holding a randomly generated string of a caller-specified length.
"""

import random
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import structlog

from credential_provider_core.exceptions import ConfigurationError
from credential_provider_core.types import (
    Credential,
    CredentialRequest,
    Metadata,
    ProviderType,
    Resource,
)

from .config import RequestConfig
from .generator import DEFAULT_ALPHABET, generate

logger = structlog.get_logger(__name__)

DEFAULT_ROTATION_INTERVAL = timedelta(days=7)
# Keeps now + interval within the datetime range.
MAX_ROTATION_INTERVAL = timedelta(days=365 * 100)
DESCRIPTION = "Random generated secret managed by the credential provider."


@dataclass
class ProviderOptions:
    """Settings collected by options before the provider is built."""

    alphabet: str = DEFAULT_ALPHABET
    rotation_interval: timedelta = DEFAULT_ROTATION_INTERVAL


Option = Callable[[ProviderOptions], None]


def with_rotation_interval(duration: timedelta | float) -> Option:
    """Set the interval after which generated strings should be rotated.

    Args:
        duration: A timedelta or a number of seconds. Must be positive and
            no longer than MAX_ROTATION_INTERVAL.

    Raises:
        ConfigurationError: If the duration is not a finite, positive
            interval within MAX_ROTATION_INTERVAL.
    """
    try:
        interval = (
            duration
            if isinstance(duration, timedelta)
            else timedelta(seconds=duration)
        )
    except (OverflowError, ValueError) as e:
        raise ConfigurationError(  # noqa: TRY003
            f"Rotation interval is out of range: {duration}", component="random"
        ) from e
    if interval <= timedelta(0):
        raise ConfigurationError(  # noqa: TRY003
            f"Rotation interval must be positive, got {interval}",
            component="random",
        )
    if interval > MAX_ROTATION_INTERVAL:
        raise ConfigurationError(  # noqa: TRY003
            f"Rotation interval must not exceed {MAX_ROTATION_INTERVAL}, got {interval}",
            component="random",
        )

    def apply(options: ProviderOptions) -> None:
        options.rotation_interval = interval

    return apply


def with_alphabet(chars: str) -> Option:
    """Set the characters eligible for generation."""
    if not chars:
        raise ConfigurationError("Alphabet must not be empty", component="random")

    def apply(options: ProviderOptions) -> None:
        options.alphabet = chars

    return apply


class RandomProvider:
    """Credential provider that issues random strings.

    The random source is owned by the instance and seeded at construction, so
    two providers built with the same seed and given the same sequence of
    requests produce the same values. Generation is guarded by a lock, so a
    single instance may be shared between threads.
    """

    def __init__(self, seed: int, *options: Option) -> None:
        """Initialize the random provider.

        Args:
            seed: Seed for the instance's random source.
            *options: Options applied in order after the defaults.
        """
        settings = ProviderOptions()
        for option in options:
            option(settings)
        self._alphabet = settings.alphabet
        self._rotation_interval = settings.rotation_interval
        self._generator = random.Random(seed)  # noqa: S311
        self._lock = threading.Lock()
        logger.debug(
            "RANDOM_PROVIDER_CREATED",
            alphabet_size=len(self._alphabet),
            rotation_interval_seconds=self._rotation_interval.total_seconds(),
        )

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def rotation_interval(self) -> timedelta:
        return self._rotation_interval

    def type(self) -> ProviderType:
        """Return the random provider type."""
        return ProviderType.RANDOM

    def create(
        self, request: CredentialRequest
    ) -> tuple[list[Credential], Metadata | None]:
        """Create a random string credential.

        Args:
            request: Request whose config holds the ``length`` to generate.

        Returns:
            A single credential and no metadata.

        Raises:
            ConfigDecodeError: If the request config cannot be decoded.
        """
        config = RequestConfig.from_request(request)

        with self._lock:
            value = generate(self._generator, self._alphabet, config.length)

        expiration = datetime.now(UTC) + self._rotation_interval
        logger.info(
            "RANDOM_CREDENTIAL_CREATED",
            credential_name=request.name,
            length=config.length,
            expiration=expiration.isoformat(),
        )
        return [
            Credential(
                name=request.name,
                value=value,
                description=DESCRIPTION,
                expiration=expiration,
            )
        ], None

    def destroy(self, resource: Resource | None) -> None:
        """Do nothing; a random string has no external counterpart to revoke."""
        logger.debug(
            "RANDOM_PROVIDER_DESTROY_NOOP",
            resource_id=resource.id if resource is not None else None,
        )


def new(seed: int, *options: Option) -> RandomProvider:
    """Return a new random provider seeded with ``seed``."""
    return RandomProvider(seed, *options)
