"""Random provider factory functions.

This module builds random providers from explicit arguments, falling back to
environment settings and then to defaults.
"""

import time
from datetime import timedelta

from credential_provider_core.exceptions import ConfigurationError

from .config import load_settings
from .provider import Option, RandomProvider, with_alphabet, with_rotation_interval


def create_random_provider(
    seed: int | None = None,
    rotation_interval: timedelta | float | None = None,
    alphabet: str | None = None,
) -> RandomProvider:
    """Create a random provider instance.

    Args:
        seed: Seed for the random source.
              If None, uses RANDOM_PROVIDER_SEED env var or the current time.
        rotation_interval: Rotation interval as a timedelta or seconds.
                           If None, uses RANDOM_PROVIDER_ROTATION_INTERVAL env var or 7 days.
        alphabet: Characters eligible for generation.
                  If None, uses RANDOM_PROVIDER_ALPHABET env var or the default alphabet.

    Returns:
        Configured random provider instance.

    Raises:
        ConfigurationError: If an environment setting cannot be parsed or a
            resolved value is invalid.
    """
    try:
        settings = load_settings()
    except ValueError as e:
        raise ConfigurationError(  # noqa: TRY003
            f"Bad random provider settings: {e}", component="random"
        ) from e

    if seed is None:
        seed = settings.seed if settings.seed is not None else time.time_ns()
    if rotation_interval is None:
        rotation_interval = settings.rotation_interval
    if alphabet is None:
        alphabet = settings.alphabet

    options: list[Option] = []
    if rotation_interval is not None:
        options.append(with_rotation_interval(rotation_interval))
    if alphabet is not None:
        options.append(with_alphabet(alphabet))

    return RandomProvider(seed, *options)
