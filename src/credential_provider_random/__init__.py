"""Random string credential provider.

Importing this package registers the provider factory under
``ProviderType.RANDOM`` in the provider registry.
"""

from credential_provider_core.registry import register_provider
from credential_provider_core.types import ProviderType

from .config import RandomProviderSettings, RequestConfig, load_settings
from .factory import create_random_provider
from .generator import DEFAULT_ALPHABET, generate
from .provider import (
    DEFAULT_ROTATION_INTERVAL,
    DESCRIPTION,
    MAX_ROTATION_INTERVAL,
    RandomProvider,
    new,
    with_alphabet,
    with_rotation_interval,
)

register_provider(ProviderType.RANDOM, create_random_provider)

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_ROTATION_INTERVAL",
    "DESCRIPTION",
    "MAX_ROTATION_INTERVAL",
    "RandomProvider",
    "RandomProviderSettings",
    "RequestConfig",
    "create_random_provider",
    "generate",
    "load_settings",
    "new",
    "with_alphabet",
    "with_rotation_interval",
]
