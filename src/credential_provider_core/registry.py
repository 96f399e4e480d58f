"""Provider registry and factory lookup.

This module manages the registry of available provider factories and creates
provider instances by type.
"""

from collections.abc import Callable

import structlog

from .base import Provider
from .exceptions import UnknownProviderTypeError
from .types import ProviderType

logger = structlog.get_logger(__name__)

# Provider factory registry
_PROVIDERS: dict[ProviderType, Callable[..., Provider]] = {}


def _resolve_type(provider_type: ProviderType | str) -> ProviderType:
    try:
        return ProviderType(provider_type)
    except ValueError as e:
        raise UnknownProviderTypeError(str(provider_type)) from e


def register_provider(
    provider_type: ProviderType | str, factory: Callable[..., Provider]
) -> None:
    """Register a factory that builds providers of the given type."""
    resolved = _resolve_type(provider_type)
    _PROVIDERS[resolved] = factory
    logger.debug("PROVIDER_REGISTERED", provider_type=resolved.value)


def create_provider(provider_type: ProviderType | str, **kwargs: object) -> Provider:
    """Create a provider of the given type.

    Args:
        provider_type: The provider type, as an enum member or its value.
        **kwargs: Arguments forwarded to the registered factory.

    Returns:
        A configured provider instance.

    Raises:
        UnknownProviderTypeError: If no factory is registered for the type.
    """
    resolved = _resolve_type(provider_type)
    if resolved not in _PROVIDERS:
        raise UnknownProviderTypeError(resolved.value)
    return _PROVIDERS[resolved](**kwargs)


def list_provider_types() -> list[ProviderType]:
    """List all provider types with a registered factory."""
    return list(_PROVIDERS.keys())
