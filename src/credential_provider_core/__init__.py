"""Shared contract for credential providers.

This module provides the provider protocol, the request and credential types
it exchanges with the host, the error taxonomy and the provider registry.
"""

from .base import Provider
from .exceptions import (
    ConfigDecodeError,
    ConfigurationError,
    CredentialProviderError,
    UnknownProviderTypeError,
)
from .registry import create_provider, list_provider_types, register_provider
from .types import Credential, CredentialRequest, Metadata, ProviderType, Resource

__all__ = [
    "ConfigDecodeError",
    "ConfigurationError",
    "Credential",
    "CredentialProviderError",
    "CredentialRequest",
    "Metadata",
    "Provider",
    "ProviderType",
    "Resource",
    "UnknownProviderTypeError",
    "create_provider",
    "list_provider_types",
    "register_provider",
]
