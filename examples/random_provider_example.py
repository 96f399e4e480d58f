#!/usr/bin/env python3
"""Random credential provider usage example.

This example demonstrates building a random provider directly and through the
provider registry, issuing a credential and handling a bad request.
"""
# ruff: noqa: T201

from datetime import timedelta

import credential_provider_random
from credential_provider_core import (
    ConfigDecodeError,
    CredentialRequest,
    ProviderType,
    create_provider,
)


def direct_usage_example() -> None:
    """Build a provider with options and issue a credential."""
    provider = credential_provider_random.new(
        1, credential_provider_random.with_rotation_interval(timedelta(hours=168))
    )
    request = CredentialRequest(
        type=ProviderType.RANDOM,
        name="example-random-credential",
        config='{"length": 10}',
    )
    credentials, _ = provider.create(request)
    for credential in credentials:
        print(credential.name, credential.expiration.isoformat())

    # Missing length is a decode error
    try:
        provider.create(
            CredentialRequest(type=ProviderType.RANDOM, name="broken", config="{}")
        )
    except ConfigDecodeError as e:
        print(f"Error: {e.message}")

    # Nothing to release for random values
    provider.destroy(None)


def registry_usage_example() -> None:
    """Build a provider through the registry, as a host would."""
    provider = create_provider("random", seed=42)
    credentials, metadata = provider.create(
        CredentialRequest(type=provider.type(), name="api-token", config={"length": 32})
    )
    print(credentials[0].name, len(credentials[0].value), metadata)


if __name__ == "__main__":
    direct_usage_example()
    registry_usage_example()
