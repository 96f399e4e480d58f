"""PyTest configuration and shared test fixtures.

This module provides fixtures shared by the credential provider unit tests.
"""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

from credential_provider_core import CredentialRequest, ProviderType


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove random provider settings from the environment for a test."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("RANDOM_PROVIDER_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def example_request() -> CredentialRequest:
    """A request for a ten character random credential."""
    return CredentialRequest(
        type=ProviderType.RANDOM,
        name="example-random-credential",
        config='{"length": 10}',
    )
