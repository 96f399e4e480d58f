"""Base provider interface and protocols.

This module defines the Provider protocol that every credential provider
implements so the host can treat heterogeneous secret sources uniformly.
"""

from typing import Protocol

from .types import Credential, CredentialRequest, Metadata, ProviderType, Resource


class Provider(Protocol):
    """Interface for credential providers."""

    def type(self) -> ProviderType:
        """Return the provider type the host uses to route requests."""
        ...

    def create(
        self, request: CredentialRequest
    ) -> tuple[list[Credential], Metadata | None]:
        """Create credentials for the given request.

        Args:
            request: The credential request routed to this provider.

        Returns:
            The issued credentials and optional metadata the host must keep
            in order to destroy them later.

        Raises:
            ConfigDecodeError: When the request config cannot be decoded.
        """
        ...

    def destroy(self, resource: Resource | None) -> None:
        """Release whatever a previous ``create`` allocated for ``resource``."""
        ...
