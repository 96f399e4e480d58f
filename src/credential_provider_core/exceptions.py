"""Error taxonomy shared by credential providers.

A host can catch ``CredentialProviderError`` for any failure from any provider
kind, or a subclass to tell bad request payloads from misconfigured providers.
"""


class CredentialProviderError(Exception):
    """Root of every error a provider raises to the host."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Store the message alongside a machine-readable code.

        Args:
            message: Explanation suitable for the host's logs.
            error_code: Stable code the host can branch on, e.g. ``CONFIG_ERROR``.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigDecodeError(CredentialProviderError):
    """A credential request carried a payload the provider cannot use."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Record which payload field was at fault.

        Args:
            message: What was wrong with the payload.
            field: Name of the offending field, or None when the payload as a
                whole could not be parsed.
        """
        super().__init__(message, "CONFIG_DECODE_ERROR")
        self.field = field


class ConfigurationError(CredentialProviderError):
    """A provider was built with settings it cannot honour."""

    def __init__(self, message: str, component: str | None = None) -> None:
        """Record which provider rejected its settings.

        Args:
            message: Which setting was rejected and why.
            component: Provider kind that rejected it, e.g. ``random``.
        """
        super().__init__(message, "CONFIG_ERROR")
        self.component = component


class UnknownProviderTypeError(ValueError):
    """The registry has no factory for the requested provider type."""

    def __init__(self, provider_type: str) -> None:
        """Keep the rejected type for the host's error reporting.

        Args:
            provider_type: The type string nothing is registered under.
        """
        super().__init__(f"Unknown provider type: {provider_type}")
        self.provider_type = provider_type
