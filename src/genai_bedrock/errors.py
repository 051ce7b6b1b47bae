"""Content generator error hierarchy.

Custom exceptions for content generation with backend context.
"""


class ContentGeneratorError(Exception):
    """Base exception for content generation operations."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        request_id: str | None = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.request_id = request_id

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.provider:
            parts.append(f"provider={self.provider}")
        if self.request_id:
            parts.append(f"request_id={self.request_id}")
        return " ".join(parts)


class InvocationError(ContentGeneratorError):
    """Transport, remote-service or response-parsing failure.

    Not retried here. Retry policy belongs to the transport client.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider: str | None = None,
        request_id: str | None = None,
    ):
        super().__init__(message, provider, request_id)
        self.status_code = status_code


class UnsupportedCapabilityError(ContentGeneratorError):
    """The backend cannot perform this operation at all.

    Fatal for the call. Use a different service for the capability.
    """

    def __init__(
        self,
        message: str,
        capability: str,
        provider: str | None = None,
    ):
        super().__init__(message, provider)
        self.capability = capability
