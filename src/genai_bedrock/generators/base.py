"""Abstract base class for content generators.

Defines the interface the host dispatches to, whatever backend serves it.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from ..models import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)


class ContentGenerator(ABC):
    """Base interface for content generation backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier, e.g. 'anthropic-bedrock'."""
        ...

    @abstractmethod
    async def generate_content(
        self, request: GenerateContentParameters, user_prompt_id: str
    ) -> GenerateContentResponse:
        """Generate a complete response.

        Args:
            request: Host-side generate request.
            user_prompt_id: Caller's correlation id, used for logging only.

        Returns:
            The aggregated response.

        Raises:
            InvocationError: Transport, remote or parse failure.
        """
        ...

    @abstractmethod
    async def generate_content_stream(
        self, request: GenerateContentParameters, user_prompt_id: str
    ) -> AsyncIterator[GenerateContentResponse]:
        """Start a streaming generation.

        The invocation happens when this coroutine is awaited, so failures to
        start the stream raise here. The returned iterator is single-pass and
        yields responses in arrival order.

        Raises:
            InvocationError: Transport or remote failure.
        """
        ...

    @abstractmethod
    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Count (or estimate) the tokens in a request."""
        ...

    @abstractmethod
    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        """Embed the request contents.

        Raises:
            UnsupportedCapabilityError: If the backend has no embeddings.
        """
        ...

    @abstractmethod
    def supports(self, feature: str) -> bool:
        """Check if the backend supports a capability.

        Args:
            feature: Feature name. Known values:
                - 'streaming': Streaming responses
                - 'vision': Inline image inputs
                - 'system_message': Dedicated system instruction
                - 'embeddings': embed_content

        Returns:
            True if the feature is supported.
        """
        ...
