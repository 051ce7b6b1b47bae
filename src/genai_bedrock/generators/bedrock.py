"""Anthropic-on-Bedrock content generator.

Implements the ContentGenerator interface on top of the Anthropic SDK's
Bedrock client, which signs requests with AWS credentials and decodes the
Bedrock event stream into Messages API events.
"""

import logging
import math
from collections.abc import AsyncIterator
from typing import Any

from anthropic import APIError, AsyncAnthropicBedrock
from botocore.exceptions import BotoCoreError

from ..errors import InvocationError, UnsupportedCapabilityError
from ..model_resolver import DEFAULT_MODEL, ModelResolver, default_resolver
from ..models import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)
from ..proxy import create_http_client
from ..request_translator import extract_text, to_anthropic_request
from ..response_translator import from_anthropic_response, from_anthropic_stream
from .base import ContentGenerator

logger = logging.getLogger(__name__)

# Rough characters-per-token ratio for count_tokens estimates.
CHARS_PER_TOKEN = 4

_TRANSPORT_ERRORS = (APIError, BotoCoreError)
_PARSE_ERRORS = (AttributeError, TypeError, ValueError)


class BedrockContentGenerator(ContentGenerator):
    """Anthropic Claude models served through AWS Bedrock.

    Supports:
    - Single-shot and streaming generation
    - Vision (inline base64 images)
    - System instructions

    Not supported:
    - Embeddings (use Amazon Titan embeddings)
    - Native token counting (estimated from text length)

    The default model and the transport client are fixed at construction and
    never written afterwards, so one instance can serve concurrent calls.
    """

    SUPPORTED_FEATURES = {
        "streaming",
        "vision",
        "system_message",
    }

    def __init__(
        self,
        region: str = "us-east-1",
        default_model: str = DEFAULT_MODEL.value,
        proxy_url: str | None = None,
        timeout: float | None = None,
        aws_access_key: str | None = None,
        aws_secret_key: str | None = None,
        aws_session_token: str | None = None,
        resolver: ModelResolver = default_resolver,
        client: AsyncAnthropicBedrock | None = None,
    ):
        """Initialize the Bedrock generator.

        Args:
            region: AWS region of the Bedrock runtime endpoint.
            default_model: Canonical id or alias used when a request's model
                name is not recognized.
            proxy_url: Explicit forward proxy. Defaults to HTTPS_PROXY /
                HTTP_PROXY from the environment.
            timeout: Transport timeout in seconds. Defaults to the SDK's.
            aws_access_key: AWS access key id. Defaults to the AWS credential chain.
            aws_secret_key: AWS secret access key.
            aws_session_token: Optional AWS session token.
            resolver: Model name resolver.
            client: Pre-built Bedrock client (skips client construction).
        """
        self._region = region
        self._resolver = resolver
        self._default_model = resolver.resolve(default_model)
        self._client = client or self._create_client(
            proxy_url=proxy_url,
            timeout=timeout,
            aws_access_key=aws_access_key,
            aws_secret_key=aws_secret_key,
            aws_session_token=aws_session_token,
        )

    @property
    def name(self) -> str:
        """Backend identifier."""
        return "anthropic-bedrock"

    @property
    def region(self) -> str:
        return self._region

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def client(self) -> AsyncAnthropicBedrock:
        return self._client

    def supports(self, feature: str) -> bool:
        """Check if feature is supported."""
        return feature in self.SUPPORTED_FEATURES

    def resolve_model(self, model: str | None) -> str:
        """Canonical id for a request's model name, falling back to the default."""
        return self._resolver.resolve(model, default=self._default_model)

    async def generate_content(
        self, request: GenerateContentParameters, user_prompt_id: str
    ) -> GenerateContentResponse:
        """Send a single-shot invocation and wait for the full response."""
        model_id = self.resolve_model(request.model)
        anthropic_request = to_anthropic_request(request, model_id, stream=False)

        try:
            response = await self._client.messages.create(**anthropic_request)
        except _TRANSPORT_ERRORS as e:
            raise self._invocation_error(e) from e

        try:
            return from_anthropic_response(response, request.model or model_id)
        except _PARSE_ERRORS as e:
            raise InvocationError(
                f"Failed to parse Bedrock response: {e}",
                provider=self.name,
            ) from e

    async def generate_content_stream(
        self, request: GenerateContentParameters, user_prompt_id: str
    ) -> AsyncIterator[GenerateContentResponse]:
        """Start a streaming invocation and return the translated stream."""
        model_id = self.resolve_model(request.model)
        anthropic_request = to_anthropic_request(request, model_id, stream=True)

        try:
            stream = await self._client.messages.create(**anthropic_request)
        except _TRANSPORT_ERRORS as e:
            raise self._invocation_error(e) from e

        if stream is None:
            raise InvocationError("No response stream received from Bedrock", provider=self.name)

        return self._stream_responses(stream, request.model or model_id)

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Estimate tokens as ceil(characters / 4).

        Bedrock has no token counting endpoint for these models. The result
        is an estimate, not a tokenizer count.
        """
        text = extract_text(request.contents)
        return CountTokensResponse(total_tokens=math.ceil(len(text) / CHARS_PER_TOKEN))

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        raise UnsupportedCapabilityError(
            "Embeddings not supported with Anthropic models on Bedrock. "
            "Use Amazon Titan embeddings instead.",
            capability="embeddings",
            provider=self.name,
        )

    async def _stream_responses(
        self, stream: Any, model_label: str
    ) -> AsyncIterator[GenerateContentResponse]:
        """Translate the stream, closing the connection however iteration ends."""
        try:
            async for response in from_anthropic_stream(stream, model_label):
                yield response
        except _TRANSPORT_ERRORS as e:
            raise self._invocation_error(e) from e
        except _PARSE_ERRORS as e:
            raise InvocationError(
                f"Failed to parse Bedrock stream event: {e}",
                provider=self.name,
            ) from e
        finally:
            await stream.close()

    def _create_client(
        self,
        proxy_url: str | None,
        timeout: float | None,
        aws_access_key: str | None,
        aws_secret_key: str | None,
        aws_session_token: str | None,
    ) -> AsyncAnthropicBedrock:
        client_kwargs: dict[str, Any] = {"aws_region": self._region}

        if aws_access_key and aws_secret_key:
            client_kwargs["aws_access_key"] = aws_access_key
            client_kwargs["aws_secret_key"] = aws_secret_key
            if aws_session_token:
                client_kwargs["aws_session_token"] = aws_session_token

        if timeout is not None:
            client_kwargs["timeout"] = timeout

        client_kwargs["http_client"] = create_http_client(proxy_url)

        return AsyncAnthropicBedrock(**client_kwargs)

    def _invocation_error(self, error: Exception) -> InvocationError:
        """Wrap an upstream error, keeping its status code and request id."""
        message = getattr(error, "message", None) or str(error)
        return InvocationError(
            f"Bedrock invocation failed: {message}",
            status_code=getattr(error, "status_code", None),
            provider=self.name,
            request_id=getattr(error, "request_id", None),
        )
