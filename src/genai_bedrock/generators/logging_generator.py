"""Logging decorator for content generators.

Wraps any ContentGenerator and logs each call with the caller's prompt id,
latency and token usage. Log records carry structured fields via ``extra``.
"""

import logging
import time
from collections.abc import AsyncIterator

from ..models import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
    UsageMetadata,
)
from .base import ContentGenerator

logger = logging.getLogger(__name__)


class LoggingContentGenerator(ContentGenerator):
    """Delegates to a wrapped generator and logs around each call."""

    def __init__(self, wrapped: ContentGenerator):
        self._wrapped = wrapped

    @property
    def wrapped(self) -> ContentGenerator:
        return self._wrapped

    @property
    def name(self) -> str:
        return self._wrapped.name

    def supports(self, feature: str) -> bool:
        return self._wrapped.supports(feature)

    async def generate_content(
        self, request: GenerateContentParameters, user_prompt_id: str
    ) -> GenerateContentResponse:
        self._log_request("generate_content", request, user_prompt_id)
        start_time = time.perf_counter()

        try:
            response = await self._wrapped.generate_content(request, user_prompt_id)
        except Exception as e:
            self._log_failure("generate_content", e, user_prompt_id, start_time)
            raise

        self._log_success(
            "generate_content",
            request.model,
            user_prompt_id,
            start_time,
            response.usage,
            response.finish_reason,
        )
        return response

    async def generate_content_stream(
        self, request: GenerateContentParameters, user_prompt_id: str
    ) -> AsyncIterator[GenerateContentResponse]:
        self._log_request("generate_content_stream", request, user_prompt_id)
        start_time = time.perf_counter()

        try:
            stream = await self._wrapped.generate_content_stream(request, user_prompt_id)
        except Exception as e:
            self._log_failure("generate_content_stream", e, user_prompt_id, start_time)
            raise

        return self._logged_stream(stream, request.model, user_prompt_id, start_time)

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        self._log_request("count_tokens", request, None)
        start_time = time.perf_counter()

        try:
            response = await self._wrapped.count_tokens(request)
        except Exception as e:
            self._log_failure("count_tokens", e, None, start_time)
            raise

        logger.info(
            "count_tokens succeeded",
            extra={
                "provider": self.name,
                "model": request.model,
                "latency_ms": int((time.perf_counter() - start_time) * 1000),
                "total_tokens": response.total_tokens,
            },
        )
        return response

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        try:
            return await self._wrapped.embed_content(request)
        except Exception as e:
            logger.error(
                "embed_content failed: %s",
                str(e),
                extra={"provider": self.name, "error_type": type(e).__name__},
            )
            raise

    async def _logged_stream(
        self,
        stream: AsyncIterator[GenerateContentResponse],
        model: str,
        user_prompt_id: str,
        start_time: float,
    ) -> AsyncIterator[GenerateContentResponse]:
        usage: UsageMetadata | None = None
        finish_reason = None
        try:
            async for response in stream:
                if response.usage is not None:
                    usage = response.usage
                if response.finish_reason is not None:
                    finish_reason = response.finish_reason
                yield response
        except Exception as e:
            self._log_failure("generate_content_stream", e, user_prompt_id, start_time)
            raise
        finally:
            # Propagate early close to the wrapped stream.
            aclose = getattr(stream, "aclose", None)
            if aclose is not None:
                await aclose()

        self._log_success(
            "generate_content_stream",
            model,
            user_prompt_id,
            start_time,
            usage,
            finish_reason,
        )

    def _log_request(
        self,
        operation: str,
        request: GenerateContentParameters | CountTokensParameters,
        user_prompt_id: str | None,
    ) -> None:
        logger.debug(
            "Starting %s on %s",
            operation,
            self.name,
            extra={
                "user_prompt_id": user_prompt_id,
                "provider": self.name,
                "model": request.model,
                "turns": len(request.contents),
            },
        )

    def _log_success(
        self,
        operation: str,
        model: str,
        user_prompt_id: str,
        start_time: float,
        usage: UsageMetadata | None,
        finish_reason,
    ) -> None:
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(
            "%s succeeded",
            operation,
            extra={
                "user_prompt_id": user_prompt_id,
                "provider": self.name,
                "model": model,
                "latency_ms": latency_ms,
                "prompt_tokens": usage.prompt_tokens if usage else None,
                "candidate_tokens": usage.candidate_tokens if usage else None,
                "finish_reason": finish_reason.value if finish_reason else None,
            },
        )

    def _log_failure(
        self, operation: str, error: Exception, user_prompt_id: str | None, start_time: float
    ) -> None:
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        logger.error(
            "%s failed: %s",
            operation,
            str(error),
            extra={
                "user_prompt_id": user_prompt_id,
                "provider": self.name,
                "latency_ms": latency_ms,
                "error_type": type(error).__name__,
            },
        )
