"""Anthropic response and stream translation to host responses.

Works on the objects produced by the Anthropic SDK (``Message`` and the raw
stream events); only attribute access is used, so any object with the same
shape translates the same way.
"""

from collections.abc import AsyncIterable, AsyncIterator
from typing import Any

from .models import FinishReason, GenerateContentResponse, UsageMetadata

# Total mapping: anything not listed becomes OTHER.
STOP_REASON_MAP = {
    "end_turn": FinishReason.STOP,
    "max_tokens": FinishReason.MAX_TOKENS,
    "stop_sequence": FinishReason.STOP,
}


def map_stop_reason(stop_reason: str | None) -> FinishReason:
    """Map an Anthropic stop reason to a host finish reason. Never raises."""
    return STOP_REASON_MAP.get(stop_reason, FinishReason.OTHER)


def from_anthropic_response(response: Any, model_label: str) -> GenerateContentResponse:
    """Convert a complete Anthropic Messages response.

    Text blocks are concatenated in order; other block types are ignored.
    """
    text = "".join(
        block.text for block in response.content if block.type == "text"
    )

    input_tokens = response.usage.input_tokens
    output_tokens = response.usage.output_tokens

    return GenerateContentResponse(
        text=text,
        finish_reason=map_stop_reason(response.stop_reason),
        usage=UsageMetadata(
            prompt_tokens=input_tokens,
            candidate_tokens=output_tokens,
            total_tokens=input_tokens + output_tokens,
        ),
        model_version=model_label,
    )


async def from_anthropic_stream(
    frames: AsyncIterable[Any], model_label: str
) -> AsyncIterator[GenerateContentResponse]:
    """Translate raw stream events into incremental host responses.

    Yields one response per text delta (that delta's text only), then a final
    empty-text response with STOP and usage on ``message_stop``. Unknown event
    types are skipped.

    The stream does not report a running output token count, so candidate
    tokens are approximated by the number of text deltas received. This is
    not a tokenizer count.
    """
    input_tokens = 0
    delta_count = 0

    async for frame in frames:
        frame_type = getattr(frame, "type", None)

        if frame_type == "message_start":
            usage = getattr(getattr(frame, "message", None), "usage", None)
            input_tokens = getattr(usage, "input_tokens", None) or 0

        elif frame_type == "content_block_delta":
            text = getattr(getattr(frame, "delta", None), "text", None)
            if not text:
                continue
            delta_count += 1
            yield GenerateContentResponse(text=text, model_version=model_label)

        elif frame_type == "message_stop":
            yield GenerateContentResponse(
                text="",
                finish_reason=FinishReason.STOP,
                usage=UsageMetadata(
                    prompt_tokens=input_tokens,
                    candidate_tokens=delta_count,
                    total_tokens=input_tokens + delta_count,
                ),
                model_version=model_label,
            )
