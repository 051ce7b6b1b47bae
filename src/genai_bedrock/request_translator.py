"""Host request to Anthropic Messages request translation.

The remote schema distinguishes plain-text turns (content is a string) from
mixed-content turns (content is an array of typed blocks), so a turn's shape
depends on whether it contains any media.
"""

from typing import Any

from .models import (
    Content,
    GenerateContentConfig,
    GenerateContentParameters,
    MediaSegment,
    Segment,
    TextSegment,
)

DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.0
DEFAULT_TOP_P = 1.0

# Host role -> remote role. Roles not listed here are dropped.
ROLE_MAP = {
    "user": "user",
    "assistant": "assistant",
    "model": "assistant",
}


def to_anthropic_request(
    request: GenerateContentParameters,
    model_id: str,
    stream: bool = False,
) -> dict[str, Any]:
    """Convert a host request to Anthropic Messages API format.

    Args:
        request: Host-side generate request.
        model_id: Canonical Bedrock model identifier.
        stream: Whether a streaming invocation is requested.

    Returns:
        Keyword arguments for ``messages.create``.
    """
    config = request.config or GenerateContentConfig()

    anthropic_request: dict[str, Any] = {
        "model": model_id,
        "messages": convert_contents(request.contents),
        "max_tokens": _default_if_unset(config.max_output_tokens, DEFAULT_MAX_TOKENS),
        "temperature": _default_if_unset(config.temperature, DEFAULT_TEMPERATURE),
        "top_p": _default_if_unset(config.top_p, DEFAULT_TOP_P),
    }

    system = extract_system_instruction(config)
    if system:
        anthropic_request["system"] = system

    if stream:
        anthropic_request["stream"] = True

    return anthropic_request


def convert_contents(contents: list[Content]) -> list[dict[str, Any]]:
    """Convert turns to remote messages, keeping order.

    Turns with an unmappable role, or that produce no content, are skipped.
    """
    messages = []
    for content in contents:
        role = ROLE_MAP.get(content.role)
        if role is None:
            continue

        message_content = convert_parts(content.parts)
        if message_content:
            messages.append({"role": role, "content": message_content})
    return messages


def convert_parts(parts: list[Segment]) -> str | list[dict[str, Any]]:
    """Shape a turn's segments into string or block-array content.

    All-text turns become the concatenated text. Once a media segment is
    present every segment becomes its own block, in original order, so text
    seen before the first media block sits ahead of it.
    """
    texts: list[str] = []
    blocks: list[dict[str, Any]] = []

    for part in parts:
        if isinstance(part, TextSegment):
            if not part.text:
                continue
            if blocks:
                blocks.append(_text_block(part.text))
            else:
                texts.append(part.text)
        elif isinstance(part, MediaSegment):
            if not blocks:
                blocks.extend(_text_block(text) for text in texts)
                texts.clear()
            blocks.append(_media_block(part))
        else:
            raise TypeError(f"Unsupported segment type: {type(part).__name__}")

    return blocks if blocks else "".join(texts)


def extract_system_instruction(config: GenerateContentConfig | None) -> str | None:
    """Flatten the system instruction to a string.

    Accepts a plain string, a text segment, or a turn whose text parts are
    joined with newlines (media parts are ignored).
    """
    if config is None or config.system_instruction is None:
        return None

    instruction = config.system_instruction
    if isinstance(instruction, str):
        return instruction or None
    if isinstance(instruction, TextSegment):
        return instruction.text or None
    if isinstance(instruction, Content):
        texts = [
            part.text
            for part in instruction.parts
            if isinstance(part, TextSegment) and part.text
        ]
        return "\n".join(texts) or None
    return None


def extract_text(contents: list[Content]) -> str:
    """All text segments of all turns, concatenated."""
    return "".join(
        part.text
        for content in contents
        for part in content.parts
        if isinstance(part, TextSegment)
    )


def _default_if_unset(value: Any, default: Any) -> Any:
    return default if value is None else value


def _text_block(text: str) -> dict[str, Any]:
    return {"type": "text", "text": text}


def _media_block(part: MediaSegment) -> dict[str, Any]:
    return {
        "type": "image",
        "source": {
            "type": "base64",
            "media_type": part.mime_type or "image/jpeg",
            "data": part.data,
        },
    }
