"""Pytest fixtures for testing."""

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from genai_bedrock.models import Content, MediaSegment, TextSegment


class FakeEventStream:
    """Stand-in for the SDK's AsyncStream: async-iterable with close()."""

    def __init__(self, frames: list[Any], error: Exception | None = None):
        self._frames = list(frames)
        self._error = error
        self.consumed = 0
        self.closed = False

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for frame in self._frames:
            self.consumed += 1
            yield frame
        if self._error is not None:
            raise self._error

    async def close(self) -> None:
        self.closed = True


def message_start(input_tokens: int | None) -> SimpleNamespace:
    usage = SimpleNamespace(input_tokens=input_tokens, output_tokens=1)
    return SimpleNamespace(type="message_start", message=SimpleNamespace(usage=usage))


def text_delta(text: str) -> SimpleNamespace:
    return SimpleNamespace(
        type="content_block_delta",
        index=0,
        delta=SimpleNamespace(type="text_delta", text=text),
    )


def frame(frame_type: str, **fields: Any) -> SimpleNamespace:
    return SimpleNamespace(type=frame_type, **fields)


def message_stop() -> SimpleNamespace:
    return SimpleNamespace(type="message_stop")


@pytest.fixture
def make_stream() -> Callable[..., FakeEventStream]:
    """Factory for fake Bedrock event streams."""
    return FakeEventStream


@pytest.fixture
def hello_frames() -> list[SimpleNamespace]:
    """message_start(7), "Hel", "lo", message_stop."""
    return [message_start(7), text_delta("Hel"), text_delta("lo"), message_stop()]


def make_message(
    texts: list[str],
    stop_reason: str | None = "end_turn",
    input_tokens: int = 10,
    output_tokens: int = 5,
) -> MagicMock:
    """Build a mock Anthropic Message response with text blocks."""
    blocks = []
    for text in texts:
        block = MagicMock()
        block.type = "text"
        block.text = text
        blocks.append(block)

    response = MagicMock()
    response.id = "msg_123"
    response.content = blocks
    response.stop_reason = stop_reason
    response.usage.input_tokens = input_tokens
    response.usage.output_tokens = output_tokens
    return response


@pytest.fixture
def mock_client() -> MagicMock:
    """Bedrock client whose messages.create is an AsyncMock."""
    client = MagicMock()
    client.messages.create = AsyncMock()
    return client


@pytest.fixture
def user_turn() -> Content:
    return Content(role="user", parts=[TextSegment(text="Hello")])


@pytest.fixture
def image_segment() -> MediaSegment:
    # 1x1 transparent PNG
    return MediaSegment(
        mime_type="image/png",
        data="iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII=",
    )


@pytest.fixture
def frames() -> SimpleNamespace:
    """Builders for raw stream events."""
    return SimpleNamespace(
        message_start=message_start,
        text_delta=text_delta,
        message_stop=message_stop,
        other=frame,
    )


@pytest.fixture
def anthropic_message() -> Callable[..., MagicMock]:
    """Factory for mock Anthropic Message responses."""
    return make_message
