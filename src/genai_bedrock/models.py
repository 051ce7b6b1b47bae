"""Content generation data models.

Host-side request and response models. These are independent of any
particular backend; the translators convert them to and from the
Anthropic Messages schema used on Bedrock.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextSegment(BaseModel):
    """A plain text piece of a turn."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class MediaSegment(BaseModel):
    """Inline binary media (base64 encoded), e.g. an image."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["media"] = "media"
    mime_type: str = "image/jpeg"
    data: str


Segment = Annotated[TextSegment | MediaSegment, Field(discriminator="kind")]


class Content(BaseModel):
    """A single conversation turn."""

    model_config = ConfigDict(frozen=True)

    role: str  # "user", "assistant" (or host-native "model"); others are dropped
    parts: list[Segment] = Field(default_factory=list)


class GenerateContentConfig(BaseModel):
    """Generation parameters.

    None means "not set"; the request translator applies defaults only then,
    so an explicit 0 temperature is preserved.
    """

    model_config = ConfigDict(frozen=True)

    max_output_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    system_instruction: str | TextSegment | Content | None = None


class GenerateContentParameters(BaseModel):
    """A generate request: model name, conversation and config."""

    model_config = ConfigDict(frozen=True)

    model: str
    contents: list[Content] = Field(default_factory=list)
    config: GenerateContentConfig | None = None


class CountTokensParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    contents: list[Content] = Field(default_factory=list)


class CountTokensResponse(BaseModel):
    total_tokens: int


class EmbedContentParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    contents: list[Content] = Field(default_factory=list)


class EmbedContentResponse(BaseModel):
    embeddings: list[list[float]]


class FinishReason(str, Enum):
    """Host-native finish reasons."""

    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    OTHER = "OTHER"


class UsageMetadata(BaseModel):
    """Token usage statistics."""

    prompt_tokens: int
    candidate_tokens: int
    total_tokens: int


class GenerateContentResponse(BaseModel):
    """Host-native response, full or one streaming increment.

    Streaming increments carry only ``text``; the final stream frame carries
    ``finish_reason`` and ``usage`` with empty text.
    """

    text: str
    finish_reason: FinishReason | None = None
    usage: UsageMetadata | None = None
    model_version: str


class ModelInfo(BaseModel):
    """Canonical model id with its display name, for listings."""

    id: str
    name: str
