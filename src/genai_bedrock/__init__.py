"""Anthropic-on-Bedrock backend for a generic content generation interface.

Translates host conversations to the Anthropic Messages schema, invokes
Claude models through AWS Bedrock (optionally via a forward proxy) and
translates full or streamed responses back.
"""

from .config import AuthType, ContentGeneratorConfig, load_config
from .errors import ContentGeneratorError, InvocationError, UnsupportedCapabilityError
from .factory import create_content_generator
from .generators import BedrockContentGenerator, ContentGenerator, LoggingContentGenerator
from .model_resolver import (
    BedrockModel,
    DEFAULT_MODEL,
    ModelResolver,
    is_valid_model,
    list_models,
    resolve_model,
)
from .models import (
    Content,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    FinishReason,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    MediaSegment,
    ModelInfo,
    TextSegment,
    UsageMetadata,
)

__all__ = [
    "AuthType",
    "ContentGeneratorConfig",
    "load_config",
    "create_content_generator",
    "ContentGenerator",
    "BedrockContentGenerator",
    "LoggingContentGenerator",
    "BedrockModel",
    "DEFAULT_MODEL",
    "ModelResolver",
    "resolve_model",
    "is_valid_model",
    "list_models",
    "Content",
    "TextSegment",
    "MediaSegment",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "CountTokensParameters",
    "CountTokensResponse",
    "EmbedContentParameters",
    "EmbedContentResponse",
    "FinishReason",
    "UsageMetadata",
    "ModelInfo",
    "ContentGeneratorError",
    "InvocationError",
    "UnsupportedCapabilityError",
]
