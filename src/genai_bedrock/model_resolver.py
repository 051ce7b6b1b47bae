"""Model name resolution for Anthropic models on Bedrock.

Maps host-native model names and human-friendly aliases to canonical Bedrock
model identifiers. Resolution is permissive: an unknown name resolves to the
default model instead of raising, so a typo never blocks a caller.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from .models import ModelInfo


class BedrockModel(str, Enum):
    """Canonical Bedrock model identifiers."""

    CLAUDE_3_5_SONNET = "anthropic.claude-3-5-sonnet-20241022-v2:0"
    CLAUDE_3_5_HAIKU = "anthropic.claude-3-5-haiku-20241022-v1:0"
    CLAUDE_3_OPUS = "anthropic.claude-3-opus-20240229-v1:0"
    CLAUDE_3_SONNET = "anthropic.claude-3-sonnet-20240229-v1:0"
    CLAUDE_3_HAIKU = "anthropic.claude-3-haiku-20240307-v1:0"


DEFAULT_MODEL = BedrockModel.CLAUDE_3_5_SONNET

MODEL_DISPLAY_NAMES: Mapping[BedrockModel, str] = MappingProxyType({
    BedrockModel.CLAUDE_3_5_SONNET: "Claude 3.5 Sonnet (Latest)",
    BedrockModel.CLAUDE_3_5_HAIKU: "Claude 3.5 Haiku (Fast)",
    BedrockModel.CLAUDE_3_OPUS: "Claude 3 Opus (Most Capable)",
    BedrockModel.CLAUDE_3_SONNET: "Claude 3 Sonnet (Balanced)",
    BedrockModel.CLAUDE_3_HAIKU: "Claude 3 Haiku (Fast)",
})

# Exact names as the host sends them, checked first.
NATIVE_MODEL_NAMES: Mapping[str, BedrockModel] = MappingProxyType({
    "gemini-2.0-flash": BedrockModel.CLAUDE_3_5_SONNET,
    "gemini-1.5-pro": BedrockModel.CLAUDE_3_5_SONNET,
    "gemini-1.5-flash": BedrockModel.CLAUDE_3_5_HAIKU,
    "gemini-1.0-pro": BedrockModel.CLAUDE_3_SONNET,
    "claude-3.5-sonnet": BedrockModel.CLAUDE_3_5_SONNET,
    "claude-3.5-haiku": BedrockModel.CLAUDE_3_5_HAIKU,
    "claude-3-opus": BedrockModel.CLAUDE_3_OPUS,
    "claude-3-sonnet": BedrockModel.CLAUDE_3_SONNET,
    "claude-3-haiku": BedrockModel.CLAUDE_3_HAIKU,
})

# Keys are normalized: lower-case, no hyphens, underscores or whitespace.
SHORT_ALIASES: Mapping[str, BedrockModel] = MappingProxyType({
    "claude35sonnet": BedrockModel.CLAUDE_3_5_SONNET,
    "claude3.5sonnet": BedrockModel.CLAUDE_3_5_SONNET,
    "claude35haiku": BedrockModel.CLAUDE_3_5_HAIKU,
    "claude3.5haiku": BedrockModel.CLAUDE_3_5_HAIKU,
    "claude3opus": BedrockModel.CLAUDE_3_OPUS,
    "claude3sonnet": BedrockModel.CLAUDE_3_SONNET,
    "claude3haiku": BedrockModel.CLAUDE_3_HAIKU,
    "sonnet": BedrockModel.CLAUDE_3_5_SONNET,
    "haiku": BedrockModel.CLAUDE_3_5_HAIKU,
    "opus": BedrockModel.CLAUDE_3_OPUS,
})

_SEPARATORS = str.maketrans("", "", "-_ \t\r\n\f\v")


def normalize_model_name(name: str) -> str:
    """Lower-case and strip hyphens, underscores and whitespace."""
    return name.lower().translate(_SEPARATORS)


class ModelResolver:
    """Resolves model names to canonical Bedrock identifiers.

    The lookup tables are read-only and shared by reference; a resolver holds
    no other state, so one instance can be used from any number of concurrent
    requests.
    """

    def __init__(
        self,
        native_names: Mapping[str, BedrockModel] = NATIVE_MODEL_NAMES,
        aliases: Mapping[str, BedrockModel] = SHORT_ALIASES,
        default: BedrockModel = DEFAULT_MODEL,
    ):
        self._native_names = native_names
        self._aliases = aliases
        self._default = default

    @property
    def default(self) -> BedrockModel:
        return self._default

    def resolve(self, name: str | None, default: str | None = None) -> str:
        """Resolve a model name or alias to a canonical identifier.

        Order: canonical id as-is, exact native name, normalized short alias,
        then ``default`` (or the resolver's default). Never raises.
        """
        fallback = default or self._default.value
        if not name:
            return fallback

        if self.validate(name):
            return name

        exact = self._native_names.get(name)
        if exact is not None:
            return exact.value

        alias = self._aliases.get(normalize_model_name(name))
        if alias is not None:
            return alias.value

        return fallback

    def validate(self, candidate: str) -> bool:
        """True only for canonical identifiers, not for aliases."""
        return candidate in _CANONICAL_IDS

    def list_models(self) -> list[ModelInfo]:
        """Canonical models with display names, in declaration order."""
        return [
            ModelInfo(id=model.value, name=MODEL_DISPLAY_NAMES[model])
            for model in BedrockModel
        ]


_CANONICAL_IDS = frozenset(model.value for model in BedrockModel)

default_resolver = ModelResolver()


def resolve_model(name: str | None, default: str | None = None) -> str:
    """Resolve using the default tables."""
    return default_resolver.resolve(name, default)


def is_valid_model(candidate: str) -> bool:
    """Check membership in the canonical identifier set."""
    return default_resolver.validate(candidate)


def list_models() -> list[ModelInfo]:
    """List the canonical models with display names."""
    return default_resolver.list_models()
