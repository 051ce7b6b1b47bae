"""Content generator configuration.

Resolves the adapter's configuration from explicit values and environment
variables (optionally loaded from a .env file).

Environment variables:
- GENAI_AUTH_TYPE: Authentication mode (default: "anthropic-bedrock")
- AWS_REGION / AWS_DEFAULT_REGION: Bedrock region (default: "us-east-1")
- ANTHROPIC_MODEL / CLAUDE_MODEL: Default model, canonical id or alias
- AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY / AWS_SESSION_TOKEN: Credentials
- LLM_TIMEOUT_SECONDS: Transport timeout (default: SDK default)
"""

import os
from collections.abc import Mapping
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from .model_resolver import DEFAULT_MODEL, is_valid_model, resolve_model

DEFAULT_REGION = "us-east-1"


class AuthType(str, Enum):
    """Authentication modes the host can be configured with."""

    LOGIN_WITH_GOOGLE = "oauth-personal"
    USE_GEMINI = "gemini-api-key"
    USE_VERTEX_AI = "vertex-ai"
    CLOUD_SHELL = "cloud-shell"
    USE_ANTHROPIC_BEDROCK = "anthropic-bedrock"


class ContentGeneratorConfig(BaseModel):
    """Resolved settings for building a content generator."""

    model_config = ConfigDict(frozen=True)

    auth_type: AuthType = AuthType.USE_ANTHROPIC_BEDROCK
    model: str | None = None
    region: str = DEFAULT_REGION
    proxy_url: str | None = None
    timeout: float | None = None
    aws_access_key: str | None = None
    aws_secret_key: str | None = None
    aws_session_token: str | None = None


def get_region_from_env(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    return env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION") or DEFAULT_REGION


def get_model_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Default model from ANTHROPIC_MODEL / CLAUDE_MODEL.

    Canonical ids are used as-is; anything else goes through alias
    resolution, which falls back to the default model.
    """
    env = os.environ if environ is None else environ
    env_model = env.get("ANTHROPIC_MODEL") or env.get("CLAUDE_MODEL")
    if env_model and is_valid_model(env_model):
        return env_model
    if env_model:
        return resolve_model(env_model)
    return DEFAULT_MODEL.value


def load_config(
    auth_type: AuthType | str | None = None,
    model: str | None = None,
    proxy_url: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ContentGeneratorConfig:
    """Build a config from explicit values, falling back to the environment.

    Args:
        auth_type: Authentication mode. Defaults to GENAI_AUTH_TYPE.
        model: Model override (canonical id or alias). Defaults to
            ANTHROPIC_MODEL / CLAUDE_MODEL.
        proxy_url: Explicit proxy URL. Environment proxies are picked up
            later by the transport setup.
        environ: Variables to read instead of the process environment. When
            omitted, a .env file is loaded first.

    Returns:
        Resolved configuration.

    Raises:
        ValueError: If the auth type is not a known mode.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    raw_auth_type = auth_type or environ.get("GENAI_AUTH_TYPE") or AuthType.USE_ANTHROPIC_BEDROCK
    timeout = environ.get("LLM_TIMEOUT_SECONDS")

    return ContentGeneratorConfig(
        auth_type=AuthType(raw_auth_type),
        model=model or environ.get("ANTHROPIC_MODEL") or environ.get("CLAUDE_MODEL"),
        region=get_region_from_env(environ),
        proxy_url=proxy_url,
        timeout=float(timeout) if timeout else None,
        aws_access_key=environ.get("AWS_ACCESS_KEY_ID"),
        aws_secret_key=environ.get("AWS_SECRET_ACCESS_KEY"),
        aws_session_token=environ.get("AWS_SESSION_TOKEN"),
    )
