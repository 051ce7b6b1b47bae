"""Content generator dispatch by authentication mode."""

import logging

from .config import AuthType, ContentGeneratorConfig, get_model_from_env
from .generators.base import ContentGenerator
from .generators.bedrock import BedrockContentGenerator
from .generators.logging_generator import LoggingContentGenerator
from .model_resolver import resolve_model

logger = logging.getLogger(__name__)


def create_content_generator(config: ContentGeneratorConfig) -> ContentGenerator:
    """Build the generator for the configured authentication mode.

    Args:
        config: Resolved configuration.

    Returns:
        A logging-wrapped content generator.

    Raises:
        ValueError: If no adapter in this package serves the auth type.
    """
    if config.auth_type == AuthType.USE_ANTHROPIC_BEDROCK:
        default_model = (
            resolve_model(config.model) if config.model else get_model_from_env()
        )
        logger.debug(
            "Creating Bedrock content generator",
            extra={"region": config.region, "model": default_model},
        )
        generator = BedrockContentGenerator(
            region=config.region,
            default_model=default_model,
            proxy_url=config.proxy_url,
            timeout=config.timeout,
            aws_access_key=config.aws_access_key,
            aws_secret_key=config.aws_secret_key,
            aws_session_token=config.aws_session_token,
        )
        return LoggingContentGenerator(generator)

    raise ValueError(
        f"Unsupported auth type: {config.auth_type.value}. "
        f"Available: {[AuthType.USE_ANTHROPIC_BEDROCK.value]}"
    )
