"""Content generator implementations.

This package contains backend implementations of the ContentGenerator interface.
"""

from .base import ContentGenerator
from .bedrock import BedrockContentGenerator
from .logging_generator import LoggingContentGenerator

__all__ = [
    "ContentGenerator",
    "BedrockContentGenerator",
    "LoggingContentGenerator",
]
