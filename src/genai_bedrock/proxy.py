"""Outbound proxy configuration for the Bedrock transport.

A proxy URL is taken from explicit configuration or, failing that, from the
conventional proxy environment variables. Invalid URLs are logged and
ignored: the client then connects directly. Only this module decides on a
proxy; the HTTP client itself does not read the environment.
"""

import logging
import os
from collections.abc import Mapping

import httpx
from anthropic import DefaultAsyncHttpxClient

logger = logging.getLogger(__name__)

# Checked in order; names match case-insensitively.
PROXY_ENV_VARS = ("https_proxy", "http_proxy")

SUPPORTED_PROXY_SCHEMES = {"http", "https"}


def proxy_from_env(environ: Mapping[str, str] | None = None) -> str | None:
    """Find a proxy URL in the environment.

    HTTPS_PROXY wins over HTTP_PROXY; for each, the upper-case spelling is
    preferred, then any other casing.
    """
    env = os.environ if environ is None else environ
    for wanted in PROXY_ENV_VARS:
        for name in (wanted.upper(), wanted):
            if env.get(name):
                return env[name]
        for name, value in env.items():
            if name.lower() == wanted and value:
                return value
    return None


def parse_proxy_url(proxy_url: str) -> httpx.URL | None:
    """Parse and validate a proxy URL.

    Returns None (after logging a warning) for malformed URLs or schemes
    other than http/https.
    """
    try:
        url = httpx.URL(proxy_url)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        logger.warning("Invalid proxy URL %r ignored: %s", mask_proxy_url(proxy_url), e)
        return None

    if url.scheme not in SUPPORTED_PROXY_SCHEMES or not url.host:
        logger.warning(
            "Invalid proxy URL %r ignored: expected http:// or https:// with a host",
            mask_proxy_url(proxy_url),
        )
        return None

    return url


def resolve_proxy_url(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Pick and validate the proxy URL to use, or None for a direct connection."""
    candidate = explicit or proxy_from_env(environ)
    if not candidate:
        return None

    if parse_proxy_url(candidate) is None:
        return None
    return candidate


def mask_proxy_url(proxy_url: str) -> str:
    """Hide the password part of a proxy URL for logging."""
    try:
        url = httpx.URL(proxy_url)
    except (httpx.InvalidURL, TypeError, ValueError):
        return "<unparseable>"
    if url.password:
        url = url.copy_with(password="***")
    return str(url)


def create_http_client(
    proxy_url: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> httpx.AsyncClient:
    """Build the HTTP client for the Bedrock transport.

    The client never reads proxy settings from the environment itself, so a
    malformed HTTPS_PROXY cannot break construction and a rejected explicit
    proxy means a direct connection.
    """
    resolved = resolve_proxy_url(proxy_url, environ)
    if resolved is None:
        return DefaultAsyncHttpxClient(trust_env=False)

    logger.debug(
        "Routing Bedrock traffic through proxy",
        extra={"proxy": mask_proxy_url(resolved)},
    )
    return DefaultAsyncHttpxClient(proxy=resolved, trust_env=False)
