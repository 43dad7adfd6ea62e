"""
Provider request builders.

Each builder turns provider-agnostic messages and options into the request
body its provider expects.
"""

from typing import Any, Sequence

from ..errors import RoutingError
from ..models.generation import ProviderType, RequestBuildResult
from .base import RequestBuilder
from .openai import OpenAIRequestBuilder, openai_builder
from .openrouter import (
    OpenRouterRequestBuilder,
    audio_content,
    build_image_request_body,
    cached_content,
    openrouter_builder,
)

BUILDERS = {
    ProviderType.OPENAI: openai_builder,
    ProviderType.OPENROUTER: openrouter_builder,
}


def get_request_builder(provider: ProviderType) -> RequestBuilder:
    """Return the builder for a provider."""
    try:
        return BUILDERS[ProviderType(provider)]
    except (KeyError, ValueError) as e:
        raise RoutingError(f"No request builder for provider {provider!r}") from e


def build_request_body(
    messages: Sequence[Any],
    options: Any,
    provider: ProviderType = ProviderType.OPENAI,
) -> RequestBuildResult:
    """Build a request body for ``provider`` (OpenAI unless given)."""
    return get_request_builder(provider).build_request_body(messages, options)


__all__ = [
    "RequestBuilder",
    "OpenAIRequestBuilder",
    "OpenRouterRequestBuilder",
    "get_request_builder",
    "build_request_body",
    "cached_content",
    "audio_content",
    "build_image_request_body",
]
