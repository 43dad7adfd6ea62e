"""
LLM Relay - provider routing and request normalization for chat completions.

This package turns provider-agnostic conversations into provider request
bodies:
- OpenAI (``openai/`` prefixed models, cache hints stripped)
- OpenRouter (every other model, cache hints kept)

Features:
- Deterministic tool ordering for cache-friendly requests
- Typed build results instead of exceptions for missing models
- Pure, thread-safe functions with no shared state
"""

__version__ = "0.1.0"

from .config import ProviderCredentials
from .core.routing import (
    classify_model,
    is_target_provider_model,
    prepare_request,
    route,
    strip_provider_prefix,
)
from .core.normalization import sort_tools
from .errors import RelayError, RequestBuildError, RequestErrorKind, RoutingError
from .models import (
    ChatMessage,
    ContentPart,
    PreparedRequest,
    ProviderType,
    RequestBody,
    RequestBuildResult,
    RequestOptions,
    RouteDecision,
    ToolDefinition,
    ToolFunction,
)
from .providers import (
    audio_content,
    build_image_request_body,
    build_request_body,
    cached_content,
    get_request_builder,
)

__all__ = [
    # Routing
    "is_target_provider_model",
    "strip_provider_prefix",
    "classify_model",
    "route",
    "prepare_request",
    "ProviderCredentials",
    
    # Request building
    "build_request_body",
    "get_request_builder",
    "sort_tools",
    "cached_content",
    "audio_content",
    "build_image_request_body",
    
    # Models
    "ProviderType",
    "RequestOptions",
    "RequestBody",
    "RequestBuildResult",
    "RouteDecision",
    "PreparedRequest",
    "ChatMessage",
    "ContentPart",
    "ToolDefinition",
    "ToolFunction",
    
    # Errors
    "RequestErrorKind",
    "RelayError",
    "RequestBuildError",
    "RoutingError",
]
