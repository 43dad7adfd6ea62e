"""Routing layer for provider selection.

This layer handles:
- Classifying model identifiers by provider prefix
- Stripping provider prefixes to provider-local model names
- Choosing a provider given available credentials
"""

from .router import (
    classify_model,
    is_target_provider_model,
    prepare_request,
    route,
    strip_provider_prefix,
)

__all__ = [
    "classify_model",
    "is_target_provider_model",
    "strip_provider_prefix",
    "route",
    "prepare_request",
]
