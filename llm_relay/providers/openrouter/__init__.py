from .payloads import (
    OpenRouterRequestBuilder,
    audio_content,
    build_image_request_body,
    build_request_body,
    cached_content,
    openrouter_builder,
)

__all__ = [
    "OpenRouterRequestBuilder",
    "audio_content",
    "build_image_request_body",
    "build_request_body",
    "cached_content",
    "openrouter_builder",
]
