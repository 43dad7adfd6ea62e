from typing import Any, Dict, List, Optional, Sequence

from ...config.constants import IMAGE_MODALITIES
from ...core.normalization import sanitize_messages
from ...errors import RequestErrorKind
from ...models.generation import ProviderType, RequestBody, RequestBuildResult, RequestOptions
from ..base import RequestBuilder


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


# image option -> validator; invalid values are dropped, not rejected
IMAGE_OPTION_VALIDATORS = {
    "n": _positive_int,
    "size": _non_empty_str,
    "aspect_ratio": _non_empty_str,
}


class OpenRouterRequestBuilder(RequestBuilder):
    """Chat Completions bodies for OpenRouter.
    
    OpenRouter forwards prompt-cache breakpoints to providers that support
    them, so cache hints are kept and written under ``cache_control``.
    """
    
    provider = ProviderType.OPENROUTER
    
    def prepare_messages(self, messages: Sequence[Any]) -> List[Any]:
        return sanitize_messages(messages, keep_cache_control=True)
    
    def build_image_request_body(self, prompt: str, options: Any) -> RequestBuildResult:
        """
        Build an image generation request (chat completions with image output).
        
        The prompt becomes a single user message. Only ``n`` (positive int),
        ``size`` and ``aspect_ratio`` (non-blank strings) are forwarded, under
        an ``image`` object that is omitted when none of them is valid. Other
        options are ignored.
        
        Args:
            prompt: Image description
            options: RequestOptions, a mapping, or (key, value) pairs
            
        Returns:
            RequestBuildResult with the body or NO_MODEL_SPECIFIED
        """
        opts = RequestOptions.coerce(options)
        
        if not opts.model:
            self.logger.warning("Rejected image request without model")
            return RequestBuildResult.failure(RequestErrorKind.NO_MODEL_SPECIFIED)
        
        extras = opts.model_extra or {}
        image_opts = {
            key: extras[key]
            for key, is_valid in IMAGE_OPTION_VALIDATORS.items()
            if extras.get(key) is not None and is_valid(extras[key])
        }
        
        fields: Dict[str, Any] = {"modalities": list(IMAGE_MODALITIES)}
        if image_opts:
            fields["image"] = image_opts
        
        body = RequestBody(
            model=opts.model,
            messages=[{"role": "user", "content": prompt}],
            **fields
        )
        
        self.logger.debug("Built image request body", model=opts.model, image_opts=len(image_opts))
        return RequestBuildResult.success(body)


openrouter_builder = OpenRouterRequestBuilder()


def build_request_body(messages: Sequence[Any], options: Any) -> RequestBuildResult:
    return openrouter_builder.build_request_body(messages, options)


def build_image_request_body(prompt: str, options: Any) -> RequestBuildResult:
    return openrouter_builder.build_image_request_body(prompt, options)


def cached_content(text: str, ttl: Optional[str] = None) -> Dict[str, Any]:
    """Build a text content part marked as a prompt-cache breakpoint.
    
    Without ``ttl`` the provider default (5 minutes) applies; pass
    ``ttl="1h"`` for long-lived blocks such as system prompts.
    """
    cache_control: Dict[str, Any] = {"type": "ephemeral"}
    if ttl is not None:
        cache_control["ttl"] = ttl
    
    return {
        "type": "text",
        "text": text,
        "cache_control": cache_control,
    }


def audio_content(base64_audio: str, format: str) -> Dict[str, Any]:
    """Build an ``input_audio`` content part for speech input.
    
    ``base64_audio`` must already be base64-encoded; ``format`` is the
    container name ("wav", "mp3", "ogg", "flac"...).
    """
    return {
        "type": "input_audio",
        "input_audio": {
            "data": base64_audio,
            "format": format,
        },
    }
