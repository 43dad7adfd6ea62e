from typing import Any, List, Sequence

from ...core.normalization import sanitize_messages
from ...models.generation import ProviderType, RequestBuildResult
from ..base import RequestBuilder


class OpenAIRequestBuilder(RequestBuilder):
    """Chat Completions bodies for the OpenAI API.
    
    OpenAI does not define ``cache_control`` on content parts, so every
    cache hint is removed before the body is built.
    """
    
    provider = ProviderType.OPENAI
    
    def prepare_messages(self, messages: Sequence[Any]) -> List[Any]:
        return sanitize_messages(messages, keep_cache_control=False)


openai_builder = OpenAIRequestBuilder()


def build_request_body(messages: Sequence[Any], options: Any) -> RequestBuildResult:
    return openai_builder.build_request_body(messages, options)
