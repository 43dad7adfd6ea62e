from .payloads import OpenAIRequestBuilder, build_request_body, openai_builder

__all__ = ["OpenAIRequestBuilder", "build_request_body", "openai_builder"]
