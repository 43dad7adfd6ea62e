"""
Base Request Builder Interface

This module defines the base class for all provider request builders.
Every builder shares the same pipeline (model validation, tool ordering,
option passthrough) and differs only in how message content is prepared
for its provider.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from ..core.normalization import resolve_tool_choice, sort_tools
from ..errors import RequestErrorKind
from ..models.generation import (
    ProviderType,
    RequestBody,
    RequestBuildResult,
    RequestOptions,
)
from ..observability.logging import ProviderLogger


class RequestBuilder(ABC):
    """
    Abstract base class for provider request builders.
    
    The builder is responsible for:
    - Rejecting requests without a model
    - Preparing message content for the provider
    - Emitting tools in canonical order with a tool_choice
    - Passing remaining generation options through unchanged
    
    Builders should NOT contain:
    - Transport or authentication logic
    - Provider selection (see core.routing)
    
    Builders hold no per-request state and are safe to share between threads.
    """
    
    provider: ProviderType
    
    def __init__(self):
        self.logger = ProviderLogger(self.provider.value)
    
    @abstractmethod
    def prepare_messages(self, messages: Sequence[Any]) -> List[Any]:
        """
        Copy messages into the provider's content shape.
        
        Implementations must preserve message order and count.
        """
        pass
    
    def build_request_body(self, messages: Sequence[Any], options: Any) -> RequestBuildResult:
        """
        Build the chat completion request body.
        
        Args:
            messages: Conversation messages (may be empty)
            options: RequestOptions, a mapping, or (key, value) pairs
            
        Returns:
            RequestBuildResult holding the body, or the error kind when the
            request cannot be built
        """
        opts = RequestOptions.coerce(options)
        
        if not opts.model:
            self.logger.warning("Rejected request without model")
            return RequestBuildResult.failure(RequestErrorKind.NO_MODEL_SPECIFIED)
        
        tools = sort_tools(opts.tools) if opts.tools else None
        
        body = RequestBody(
            model=opts.model,
            messages=self.prepare_messages(messages or []),
            tools=tools,
            tool_choice=resolve_tool_choice(tools, opts.tool_choice),
            **opts.passthrough()
        )
        
        self.logger.debug(
            "Built request body",
            model=opts.model,
            messages=len(body.messages),
            tools=len(tools) if tools else 0
        )
        return RequestBuildResult.success(body)
