from .generation import (
    PreparedRequest,
    ProviderType,
    RequestBody,
    RequestBuildResult,
    RequestOptions,
    RouteDecision,
)
from .conversation_types import ChatMessage, ContentPart
from .tool_types import ToolDefinition, ToolFunction

__all__ = [
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
]
