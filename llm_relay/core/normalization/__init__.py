"""Normalization layer for provider request bodies.

This layer handles:
- Content-part sanitization (prompt-cache hints)
- Canonical tool ordering and tool_choice defaults
"""

from .messages import sanitize_content_part, sanitize_message, sanitize_messages
from .tools import resolve_tool_choice, sort_tools, tool_name

__all__ = [
    "sanitize_content_part",
    "sanitize_message",
    "sanitize_messages",
    "sort_tools",
    "tool_name",
    "resolve_tool_choice",
]
