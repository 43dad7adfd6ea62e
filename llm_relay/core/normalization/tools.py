"""Tool definition normalization."""

from typing import Any, List, Mapping, Optional, Sequence

from ...config.constants import DEFAULT_TOOL_CHOICE
from ...models.tool_types import ToolDefinition


def tool_name(tool: Any) -> str:
    """Function name used for ordering; "" when the tool has none."""
    if isinstance(tool, ToolDefinition):
        return tool.name
    if isinstance(tool, Mapping):
        function = tool.get("function")
        if isinstance(function, Mapping):
            name = function.get("name")
            if isinstance(name, str):
                return name
    return ""


def sort_tools(tools: Sequence[Any]) -> List[Any]:
    """
    Sort tool definitions alphabetically by function name.
    
    Two logically identical toolsets then serialize to identical bytes,
    which keeps provider prompt caches and request-hash caches warm.
    The sort is stable: tools with equal names keep their relative order.
    ToolDefinition models are encoded to plain dicts.
    """
    encoded = [
        tool.to_wire() if isinstance(tool, ToolDefinition) else tool
        for tool in tools
    ]
    return sorted(encoded, key=tool_name)


def resolve_tool_choice(tools: Optional[Sequence[Any]], tool_choice: Any = None) -> Any:
    """tool_choice for a body: None without tools, caller value or "auto" with."""
    if not tools:
        return None
    if tool_choice is None:
        return DEFAULT_TOOL_CHOICE
    return tool_choice
