"""
Message normalization for provider request bodies.

Messages are copied, never mutated. Only structured content is touched:
each dict part is decoded into a ContentPart and re-encoded, dropping the
prompt-cache hint for providers that do not define it.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence

from pydantic import ValidationError

from ...models.conversation_types import ChatMessage, ContentPart, pop_cache_control

logger = logging.getLogger(__name__)


def sanitize_content_part(part: Any, keep_cache_control: bool = False) -> Any:
    """Return a copy of one content part with cache hints normalized.
    
    ContentPart models are encoded; other non-mapping parts are returned
    as-is. Parts that do not decode into a ContentPart (e.g. missing
    ``type``, or non-str ``text``) still have every cache-control spelling
    handled, and are otherwise left alone.
    """
    if isinstance(part, ContentPart):
        return part.to_wire(keep_cache_control=keep_cache_control)
    if not isinstance(part, Mapping):
        return part
    
    try:
        decoded = ContentPart.from_wire(dict(part))
    except ValidationError:
        logger.debug("Content part did not decode; normalizing cache hint only")
        stripped, hint, found = pop_cache_control(dict(part))
        if keep_cache_control and found:
            stripped["cache_control"] = hint
        return stripped
    
    return decoded.to_wire(keep_cache_control=keep_cache_control)


def sanitize_message(message: Any, keep_cache_control: bool = False) -> Any:
    if isinstance(message, ChatMessage):
        message = message.to_wire()
    if not isinstance(message, Mapping):
        return message
    
    copied: Dict[str, Any] = dict(message)
    content = copied.get("content")
    if isinstance(content, (list, tuple)):
        copied["content"] = [
            sanitize_content_part(part, keep_cache_control) for part in content
        ]
    return copied


def sanitize_messages(messages: Sequence[Any], keep_cache_control: bool = False) -> List[Any]:
    """
    Normalize every message for a provider request.
    
    Order and count are preserved exactly; roles and other fields are not
    validated.
    
    Args:
        messages: Conversation messages (dicts or ChatMessage models)
        keep_cache_control: Keep cache hints under the canonical key instead
            of removing them
        
    Returns:
        New list of message dicts
    """
    return [sanitize_message(message, keep_cache_control) for message in messages]
