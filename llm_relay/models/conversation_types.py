from pydantic import BaseModel, ConfigDict, StrictStr, model_validator
from typing import Any, Dict, List, Optional, Tuple, Union

from ..config.constants import CACHE_CONTROL_KEYS


def pop_cache_control(data: Dict[str, Any]) -> Tuple[Dict[str, Any], Any, bool]:
    """Return a copy of ``data`` without any cache-control key.
    
    Every spelling in CACHE_CONTROL_KEYS is removed. The hint found under the
    earliest spelling wins when more than one is present.
    
    Returns:
        (copy without the keys, the hint or None, whether a key was found)
    """
    stripped = dict(data)
    hint = None
    found = False
    for key in CACHE_CONTROL_KEYS:
        if key in stripped:
            value = stripped.pop(key)
            if not found:
                hint = value
                found = True
    return stripped, hint, found


class ContentPart(BaseModel):
    """One segment of a message's structured content.
    
    Decoding accepts the cache-control hint under any recognized key
    spelling; once decoded the hint only lives in ``cache_control``.
    Unknown keys (``input_audio``, ``image_url``...) are kept as extras.
    ``type`` and ``text`` are strict so decoding never coerces their values.
    """
    model_config = ConfigDict(extra="allow")
    
    type: StrictStr
    text: Optional[StrictStr] = None
    cache_control: Optional[Any] = None
    
    @model_validator(mode="before")
    @classmethod
    def collect_cache_control(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data, hint, found = pop_cache_control(data)
            if found:
                data["cache_control"] = hint
        return data
    
    @classmethod
    def from_wire(cls, raw: Dict[str, Any]) -> "ContentPart":
        return cls.model_validate(raw)
    
    def to_wire(self, keep_cache_control: bool = False) -> Dict[str, Any]:
        """Encode back to a plain dict containing only the keys that were supplied."""
        exclude = None if keep_cache_control else {"cache_control"}
        return self.model_dump(exclude_unset=True, exclude=exclude)


class ChatMessage(BaseModel):
    """Provider-agnostic conversation message.
    
    Role is not restricted; tool_calls, tool_call_id, name and any other
    keys pass through as extras.
    """
    model_config = ConfigDict(extra="allow")
    
    role: str
    content: Optional[Union[str, List[Any]]] = None
    
    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
