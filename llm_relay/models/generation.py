from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from enum import Enum

from ..config.constants import NON_BODY_OPTION_KEYS
from ..errors import RequestBuildError, RequestErrorKind


class ProviderType(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    OPENROUTER = "openrouter"


class RequestOptions(BaseModel):
    """
    Caller options for a single chat completion request.
    
    Only ``model``, ``tools`` and ``tool_choice`` are interpreted. Every other
    option is a provider generation parameter (temperature, max_tokens,
    parallel_tool_calls, response_format...) and is passed through untouched.
    """
    model_config = ConfigDict(extra="allow")
    
    model: Optional[str] = Field(None, description="Model identifier")
    tools: Optional[List[Any]] = Field(None, description="Tool definitions")
    tool_choice: Optional[Any] = Field(None, description="Explicit tool_choice")
    
    @classmethod
    def coerce(
        cls,
        options: Union["RequestOptions", Mapping[str, Any], Iterable[Tuple[str, Any]], None],
    ) -> "RequestOptions":
        """Accept a model, a mapping or an iterable of (key, value) pairs.
        
        With pairs, the first occurrence of a repeated key wins.
        """
        if isinstance(options, RequestOptions):
            return options
        if options is None:
            return cls()
        if isinstance(options, Mapping):
            return cls(**dict(options))
        
        first: Dict[str, Any] = {}
        for key, value in options:
            first.setdefault(key, value)
        return cls(**first)
    
    def passthrough(self) -> Dict[str, Any]:
        """Generation parameters that belong in the request body."""
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if value is not None and key not in NON_BODY_OPTION_KEYS
        }


class RequestBody(BaseModel):
    """Provider chat-completion request, ready to be serialized as JSON."""
    model_config = ConfigDict(extra="allow")
    
    model: str
    messages: List[Any]
    tools: Optional[List[Any]] = None
    tool_choice: Optional[Any] = None
    
    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": self.messages,
        }
        if self.tools:
            payload["tools"] = self.tools
            payload["tool_choice"] = self.tool_choice
        payload.update(self.model_extra or {})
        return payload


class RequestBuildResult(BaseModel):
    """Either a built body or the reason it could not be built."""
    body: Optional[RequestBody] = None
    error: Optional[RequestErrorKind] = None
    
    @classmethod
    def success(cls, body: RequestBody) -> "RequestBuildResult":
        return cls(body=body)
    
    @classmethod
    def failure(cls, error: RequestErrorKind) -> "RequestBuildResult":
        return cls(error=error)
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    def unwrap(self) -> RequestBody:
        """Return the body or raise RequestBuildError."""
        if self.error is not None:
            raise RequestBuildError(self.error)
        return self.body


class RouteDecision(BaseModel):
    """Provider chosen for a model identifier."""
    provider: ProviderType
    model: Optional[str] = None
    api_key: Optional[str] = Field(None, repr=False)


class PreparedRequest(BaseModel):
    route: RouteDecision
    result: RequestBuildResult
