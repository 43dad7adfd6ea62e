from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolFunction(BaseModel):
    model_config = ConfigDict(extra="allow")
    
    name: str
    description: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)


class ToolDefinition(BaseModel):
    """OpenAI-format function tool offered to the model."""
    model_config = ConfigDict(extra="allow")
    
    type: str = "function"
    function: ToolFunction
    
    @property
    def name(self) -> str:
        return self.function.name
    
    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
