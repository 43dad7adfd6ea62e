"""Provider credential resolution from the environment."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from .constants import OPENAI_API_KEY_ENV_VAR, OPENROUTER_API_KEY_ENV_VAR


class ProviderCredentials(BaseModel):
    """API keys available for a single routing decision.
    
    Blank keys are treated as absent so that routing never selects a
    provider it cannot authenticate against.
    """
    openai_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    
    @field_validator('openai_api_key', 'openrouter_api_key')
    def blank_to_none(cls, v):
        if v is None or not v.strip():
            return None
        return v
    
    @property
    def has_openai_key(self) -> bool:
        return self.openai_api_key is not None
    
    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ProviderCredentials":
        """Build credentials from OPENAI_API_KEY / OPENROUTER_API_KEY."""
        if load_env_file:
            load_dotenv()
        return cls(
            openai_api_key=os.getenv(OPENAI_API_KEY_ENV_VAR),
            openrouter_api_key=os.getenv(OPENROUTER_API_KEY_ENV_VAR),
        )
