"""Configuration module for the LLM relay."""

from .credentials import ProviderCredentials

# Import all constants
from .constants import *

__all__ = [
    "ProviderCredentials",
    "PROVIDER_PREFIXES",
    "CACHE_CONTROL_KEYS",
    "DEFAULT_TOOL_CHOICE",
    "NON_BODY_OPTION_KEYS",
]
