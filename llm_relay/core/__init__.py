"""Core logic layers for the LLM relay.

This package contains the provider-agnostic core logic organized into layers:
- normalization: Message content and tool normalization
- routing: Provider selection from model identifiers
"""

__all__ = []
