"""Observability helpers for the LLM relay."""

from .logging import ProviderLogger

__all__ = ["ProviderLogger"]
