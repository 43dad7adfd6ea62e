"""Shared pytest fixtures for LLM relay tests."""

import pytest

from llm_relay.config import ProviderCredentials
from llm_relay.models import ChatMessage


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no I/O")


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "OPENAI_API_KEY": "test-openai-key",
        "OPENROUTER_API_KEY": "test-openrouter-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def both_keys():
    """Credentials with both provider keys."""
    return ProviderCredentials(
        openai_api_key="sk-openai",
        openrouter_api_key="sk-or",
    )


@pytest.fixture
def openrouter_only():
    """Credentials without an OpenAI key."""
    return ProviderCredentials(openrouter_api_key="sk-or")


@pytest.fixture
def sample_tools():
    """Tool definitions in non-canonical order."""
    return [
        {
            "type": "function",
            "function": {
                "name": "use_skill",
                "description": "Run a skill",
                "parameters": {"type": "object", "properties": {}},
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_skill",
                "description": "Look up a skill",
                "parameters": {"type": "object", "properties": {}},
            },
        },
    ]


@pytest.fixture
def cached_messages():
    """Conversation using both cache-control spellings."""
    return [
        {
            "role": "system",
            "content": [
                {
                    "type": "text",
                    "text": "You are a helpful assistant.",
                    "cache_control": {"type": "ephemeral", "ttl": "1h"},
                },
            ],
        },
        {
            "role": "user",
            "content": [
                {
                    "type": "text",
                    "text": "Context block",
                    "cacheControl": {"type": "ephemeral"},
                },
                {"type": "text", "text": "What is on my calendar?"},
            ],
        },
        {"role": "assistant", "content": "Let me check."},
    ]


@pytest.fixture
def sample_conversation_messages():
    """Sample conversation messages as models."""
    return [
        ChatMessage(role="system", content="You are a helpful assistant."),
        ChatMessage(role="user", content="What is the weather like?"),
        ChatMessage(role="assistant", content="I don't have access to real-time weather data."),
    ]
