"""Unit tests for provider routing."""

import itertools

import pytest
from unittest.mock import patch

from llm_relay.config import ProviderCredentials
from llm_relay.core.routing import (
    classify_model,
    is_target_provider_model,
    prepare_request,
    route,
    strip_provider_prefix,
)
from llm_relay.errors import RequestErrorKind
from llm_relay.models.generation import ProviderType

pytestmark = pytest.mark.unit

IDENTIFIERS = [
    None,
    "",
    "openai/",
    "openai/gpt-5-mini",
    "openai/openai/gpt-5",
    "OpenAI/gpt-5",
    "openai-gpt-5",
    "gpt-5-mini",
    "anthropic/claude-sonnet-4",
    " openai/gpt-5",
]


class TestPrefixClassification:
    """Test prefix matching on model identifiers."""
    
    @pytest.mark.parametrize("identifier", IDENTIFIERS)
    def test_target_iff_prefixed(self, identifier):
        """True exactly when the identifier starts with openai/."""
        expected = identifier is not None and identifier.startswith("openai/")
        assert is_target_provider_model(identifier) is expected
    
    def test_none_is_not_target(self):
        """None never raises and is not a target."""
        assert is_target_provider_model(None) is False
    
    def test_prefix_is_case_sensitive(self):
        """Only the exact lower-case prefix matches."""
        assert is_target_provider_model("OpenAI/gpt-5") is False
        assert is_target_provider_model("openai/gpt-5") is True
    
    def test_non_string_is_not_target(self):
        """Non-string identifiers are treated as unprefixed."""
        assert is_target_provider_model(42) is False
    
    def test_provider_without_prefix(self):
        """OpenRouter reserves no prefix, so nothing targets it by prefix."""
        assert is_target_provider_model("openrouter/auto", ProviderType.OPENROUTER) is False
    
    def test_provider_given_as_string(self):
        """Provider can be passed by value."""
        assert is_target_provider_model("openai/gpt-5", "openai") is True
    
    def test_classify(self):
        """Classification returns a closed enum value."""
        assert classify_model("openai/gpt-5") == ProviderType.OPENAI
        assert classify_model("anthropic/claude-sonnet-4") == ProviderType.OPENROUTER
        assert classify_model("gpt-5") == ProviderType.OPENROUTER
        assert classify_model(None) == ProviderType.OPENROUTER


class TestStripPrefix:
    """Test provider-local name extraction."""
    
    def test_strips_prefix(self):
        assert strip_provider_prefix("openai/gpt-5-mini") == "gpt-5-mini"
    
    def test_bare_name_unchanged(self):
        assert strip_provider_prefix("gpt-5-mini") == "gpt-5-mini"
        assert strip_provider_prefix("anthropic/claude-sonnet-4") == "anthropic/claude-sonnet-4"
    
    def test_none(self):
        assert strip_provider_prefix(None) is None
    
    def test_repeated_prefix_fully_stripped(self):
        """Every leading prefix is removed, not just the first."""
        assert strip_provider_prefix("openai/openai/gpt-5") == "gpt-5"
        assert strip_provider_prefix("openai/anthropic/x") == "anthropic/x"
    
    def test_prefix_only(self):
        assert strip_provider_prefix("openai/") == ""
    
    @pytest.mark.parametrize("identifier", IDENTIFIERS)
    def test_idempotent(self, identifier):
        """Stripping an already stripped name is a no-op."""
        once = strip_provider_prefix(identifier)
        assert strip_provider_prefix(once) == once


class TestRoute:
    """Test provider selection with credentials."""
    
    def test_openai_model_with_openai_key(self, both_keys):
        decision = route("openai/gpt-5-mini", both_keys)
        
        assert decision.provider == ProviderType.OPENAI
        assert decision.model == "gpt-5-mini"
        assert decision.api_key == "sk-openai"
    
    def test_openai_model_without_openai_key(self, openrouter_only):
        """Without an OpenAI key the prefixed model goes to OpenRouter untouched."""
        decision = route("openai/gpt-5-mini", openrouter_only)
        
        assert decision.provider == ProviderType.OPENROUTER
        assert decision.model == "openai/gpt-5-mini"
        assert decision.api_key == "sk-or"
    
    def test_blank_openai_key_counts_as_missing(self):
        credentials = ProviderCredentials(openai_api_key="  ", openrouter_api_key="sk-or")
        
        assert route("openai/gpt-5", credentials).provider == ProviderType.OPENROUTER
    
    def test_other_model(self, both_keys):
        decision = route("anthropic/claude-sonnet-4", both_keys)
        
        assert decision.provider == ProviderType.OPENROUTER
        assert decision.model == "anthropic/claude-sonnet-4"
    
    def test_none_model(self, both_keys):
        decision = route(None, both_keys)
        
        assert decision.provider == ProviderType.OPENROUTER
        assert decision.model is None
    
    def test_credentials_from_env(self, mock_env_vars):
        """Missing credentials are read from the environment."""
        with patch("llm_relay.config.credentials.load_dotenv"):
            decision = route("openai/gpt-5")
        
        assert decision.provider == ProviderType.OPENAI
        assert decision.api_key == "test-openai-key"
    
    def test_api_key_hidden_from_repr(self, both_keys):
        assert "sk-openai" not in repr(route("openai/gpt-5", both_keys))


class TestPrepareRequest:
    """Test routing composed with request building."""
    
    def test_openai_route_strips_cache_and_prefix(self, both_keys, cached_messages):
        prepared = prepare_request(cached_messages, {"model": "openai/gpt-5-mini"}, both_keys)
        
        assert prepared.route.provider == ProviderType.OPENAI
        body = prepared.result.unwrap()
        assert body.model == "gpt-5-mini"
        for message in body.messages:
            if isinstance(message["content"], list):
                for part in message["content"]:
                    assert "cache_control" not in part
                    assert "cacheControl" not in part
    
    def test_openrouter_route_keeps_cache(self, openrouter_only, cached_messages):
        prepared = prepare_request(cached_messages, {"model": "openai/gpt-5-mini"}, openrouter_only)
        
        assert prepared.route.provider == ProviderType.OPENROUTER
        body = prepared.result.unwrap()
        assert body.model == "openai/gpt-5-mini"
        assert body.messages[0]["content"][0]["cache_control"] == {"type": "ephemeral", "ttl": "1h"}
        assert body.messages[1]["content"][0]["cache_control"] == {"type": "ephemeral"}
        assert "cacheControl" not in body.messages[1]["content"][0]
    
    def test_missing_model(self, both_keys):
        prepared = prepare_request([], [], both_keys)
        
        assert prepared.result.ok is False
        assert prepared.result.error == RequestErrorKind.NO_MODEL_SPECIFIED
    
    def test_prefix_only_model_fails(self, both_keys):
        """"openai/" strips to an empty local name, which is no model."""
        prepared = prepare_request([], {"model": "openai/"}, both_keys)
        
        assert prepared.route.provider == ProviderType.OPENAI
        assert prepared.result.error == RequestErrorKind.NO_MODEL_SPECIFIED
    
    def test_options_not_mutated(self, both_keys):
        options = {"model": "openai/gpt-5", "temperature": 0.2}
        
        prepare_request([], options, both_keys)
        
        assert options == {"model": "openai/gpt-5", "temperature": 0.2}
    
    def test_passthrough_survives_routing(self, both_keys):
        prepared = prepare_request([], {"model": "openai/gpt-5", "temperature": 0.2}, both_keys)
        
        assert prepared.result.unwrap().to_payload()["temperature"] == 0.2
    
    @pytest.mark.parametrize(
        "roles", list(itertools.permutations(["system", "user", "assistant", "tool"]))
    )
    def test_message_order_preserved(self, both_keys, roles):
        messages = [{"role": role, "content": f"{i}"} for i, role in enumerate(roles)]
        
        body = prepare_request(messages, {"model": "openai/gpt-5"}, both_keys).result.unwrap()
        
        assert [m["role"] for m in body.messages] == list(roles)
        assert [m["content"] for m in body.messages] == ["0", "1", "2", "3"]
