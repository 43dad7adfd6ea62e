"""
Relay Constants

Static routing and request-shaping configuration shared by the router and
the provider request builders.
"""

# Reserved model-identifier prefix per provider. Matching is exact and
# case-sensitive. Providers without an entry accept any identifier as-is.
PROVIDER_PREFIXES = {
    "openai": "openai/",
}

# Key spellings under which a content part may carry a prompt-cache hint.
# The first entry is the canonical spelling written back to providers that
# support caching.
CACHE_CONTROL_KEYS = ("cache_control", "cacheControl")

# tool_choice applied when tools are sent and the caller chose nothing
DEFAULT_TOOL_CHOICE = "auto"

# Option keys consumed by routing/transport that never belong in a body
NON_BODY_OPTION_KEYS = frozenset({
    "model",
    "messages",
    "tools",
    "tool_choice",
    "api_key",
    "user_id",
    "openai_auth",
    "request_id",
})

# Environment variables holding system-level provider keys
OPENAI_API_KEY_ENV_VAR = "OPENAI_API_KEY"
OPENROUTER_API_KEY_ENV_VAR = "OPENROUTER_API_KEY"

# Output modalities requested for image generation via chat completions
IMAGE_MODALITIES = ("image", "text")
