"""
Provider routing for model identifiers.

A model identifier is either bare (``"gpt-5-mini"``) or carries a reserved
provider prefix (``"openai/gpt-5-mini"``). Classification never fails: an
unrecognized or missing prefix only means no provider was asserted.
"""

from typing import Any, Optional, Sequence

from ...config.constants import PROVIDER_PREFIXES
from ...config.credentials import ProviderCredentials
from ...models.generation import (
    PreparedRequest,
    ProviderType,
    RequestOptions,
    RouteDecision,
)
from ...observability.logging import ProviderLogger
from ...providers import get_request_builder

logger = ProviderLogger("router")


def _prefix_for(provider: ProviderType) -> Optional[str]:
    return PROVIDER_PREFIXES.get(ProviderType(provider).value)


def is_target_provider_model(identifier: Optional[str],
                             provider: ProviderType = ProviderType.OPENAI) -> bool:
    """True iff ``identifier`` starts with the provider's reserved prefix."""
    prefix = _prefix_for(provider)
    if prefix is None or not isinstance(identifier, str):
        return False
    return identifier.startswith(prefix)


def strip_provider_prefix(identifier: Optional[str],
                          provider: ProviderType = ProviderType.OPENAI) -> Optional[str]:
    """Provider-local model name.
    
    Removes the prefix when present, repeatedly, so that stripping is
    idempotent even for "openai/openai/..." identifiers. Anything else,
    None included, is returned unchanged. A single-pass strip would leave
    "openai/x" for "openai/openai/x"; this returns "x".
    """
    while is_target_provider_model(identifier, provider):
        identifier = identifier[len(_prefix_for(provider)):]
    return identifier


def classify_model(identifier: Optional[str]) -> ProviderType:
    """Provider asserted by the identifier, OpenRouter when none is."""
    for provider in ProviderType:
        if is_target_provider_model(identifier, provider):
            return provider
    return ProviderType.OPENROUTER


def route(model: Optional[str],
          credentials: Optional[ProviderCredentials] = None) -> RouteDecision:
    """
    Decide which provider serves ``model``.
    
    ``openai/`` models go to OpenAI with the prefix stripped, but only when
    an OpenAI key is available. Everything else goes to OpenRouter with the
    identifier unchanged.
    
    Args:
        model: Model identifier, possibly prefixed or None
        credentials: Keys to route with (read from the environment if omitted)
        
    Returns:
        RouteDecision with provider, provider-local model and API key
    """
    if credentials is None:
        credentials = ProviderCredentials.from_env()
    
    if classify_model(model) == ProviderType.OPENAI and credentials.has_openai_key:
        decision = RouteDecision(
            provider=ProviderType.OPENAI,
            model=strip_provider_prefix(model),
            api_key=credentials.openai_api_key,
        )
    else:
        decision = RouteDecision(
            provider=ProviderType.OPENROUTER,
            model=model,
            api_key=credentials.openrouter_api_key,
        )
    
    logger.debug("Routed model", model=model, target=decision.provider.value)
    return decision


def prepare_request(messages: Sequence[Any],
                    options: Any,
                    credentials: Optional[ProviderCredentials] = None) -> PreparedRequest:
    """Route by ``options.model`` and build the body for the chosen provider."""
    opts = RequestOptions.coerce(options)
    
    with logger.track_request("prepare", opts.model):
        decision = route(opts.model, credentials)
        
        if decision.model is not None:
            opts = opts.model_copy(update={"model": decision.model})
        
        result = get_request_builder(decision.provider).build_request_body(messages, opts)
    
    return PreparedRequest(route=decision, result=result)
