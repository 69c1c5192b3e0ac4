"""Remote assist path: ask an LLM for the boolean string in ResultBundle shape."""

import logging

from boolean_builder.assist import get_provider
from boolean_builder.assist.base import DEFAULT_MAX_TOKENS, SYSTEM_PROMPT, LLMProvider, parse_response
from boolean_builder.core.schemas import ResultBundle, SearchRequest

logger = logging.getLogger(__name__)


class RemoteAssistError(RuntimeError):
    """The provider call failed. ``payload`` carries the upstream error text."""

    def __init__(self, message: str, payload: str = "") -> None:
        super().__init__(message)
        self.payload = payload


def build_user_prompt(request: SearchRequest) -> str:
    """Embed the five request fields verbatim into the user instruction."""
    return (
        "Build a Boolean string and short explanation.\n\n"
        "Inputs:\n"
        f"- Role: {request.role}\n"
        f"- Required skills (comma-separated): {request.skills or '(none)'}\n"
        f"- Exclude terms: {request.exclude or '(none)'}\n"
        f"- Location: {request.location or '(none)'}\n"
        f"- Platform: {request.platform.value}\n\n"
        "Return the JSON object only."
    )


def generate_remote(
    request: SearchRequest,
    provider: LLMProvider | None = None,
    *,
    model: str | None = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> ResultBundle:
    """Generate a ResultBundle through an LLM provider.

    One outbound call, no retry. Unparseable replies degrade to a plain-text
    bundle (see parse_response) instead of failing.

    Args:
        request: Validated search inputs.
        provider: Provider to call. None uses the anthropic provider.
        model: Override the provider's default model.
        max_tokens: Upper bound on generated tokens.

    Raises:
        ValueError: If the provider's API key is not set.
        ImportError: If the provider's SDK is not installed.
        RemoteAssistError: If the provider call itself fails.
    """
    provider = provider or get_provider("anthropic")
    prompt = build_user_prompt(request)

    try:
        raw = provider.complete(prompt, model=model, system=SYSTEM_PROMPT, max_tokens=max_tokens)
    except (ValueError, ImportError):
        raise
    except Exception as e:
        logger.warning("Remote assist call to %s failed", provider.provider_id, exc_info=True)
        msg = f"{provider.provider_id} request failed"
        raise RemoteAssistError(msg, payload=str(e)) from e

    return parse_response(raw or "")
