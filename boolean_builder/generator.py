"""Entry point shared by callers: generate a ResultBundle via either path."""

import logging

from boolean_builder.assist import get_provider
from boolean_builder.assist.base import LLMProvider
from boolean_builder.assist.remote import generate_remote
from boolean_builder.core.config import AssistConfig, GeneratorSettings
from boolean_builder.core.schemas import ResultBundle, SearchRequest
from boolean_builder.engine.builder import build_boolean

logger = logging.getLogger(__name__)


def generate(
    request: SearchRequest,
    settings: GeneratorSettings | None = None,
    assist: AssistConfig | None = None,
    *,
    provider: LLMProvider | None = None,
) -> ResultBundle:
    """Produce a ResultBundle with the local engine or the remote assist path.

    Both paths return the same shape; ``prompt_version`` tells them apart.

    Args:
        request: Validated search inputs.
        settings: Generator settings. None means local mode.
        assist: Provider settings for assist mode. None uses defaults.
        provider: Explicit provider instance, overriding ``assist.provider``.
    """
    settings = settings or GeneratorSettings()
    if settings.mode == "local":
        return build_boolean(request)

    assist = assist or AssistConfig()
    provider = provider or get_provider(assist.provider)
    logger.debug("Generating via %s assist", provider.provider_id)
    return generate_remote(request, provider, model=assist.model, max_tokens=assist.max_tokens)
