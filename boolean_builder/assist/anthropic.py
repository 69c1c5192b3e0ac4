"""Anthropic Claude LLM provider."""

import logging
import os

from boolean_builder.assist.base import DEFAULT_MAX_TOKENS, SYSTEM_PROMPT, LLMProvider

logger = logging.getLogger(__name__)


class AnthropicProvider(LLMProvider):
    """LLM provider using the Anthropic Messages API."""

    @property
    def provider_id(self) -> str:
        return "anthropic"

    @property
    def default_model(self) -> str:
        return "claude-3-5-sonnet-20240620"

    @property
    def env_var(self) -> str:
        return "ANTHROPIC_API_KEY"

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        api_key = os.environ.get("ANTHROPIC_API_KEY")
        if not api_key:
            msg = "Missing ANTHROPIC_API_KEY environment variable"
            raise ValueError(msg)

        try:
            import anthropic
        except ImportError:
            msg = (
                "anthropic is required for assisted generation. "
                "Install with: pip install 'boolean-builder[anthropic]'"
            )
            raise ImportError(msg) from None

        client = anthropic.Anthropic(api_key=api_key)
        use_model = model or self.default_model

        logger.info("Requesting boolean string from Anthropic API (%s)...", use_model)
        message = client.messages.create(
            model=use_model,
            max_tokens=max_tokens,
            system=system if system is not None else SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
        )

        if not message.content:
            return ""
        return message.content[0].text  # type: ignore[union-attr]
