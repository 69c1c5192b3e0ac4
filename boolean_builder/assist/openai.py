"""OpenAI and Ollama LLM providers (both speak the chat completions API)."""

import logging
import os
from types import ModuleType
from typing import Any

from boolean_builder.assist.base import DEFAULT_MAX_TOKENS, SYSTEM_PROMPT, LLMProvider

logger = logging.getLogger(__name__)

_OLLAMA_BASE_URL = "http://localhost:11434/v1"


def _import_openai(purpose: str) -> ModuleType:
    try:
        import openai
    except ImportError:
        msg = (
            f"openai is required for {purpose}. "
            "Install with: pip install 'boolean-builder[openai]'"
        )
        raise ImportError(msg) from None
    return openai


def _chat(client: Any, model: str, prompt: str, system: str | None, max_tokens: int) -> str:
    response = client.chat.completions.create(
        model=model,
        max_tokens=max_tokens,
        messages=[
            {"role": "system", "content": system if system is not None else SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
    )
    return response.choices[0].message.content or ""


class OpenAIProvider(LLMProvider):
    """LLM provider using the OpenAI API."""

    @property
    def provider_id(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return "gpt-4o-mini"

    @property
    def env_var(self) -> str:
        return "OPENAI_API_KEY"

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        api_key = os.environ.get("OPENAI_API_KEY")
        if not api_key:
            msg = "Missing OPENAI_API_KEY environment variable"
            raise ValueError(msg)

        openai = _import_openai("assisted generation")
        client = openai.OpenAI(api_key=api_key)
        use_model = model or self.default_model

        logger.info("Requesting boolean string from OpenAI API (%s)...", use_model)
        return _chat(client, use_model, prompt, system, max_tokens)


class OllamaProvider(LLMProvider):
    """LLM provider using a local Ollama instance via its OpenAI-compatible API."""

    @property
    def provider_id(self) -> str:
        return "ollama"

    @property
    def default_model(self) -> str:
        return "llama3"

    @property
    def env_var(self) -> None:
        return None

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        openai = _import_openai("Ollama (OpenAI-compatible API)")
        client = openai.OpenAI(base_url=_OLLAMA_BASE_URL, api_key="ollama")
        use_model = model or self.default_model

        logger.info("Requesting boolean string from Ollama (%s)...", use_model)
        return _chat(client, use_model, prompt, system, max_tokens)
