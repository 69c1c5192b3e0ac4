"""LLM provider registry with lazy loading.

Callers normally go through the remote path, which builds the prompt,
calls the provider and degrades non-JSON replies to plain text:

    from boolean_builder.assist import get_provider
    from boolean_builder.assist.remote import generate_remote

    bundle = generate_remote(request, get_provider("ollama"), model="llama3")
    print(bundle.boolean)

Provider SDKs are imported only when a provider is first requested.
"""

from __future__ import annotations

import importlib

from boolean_builder.assist.base import LLMProvider, parse_response

__all__ = ["LLMProvider", "available_providers", "get_provider", "parse_response"]

# Lazy registry: maps provider name → (module_path, class_name)
_REGISTRY: dict[str, tuple[str, str]] = {
    "anthropic": ("boolean_builder.assist.anthropic", "AnthropicProvider"),
    "openai": ("boolean_builder.assist.openai", "OpenAIProvider"),
    "ollama": ("boolean_builder.assist.openai", "OllamaProvider"),
}


def get_provider(name: str) -> LLMProvider:
    """Instantiate and return an LLM provider by name.

    Args:
        name: Provider identifier (anthropic, openai, ollama).

    Returns:
        An LLMProvider instance.

    Raises:
        ValueError: If the provider name is unknown.
    """
    if name not in _REGISTRY:
        valid = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown LLM provider '{name}'. Available: {valid}"
        raise ValueError(msg)

    module_path, class_name = _REGISTRY[name]
    module = importlib.import_module(module_path)
    cls = getattr(module, class_name)
    return cls()  # type: ignore[no-any-return]


def available_providers() -> list[str]:
    """Return sorted list of registered provider names."""
    return sorted(_REGISTRY)
