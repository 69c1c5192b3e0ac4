"""Abstract base class for LLM providers and shared response parsing."""

import json
import logging
import re
from abc import ABC, abstractmethod

from pydantic import ValidationError

from boolean_builder.core.schemas import ResultBundle

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 800

FALLBACK_EXPLANATION = "Generated boolean string."
FALLBACK_PROMPT_VERSION = "v1"

SYSTEM_PROMPT = (
    'You are "Juicebox Boolean Builder Pro", an expert technical sourcer.\n'
    "Return clean JSON only, no extra prose.\n\n"
    "Rules:\n"
    "- Build precise Boolean search strings tailored to the selected platform.\n"
    "- Prefer recall without sacrificing precision; avoid over-nesting.\n"
    "- Use OR for synonyms/aliases, AND for must-haves, NOT for exclusions.\n"
    "- Location handling:\n"
    '  - If provided, include common variants (e.g., "NYC" OR "New York").\n'
    "- Platform syntax:\n"
    "  - LinkedIn (site:linkedin.com/in OR /pub, title: if useful, company if inferred).\n"
    "  - GitHub (site:github.com, in:bio OR in:readme, language: where relevant).\n"
    "  - Google X-Ray (site filters and operators appropriate to people pages).\n"
    "  - Generic: plain Boolean for internal ATS/CRM fields.\n"
    "- Avoid quotes unless needed; group OR blocks in parentheses.\n"
    '- Expand common role synonyms (e.g., "Software Engineer" ~ '
    '(developer OR "software engineer" OR "SWE")).\n'
    "- Exclude junior/intern if hinted by seniority.\n"
    "- Always produce a short, clear explanation of each main clause.\n\n"
    "Output JSON schema:\n"
    "{\n"
    '  "boolean": "STRING",\n'
    '  "explanation": "WHY each block exists (1-5 bullets)",\n'
    '  "promptVersion": "peoplegpt-v1"\n'
    "}"
)

# Fences must open with a bare "\n"; CRLF replies fall through to the raw-text branch.
_JSON_FENCE = re.compile(r"```json\n(.*?)\n```", re.DOTALL)
_BARE_FENCE = re.compile(r"```\n(.*?)\n```", re.DOTALL)


def extract_json_text(text: str) -> str:
    """Pick the JSON candidate out of a model response.

    Tries a ```json fenced block, then a bare ``` fenced block, then falls
    back to the whole text.
    """
    for pattern in (_JSON_FENCE, _BARE_FENCE):
        match = pattern.search(text)
        if match:
            return match.group(1)
    return text


def parse_response(raw_text: str) -> ResultBundle:
    """Parse an LLM response into a ResultBundle.

    Never raises: text that does not yield a valid bundle becomes the
    ``boolean`` field verbatim, with a fixed explanation and version tag.
    """
    content = raw_text.strip()
    try:
        data = json.loads(extract_json_text(content))
        return ResultBundle.model_validate(data)
    except (json.JSONDecodeError, RecursionError, ValidationError) as e:
        logger.warning("LLM response is not a result bundle, using plain text: %s", e)
        return ResultBundle(
            boolean=content,
            explanation=FALLBACK_EXPLANATION,
            prompt_version=FALLBACK_PROMPT_VERSION,
        )


class LLMProvider(ABC):
    """Base class that every LLM provider must implement."""

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Unique identifier for this provider (e.g. 'anthropic')."""

    @abstractmethod
    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        """Send a prompt to the LLM and return raw response text.

        Args:
            prompt: User instruction text.
            model: Override the provider's default model. None uses default.
            system: Override the system prompt. None falls back to SYSTEM_PROMPT.
            max_tokens: Upper bound on generated tokens.

        Returns:
            Raw text response from the LLM (expected to be JSON, maybe fenced).
        """

    @property
    @abstractmethod
    def default_model(self) -> str:
        """The default model ID used when no override is specified."""

    @property
    @abstractmethod
    def env_var(self) -> str | None:
        """Environment variable name for the API key, or None if not needed."""
