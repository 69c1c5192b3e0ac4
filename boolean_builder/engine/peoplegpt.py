"""Natural-language sourcing prompt and Juicebox PeopleGPT deep link.

Pure functions, same inputs as the boolean engine. The link opens PeopleGPT
with the prompt pre-filled.
"""

from urllib.parse import quote

from boolean_builder.core.schemas import SearchRequest

PEOPLEGPT_URL = "https://app.juicebox.ai/peoplegpt"
PROFILE_COUNT = 25

# Characters encodeURIComponent leaves unescaped besides alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!*'()"


def build_peoplegpt_prompt(request: SearchRequest) -> str:
    """Describe the search as one sentence-per-field prompt.

    Empty optional fields are omitted along with their sentence.
    """
    parts = [f"Source top {request.role} candidates."]
    if request.skills:
        parts.append(f"Must-have skills: {request.skills}.")
    if request.exclude:
        parts.append(f"Exclude: {request.exclude}.")
    if request.location:
        parts.append(f"Location: {request.location}.")
    parts.append(f"Return {PROFILE_COUNT} high-signal profiles with emails if available.")
    return " ".join(parts)


def build_peoplegpt_link(prompt: str) -> str:
    return f"{PEOPLEGPT_URL}?prompt={quote(prompt, safe=_URI_COMPONENT_SAFE)}"
