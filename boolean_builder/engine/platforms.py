"""Platform-specific site/operator prefixes applied to an assembled query body."""

from collections.abc import Mapping
from types import MappingProxyType

from boolean_builder.core.schemas import Platform

_LINKEDIN_PEOPLE = "(site:linkedin.com/in OR site:linkedin.com/pub)"

# Google X-Ray falls back to LinkedIn people pages. Generic has no prefix.
PLATFORM_PREFIXES: Mapping[Platform, str] = MappingProxyType({
    Platform.LINKEDIN: _LINKEDIN_PEOPLE,
    Platform.GITHUB: "site:github.com (in:readme OR in:bio)",
    Platform.GOOGLE_XRAY: _LINKEDIN_PEOPLE,
    Platform.GENERIC: "",
})


def apply_platform(body: str, platform: Platform) -> str:
    """Prefix the query body with the platform's site restriction.

    An empty body yields the prefix alone, never a dangling ``AND``.
    """
    prefix = PLATFORM_PREFIXES[platform]
    body = body.strip()
    if not prefix:
        return body
    if not body:
        return prefix
    return f"{prefix} AND {body}"
