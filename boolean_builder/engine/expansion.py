"""Lexicon-driven expansion of each request field into a TermSet.

Every expansion starts with the user's own term (quoted when it is a phrase)
followed by the lexicon aliases, so the raw input is always a member of its
own set. A lexicon miss yields the raw term alone.

Skills are flattened into ONE TermSet across all skills. The assembler then
emits a single OR-block in which any one skill or synonym satisfies the
clause, rather than an AND of per-skill OR-blocks. This favors recall over
precision and is kept on purpose because it is the established query shape.
"""

import logging
from collections.abc import Mapping

from boolean_builder.engine.lexicon import (
    DEFAULT_EXCLUSIONS,
    LOCATION_EQUIVALENTS,
    ROLE_SYNONYMS,
    SKILL_SYNONYMS,
)
from boolean_builder.engine.normalizer import TermSet, canonical_key, quote_term

logger = logging.getLogger(__name__)

# Substrings that mark a location as already composed boolean logic.
PRECOMPOSED_MARKERS = (" OR ", "|")


def expand_role(role: str) -> TermSet:
    """Expand a role title into its raw term plus role synonyms."""
    return _expand(role.strip(), ROLE_SYNONYMS, "role")


def expand_skills(skills: list[str]) -> TermSet:
    """Expand every skill and merge all of them into one flattened TermSet."""
    result = TermSet()
    for skill in skills:
        result.extend(_expand(skill.strip(), SKILL_SYNONYMS, "skill"))
    return result


def expand_location(location: str) -> TermSet:
    """Expand a location into its local variants.

    A location that already contains ``" OR "`` or ``"|"`` is treated as
    pre-composed and returned as a single unexpanded term.
    """
    location = location.strip()
    if not location:
        return TermSet()
    if any(marker in location for marker in PRECOMPOSED_MARKERS):
        logger.debug("Location '%s' is pre-composed, skipping expansion", location)
        return TermSet([location])
    return _expand(location, LOCATION_EQUIVALENTS, "location")


def expand_exclusions(exclude: list[str]) -> TermSet:
    """Default seniority exclusions followed by the caller's own exclusions."""
    return TermSet([*DEFAULT_EXCLUSIONS, *exclude])


def _expand(term: str, lexicon: Mapping[str, tuple[str, ...]], field: str) -> TermSet:
    if not term:
        return TermSet()
    result = TermSet([quote_term(term)])
    aliases = lexicon.get(canonical_key(term))
    if aliases is None:
        logger.debug("No %s synonyms for '%s', using raw term", field, term)
    else:
        result.extend(aliases)
    return result
