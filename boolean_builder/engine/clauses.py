"""Boolean clause assembly: OR-blocks, NOT-clauses and the AND composition."""

import re
from collections.abc import Iterable

from boolean_builder.engine.normalizer import TermSet

_NEEDS_QUOTES = re.compile(r'[\s"]')


def or_block(terms: Iterable[str]) -> str:
    """Render terms as a disjunction.

    No terms gives "", one term is returned bare, two or more are wrapped as
    ``(t1 OR t2 ...)`` in input order.
    """
    terms = list(terms)
    if not terms:
        return ""
    if len(terms) == 1:
        return terms[0]
    return "(" + " OR ".join(terms) + ")"


def not_block(terms: Iterable[str]) -> str:
    """Negate each term independently, space-joined (an AND of NOTs).

    Terms with whitespace or quotes are re-quoted with inner quotes escaped.
    """
    return " ".join(f"NOT {_quote_exclusion(t)}" for t in terms)


def _quote_exclusion(term: str) -> str:
    if not _NEEDS_QUOTES.search(term):
        return term
    escaped = term.replace('"', '\\"')
    return f'"{escaped}"'


def assemble(role: TermSet, skills: TermSet, location: TermSet, exclusions: TermSet) -> str:
    """AND-join the non-empty blocks in fixed order: role, skills, location, exclusions."""
    blocks = [or_block(role), or_block(skills), or_block(location), not_block(exclusions)]
    return " AND ".join(b for b in blocks if b)
