"""Bullet-list explanation of which clause came from which field."""

from boolean_builder.core.schemas import Platform
from boolean_builder.engine.clauses import or_block
from boolean_builder.engine.normalizer import TermSet

BULLET = "• "


def render_explanation(
    role: TermSet,
    skills: TermSet,
    location: TermSet,
    exclusions: TermSet,
    platform: Platform,
) -> str:
    """Render one bullet per non-empty field, always ending with the platform mode.

    Works from the per-field term sets rather than re-parsing the final query.
    """
    lines: list[str] = []
    if role:
        lines.append(f"Role synonyms: {or_block(role)}")
    if skills:
        lines.append(f"Required skills: {or_block(skills)}")
    if location:
        lines.append(f"Location variants: {or_block(location)}")
    if exclusions:
        lines.append(f"Exclusions: {', '.join(exclusions)}")
    lines.append(f"Platform mode: {platform.value}")
    return BULLET + f"\n{BULLET}".join(lines)
