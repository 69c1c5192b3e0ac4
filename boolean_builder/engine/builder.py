"""Deterministic boolean query engine.

Pure functions, zero I/O. Safe to call concurrently: the lexicons are
read-only and every intermediate value is created per call.
"""

import logging

from boolean_builder.core.schemas import ResultBundle, SearchRequest
from boolean_builder.engine.clauses import assemble
from boolean_builder.engine.expansion import (
    expand_exclusions,
    expand_location,
    expand_role,
    expand_skills,
)
from boolean_builder.engine.explanation import render_explanation
from boolean_builder.engine.normalizer import normalize_csv
from boolean_builder.engine.platforms import apply_platform

logger = logging.getLogger(__name__)

LOCAL_PROMPT_VERSION = "local-v1"


def build_boolean(request: SearchRequest) -> ResultBundle:
    """Build the boolean string and its explanation for one request.

    Args:
        request: Validated search inputs.

    Returns:
        ResultBundle tagged with LOCAL_PROMPT_VERSION.
    """
    role_terms = expand_role(request.role)
    skill_terms = expand_skills(normalize_csv(request.skills))
    location_terms = expand_location(request.location)
    exclusion_terms = expand_exclusions(normalize_csv(request.exclude))

    body = assemble(role_terms, skill_terms, location_terms, exclusion_terms)
    query = apply_platform(body, request.platform)
    explanation = render_explanation(
        role_terms, skill_terms, location_terms, exclusion_terms, request.platform
    )

    logger.debug(
        "Built %s query: %d role, %d skill, %d location, %d exclusion terms",
        request.platform.value,
        len(role_terms),
        len(skill_terms),
        len(location_terms),
        len(exclusion_terms),
    )
    return ResultBundle(boolean=query, explanation=explanation, prompt_version=LOCAL_PROMPT_VERSION)
