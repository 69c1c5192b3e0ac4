"""End-to-end tests for the deterministic engine (golden scenarios)."""

import pytest

from boolean_builder.core.schemas import Platform, SearchRequest
from boolean_builder.engine.builder import LOCAL_PROMPT_VERSION, build_boolean

DEFAULT_NOTS = "NOT intern NOT junior NOT bootcamp NOT entry NOT trainee"


def _build(**fields: object) -> str:
    return build_boolean(SearchRequest(**fields)).boolean  # type: ignore[arg-type]


class TestScenarios:
    def test_linkedin_software_engineer_nyc(self) -> None:
        result = _build(
            role="Software Engineer",
            skills="TypeScript",
            exclude="",
            location="NYC",
            platform="LinkedIn",
        )
        assert result.startswith("(site:linkedin.com/in OR site:linkedin.com/pub) AND (")
        assert '"software engineer"' in result
        assert "(TypeScript OR TS)" in result
        assert '(NYC OR "New York" OR "New York City" OR Manhattan OR Brooklyn)' in result
        assert result.endswith(DEFAULT_NOTS)
        assert result == (
            "(site:linkedin.com/in OR site:linkedin.com/pub) AND "
            '("Software Engineer" OR "software engineer" OR developer OR programmer OR SWE '
            'OR "software developer" OR engineer) AND '
            "(TypeScript OR TS) AND "
            '(NYC OR "New York" OR "New York City" OR Manhattan OR Brooklyn) AND '
            f"{DEFAULT_NOTS}"
        )

    def test_generic_designer(self) -> None:
        result = _build(role="Designer", platform="Generic")
        assert result == (
            '(Designer OR designer OR "ux designer" OR "ui designer" '
            'OR "product designer" OR "visual designer") AND '
            f"{DEFAULT_NOTS}"
        )
        assert "site:" not in result

    def test_github_engineer(self) -> None:
        result = _build(role="Engineer", platform=Platform.GITHUB)
        assert result.startswith("site:github.com (in:readme OR in:bio) AND")

    def test_google_xray_uses_linkedin_people_pages(self) -> None:
        result = _build(role="Analyst", platform="Google X-Ray")
        assert result.startswith("(site:linkedin.com/in OR site:linkedin.com/pub) AND (Analyst")


class TestProperties:
    @pytest.mark.parametrize("platform", list(Platform))
    def test_default_exclusions_always_present(self, platform: Platform) -> None:
        result = _build(role="Sales", exclude="contract", platform=platform)
        assert f"{DEFAULT_NOTS} NOT contract" in result

    def test_custom_exclusion_phrase_quoted(self) -> None:
        result = _build(role="Sales", exclude="part time, Recruiter")
        assert result.endswith(f'{DEFAULT_NOTS} NOT "part time" NOT Recruiter')

    def test_precomposed_location_passthrough(self) -> None:
        result = _build(role="Sommelier", location="NYC | Remote")
        assert result == f"Sommelier AND NYC | Remote AND {DEFAULT_NOTS}"

    def test_multiple_skills_single_or_block(self) -> None:
        result = _build(role="Sommelier", skills="React, Kubernetes")
        assert "(React OR ReactJS OR React.js OR Kubernetes OR k8s)" in result
        assert result.count(" AND ") == 2

    def test_display_casing_survives(self) -> None:
        result = _build(role="Chief Happiness Officer", skills="eLiXiR", location="Lisbon")
        assert '"Chief Happiness Officer"' in result
        assert "eLiXiR" in result
        assert "Lisbon" in result

    def test_deterministic(self) -> None:
        request = SearchRequest(
            role="Data Scientist", skills="Python, SQL, AWS", location="SF", platform="LinkedIn"
        )
        first = build_boolean(request)
        assert all(build_boolean(request) == first for _ in range(5))


class TestResultBundle:
    def test_version_and_explanation(self) -> None:
        bundle = build_boolean(SearchRequest(role="Designer"))
        assert bundle.prompt_version == LOCAL_PROMPT_VERSION == "local-v1"
        assert bundle.explanation == (
            '• Role synonyms: (Designer OR designer OR "ux designer" OR "ui designer" '
            'OR "product designer" OR "visual designer")\n'
            "• Exclusions: intern, junior, bootcamp, entry, trainee\n"
            "• Platform mode: Generic"
        )

    def test_explanation_lists_location_and_skills(self) -> None:
        bundle = build_boolean(
            SearchRequest(role="Engineer", skills="Docker", location="Denver", platform="GitHub")
        )
        lines = bundle.explanation.split("\n")
        assert lines[1] == "• Required skills: (Docker OR containerization)"
        assert lines[2] == '• Location variants: (Denver OR "Greater Denver" OR Boulder)'
        assert lines[-1] == "• Platform mode: GitHub"
