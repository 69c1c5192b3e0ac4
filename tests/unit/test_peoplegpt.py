"""Tests for the PeopleGPT prompt and deep link."""

from boolean_builder.core.schemas import SearchRequest
from boolean_builder.engine.peoplegpt import (
    PEOPLEGPT_URL,
    build_peoplegpt_link,
    build_peoplegpt_prompt,
)


class TestBuildPeoplegptPrompt:
    def test_all_fields(self) -> None:
        request = SearchRequest(
            role="Software Engineer",
            skills="TypeScript, React",
            exclude="intern",
            location="NYC",
        )
        assert build_peoplegpt_prompt(request) == (
            "Source top Software Engineer candidates. "
            "Must-have skills: TypeScript, React. "
            "Exclude: intern. "
            "Location: NYC. "
            "Return 25 high-signal profiles with emails if available."
        )

    def test_role_only_omits_empty_fields(self) -> None:
        prompt = build_peoplegpt_prompt(SearchRequest(role="Designer"))
        assert prompt == (
            "Source top Designer candidates. "
            "Return 25 high-signal profiles with emails if available."
        )
        assert "Must-have" not in prompt
        assert "  " not in prompt

    def test_skips_only_missing_fields(self) -> None:
        prompt = build_peoplegpt_prompt(SearchRequest(role="Analyst", location="Remote"))
        assert "Location: Remote." in prompt
        assert "Exclude:" not in prompt
        assert "Must-have skills:" not in prompt

    def test_inputs_are_verbatim(self) -> None:
        prompt = build_peoplegpt_prompt(SearchRequest(role="Data Scientist", skills="python,sql"))
        assert "Must-have skills: python,sql." in prompt


class TestBuildPeoplegptLink:
    def test_prefix(self) -> None:
        assert build_peoplegpt_link("x").startswith(f"{PEOPLEGPT_URL}?prompt=")

    def test_spaces_and_reserved_characters_are_escaped(self) -> None:
        link = build_peoplegpt_link("C++ & Go, NYC/SF: 100%?")
        assert link == (
            f"{PEOPLEGPT_URL}?prompt="
            "C%2B%2B%20%26%20Go%2C%20NYC%2FSF%3A%20100%25%3F"
        )

    def test_uri_component_marks_stay_literal(self) -> None:
        link = build_peoplegpt_link("a-b_c.d!e~f*g'h(i)")
        assert link.endswith("?prompt=a-b_c.d!e~f*g'h(i)")

    def test_non_ascii_is_utf8_encoded(self) -> None:
        assert build_peoplegpt_link("São Paulo").endswith("S%C3%A3o%20Paulo")

    def test_quotes_are_escaped(self) -> None:
        assert build_peoplegpt_link('"SWE"').endswith("%22SWE%22")
