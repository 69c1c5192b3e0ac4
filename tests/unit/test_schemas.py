"""Tests for core schemas: Platform, SearchRequest, ResultBundle."""

import json

import pytest
from pydantic import ValidationError

from boolean_builder.core.schemas import Platform, ResultBundle, SearchRequest


class TestPlatform:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("LinkedIn", Platform.LINKEDIN),
            ("linkedin", Platform.LINKEDIN),
            ("GitHub", Platform.GITHUB),
            ("Google X-Ray", Platform.GOOGLE_XRAY),
            ("GoogleXRay", Platform.GOOGLE_XRAY),
            ("google_xray", Platform.GOOGLE_XRAY),
            ("generic", Platform.GENERIC),
        ],
    )
    def test_parse_lenient(self, label: str, expected: Platform) -> None:
        assert Platform.parse(label) is expected

    def test_parse_member_passthrough(self) -> None:
        assert Platform.parse(Platform.GITHUB) is Platform.GITHUB

    def test_unknown_platform(self) -> None:
        with pytest.raises(ValueError, match="Unknown platform 'Bing'"):
            Platform.parse("Bing")


class TestSearchRequest:
    def test_defaults(self) -> None:
        r = SearchRequest(role="Engineer")
        assert r.skills == ""
        assert r.exclude == ""
        assert r.location == ""
        assert r.platform is Platform.GENERIC

    def test_role_required(self) -> None:
        with pytest.raises(ValidationError):
            SearchRequest()  # type: ignore[call-arg]

    @pytest.mark.parametrize("role", ["", "   "])
    def test_role_not_empty(self, role: str) -> None:
        with pytest.raises(ValidationError, match="role must not be empty"):
            SearchRequest(role=role)

    def test_role_stripped(self) -> None:
        assert SearchRequest(role="  Designer ").role == "Designer"

    def test_none_optional_fields(self) -> None:
        r = SearchRequest(role="Engineer", skills=None, exclude=None, location=None)  # type: ignore[arg-type]
        assert r.skills == r.exclude == r.location == ""

    def test_platform_from_label(self) -> None:
        assert SearchRequest(role="x", platform="google x-ray").platform is Platform.GOOGLE_XRAY

    def test_unknown_platform_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchRequest(role="x", platform="Bing")

    def test_frozen(self) -> None:
        r = SearchRequest(role="x")
        with pytest.raises(ValidationError):
            r.role = "y"  # type: ignore[misc]


class TestResultBundle:
    def test_alias_and_field_name(self) -> None:
        a = ResultBundle(boolean="b", explanation="e", promptVersion="v")
        b = ResultBundle(boolean="b", explanation="e", prompt_version="v")
        assert a == b
        assert a.prompt_version == "v"

    def test_to_json_uses_wire_keys(self) -> None:
        bundle = ResultBundle(boolean="x", explanation="• y", prompt_version="local-v1")
        data = json.loads(bundle.to_json())
        assert data == {"boolean": "x", "explanation": "• y", "promptVersion": "local-v1"}

    def test_all_fields_required(self) -> None:
        with pytest.raises(ValidationError):
            ResultBundle.model_validate({"boolean": "x"})
