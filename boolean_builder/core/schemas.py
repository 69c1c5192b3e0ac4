"""Core data models for the boolean builder."""

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Platform(str, Enum):
    """Target search surface. The value is the label shown in explanations."""

    LINKEDIN = "LinkedIn"
    GITHUB = "GitHub"
    GOOGLE_XRAY = "Google X-Ray"
    GENERIC = "Generic"

    @classmethod
    def parse(cls, value: "str | Platform") -> "Platform":
        """Resolve a platform label leniently (case, spaces, '-' and '_' ignored).

        Raises:
            ValueError: If the label matches no supported platform.
        """
        if isinstance(value, Platform):
            return value
        key = _squash(value)
        for member in cls:
            if key in (_squash(member.value), _squash(member.name)):
                return member
        valid = ", ".join(p.value for p in cls)
        msg = f"Unknown platform '{value}'. Available: {valid}"
        raise ValueError(msg)


def _squash(label: str) -> str:
    return "".join(ch for ch in label.lower() if ch not in " -_")


class SearchRequest(BaseModel):
    """Inputs for one generation call.

    Frozen. ``skills`` and ``exclude`` stay raw comma-separated text; splitting
    is the normalizer's job.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    skills: str = ""
    exclude: str = ""
    location: str = ""
    platform: Platform = Platform.GENERIC

    @field_validator("role")
    @classmethod
    def role_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "role must not be empty"
            raise ValueError(msg)
        return v.strip()

    @field_validator("skills", "exclude", "location", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("platform", mode="before")
    @classmethod
    def platform_lenient(cls, v: object) -> object:
        if isinstance(v, str):
            return Platform.parse(v)
        return v


class ResultBundle(BaseModel):
    """Output shared by the local engine and the remote assist path."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    boolean: str
    explanation: str
    prompt_version: str = Field(alias="promptVersion")

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize with the wire key names (``promptVersion``)."""
        return json.dumps(self.model_dump(by_alias=True), indent=indent, ensure_ascii=False)
