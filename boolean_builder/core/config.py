"""Configuration models and YAML loader for the boolean builder."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from boolean_builder.assist import available_providers
from boolean_builder.core.schemas import Platform, SearchRequest


class GeneratorSettings(BaseModel):
    """Which generation path to use and the platform assumed when none is given."""

    mode: Literal["local", "assist"] = "local"
    default_platform: Platform = Platform.GENERIC

    @field_validator("default_platform", mode="before")
    @classmethod
    def platform_lenient(cls, v: object) -> object:
        if isinstance(v, str):
            return Platform.parse(v)
        return v


class AssistConfig(BaseModel):
    """Remote assist provider settings. API keys come from the environment only."""

    provider: str = "anthropic"
    model: str | None = None
    max_tokens: int = Field(default=800, ge=1)

    @field_validator("provider")
    @classmethod
    def provider_registered(cls, v: str) -> str:
        v = v.lower().strip()
        if v not in available_providers():
            msg = f"provider must be one of {available_providers()}, got '{v}'"
            raise ValueError(msg)
        return v


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    assist: AssistConfig = Field(default_factory=AssistConfig)
    requests: list[SearchRequest] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
