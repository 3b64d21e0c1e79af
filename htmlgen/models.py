"""Pydantic models for builder configuration."""

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComponentConfig(BaseModel):
    """A component registration read from configuration."""

    view: str = Field(..., description="Dotted view name, e.g. components.button.")
    signature: Union[List[Any], Dict[Union[int, str], Any]] = Field(
        default_factory=list,
        description=(
            "Parameter declarations in call order: bare names or "
            "single-entry {name: default} mappings."
        ),
    )

    @field_validator("signature")
    @classmethod
    def _check_declarations(cls, value: Union[List[Any], Dict[Union[int, str], Any]]):
        if isinstance(value, dict):
            return value
        for entry in value:
            if isinstance(entry, str):
                continue
            if isinstance(entry, dict) and len(entry) == 1:
                continue
            raise ValueError(
                "signature entries must be a parameter name or a single {name: default} mapping"
            )
        return value


class BuilderConfig(BaseModel):
    """Top-level configuration for an HtmlBuilder."""

    base_url: str = Field("", alias="baseUrl", description="Root for asset and path URLs.")
    secure_base_url: Optional[str] = Field(
        None,
        alias="secureBaseUrl",
        description="Root used when a secure URL is requested; defaults to https on base_url.",
    )
    templates: List[Path] = Field(
        default_factory=list,
        description="Template directories searched for component views.",
    )
    fallback: Literal["falsy", "absent"] = Field(
        "falsy",
        description=(
            "When a component argument falls back to its default: any falsy value "
            "(falsy) or only a missing/None value (absent)."
        ),
    )
    routes: Dict[str, str] = Field(
        default_factory=dict, description="Named routes mapped to path templates."
    )
    actions: Dict[str, str] = Field(
        default_factory=dict, description="Controller actions mapped to path templates."
    )
    components: Dict[str, ComponentConfig] = Field(
        default_factory=dict, description="Components registered at startup."
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("templates", mode="before")
    @classmethod
    def _coerce_templates(cls, value: Any):
        if isinstance(value, (str, Path)):
            return [value]
        return value
