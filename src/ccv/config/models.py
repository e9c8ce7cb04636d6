"""Pydantic models for the ``[tool.ccv]`` configuration table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ccv.core.version import (
    DEFAULT_INITIAL_VERSION,
    DEFAULT_OUTPUT_PREFIX,
    BumpType,
    parse_tag_version,
)
from ccv.exceptions import MalformedTagError


class VersionConfig(BaseModel):
    """How versions are reported."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initial_version: str = Field(
        default=DEFAULT_INITIAL_VERSION,
        description="Version reported when the repository has no tags yet",
    )
    initial_bump: BumpType = Field(
        default=BumpType.MINOR,
        description="Bump type reported when the repository has no tags yet",
    )
    output_prefix: str = Field(
        default=DEFAULT_OUTPUT_PREFIX,
        description="Prefix of the reported version, e.g. 'v' in 'v1.2.3'",
    )

    @field_validator("initial_version")
    @classmethod
    def _check_initial_version(cls, value: str) -> str:
        try:
            parse_tag_version(value)
        except MalformedTagError as e:
            raise ValueError(f"{value!r} is not a semantic version") from e
        return value


class CcvConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: VersionConfig = Field(default_factory=VersionConfig)
