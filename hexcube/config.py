"""Validated configuration for the public hex operation surface."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .hex import I32_MAX


class NegativeRadiusPolicy(str, Enum):
    """How a negative traversal radius is handled."""

    REJECT = "reject"
    CLAMP = "clamp"


class HexConfig(BaseModel):
    """Limits and policies applied by :class:`~hexcube.functions.HexFunctions`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    coordinate_limit: int = Field(default=I32_MAX, ge=1, le=I32_MAX)
    negative_radius: NegativeRadiusPolicy = Field(default=NegativeRadiusPolicy.REJECT)
    max_radius: int | None = Field(default=None, ge=0)

    @field_validator("negative_radius", mode="before")
    @classmethod
    def _normalise_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_json(cls, text: str | bytes) -> HexConfig:
        """Build a configuration from a JSON document."""

        return cls.model_validate_json(text)

    def within_limit(self, value: int) -> bool:
        return abs(value) <= self.coordinate_limit
