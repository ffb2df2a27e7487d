"""The public two-axis hex coordinate exchanged with callers."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .cube.coords import CubeCoord
from .errors import HexParseError

I32_MAX = 2**31 - 1
# Symmetric bound: abs() of every accepted component fits in 32 bits.
COORDINATE_MIN = -I32_MAX


class HexPayload(BaseModel):
    """Wire form of a :class:`Hex`: ``[q, r]`` or ``{"q": q, "r": r}``."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    q: int = Field(ge=COORDINATE_MIN, le=I32_MAX)
    r: int = Field(ge=COORDINATE_MIN, le=I32_MAX)

    @model_validator(mode="before")
    @classmethod
    def _accept_pair(cls, value: object) -> object:
        if isinstance(value, list | tuple):
            if len(value) != 2:
                raise ValueError("hex must have exactly two components")
            return {"q": value[0], "r": value[1]}
        return value


@dataclass(frozen=True, slots=True)
class Hex:
    """Axial hex coordinate; the third cube axis is derived as ``-q - r``."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def to_cube(self) -> CubeCoord:
        return CubeCoord(self.q, self.r, -self.q - self.r)

    @classmethod
    def from_cube(cls, cube: CubeCoord) -> Hex:
        return cls(cube.q, cube.r)

    def __add__(self, other: Hex) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex.from_cube(self.to_cube() + other.to_cube())

    def __sub__(self, other: Hex) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex.from_cube(self.to_cube() - other.to_cube())

    def __str__(self) -> str:
        return self.to_text()

    def to_text(self) -> str:
        return f"[{self.q},{self.r}]"

    def to_json(self) -> str:
        return HexPayload.model_construct(q=self.q, r=self.r).model_dump_json()

    @classmethod
    def parse(cls, text: str | bytes) -> Hex:
        """Parse ``[q,r]`` or ``{"q": q, "r": r}`` into a :class:`Hex`.

        Components must lie in ``[-(2**31 - 1), 2**31 - 1]``.
        """

        try:
            payload = HexPayload.model_validate_json(text)
        except ValidationError as exc:
            raise HexParseError(f"invalid hex {text!r}") from exc
        return cls(payload.q, payload.r)
