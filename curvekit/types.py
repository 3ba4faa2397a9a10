from __future__ import annotations

from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class CurveSpec(BaseModel):
    name: str = Field("linear", description="Registry name of a built-in easing")
    factory: Optional[str] = Field(None, description="Factory name: polyIn, backIn, elasticIn or bounceIn")
    params: List[float] = Field(default_factory=list, description="Arguments passed to the factory")
    mode: Literal["in", "out", "inOut"] = Field("in", description="Direction applied to factory curves")
    squeeze: Optional[Tuple[float, float]] = Field(None, description="Sub-range [x1, x2] mapped onto [0,1]")
    start: float = Field(0.0, description="Output value at t=0")
    end: float = Field(1.0, description="Output value at t=1")


class AnimationState(BaseModel):
    value: float = 0.0
    velocity: float = 0.0
    finished: bool = False


class RenderConfig(BaseModel):
    width: int = Field(640, gt=0)
    height: int = Field(480, gt=0)
    steps: int = Field(200, description="Number of samples along the curve")
    padding: int = Field(40, ge=0)
    output_path: str = "./curve.png"

    @field_validator("steps")
    @classmethod
    def _at_least_two(cls, value: int) -> int:
        if value < 2:
            raise ValueError("steps must be at least 2")
        return value
