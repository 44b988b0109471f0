"""Data models and constants for the normalization pipeline."""

from pydantic import BaseModel, Field

WIDTH = 64
MASK = (1 << WIDTH) - 1

# Literal precision is part of the output contract; math.pi gives different bits.
PI = 3.141592653589
TAU = 2 * PI


class TransformationState(BaseModel):
    """Values produced by each stage of a single normalization."""

    input: int = Field(ge=0, le=MASK)
    after_round_even: int = Field(ge=0, le=MASK)
    after_scale: int = Field(ge=0, le=MASK)
    intermediate: int = Field(ge=0, le=MASK)
    output: float
