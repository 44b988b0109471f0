"""Normalization pipeline for tau-scale."""

from tau_scale.pipeline.engine import (
    TransformationEngine,
    floor_to_hundred,
    round_up_to_even,
    scale_three_halves,
    scale_to_output,
)
from tau_scale.pipeline.types import MASK, PI, TAU, WIDTH, TransformationState

__all__ = [
    "MASK",
    "PI",
    "TAU",
    "WIDTH",
    "TransformationEngine",
    "TransformationState",
    "floor_to_hundred",
    "round_up_to_even",
    "scale_three_halves",
    "scale_to_output",
]
