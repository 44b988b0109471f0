"""Fixed-width normalization engine."""

from __future__ import annotations

import logging

from tau_scale.exceptions import InputError
from tau_scale.pipeline.types import MASK, TAU, TransformationState

logger = logging.getLogger(__name__)


def to_unsigned(x: int) -> int:
    """Reduce an integer into the unsigned 64-bit domain (modulo 2**64)."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise InputError(f"Expected an integer, got {type(x).__name__}: {x!r}")
    return x & MASK


def round_up_to_even(value: int) -> int:
    """Stage A: bump odd values to the next even one, wrapping at 2**64."""
    if value % 2 == 0:
        return value
    return (value + 1) & MASK


def scale_three_halves(value: int) -> int:
    """Stage B: halve then triple. The halving is exact for even input."""
    return (value // 2 * 3) & MASK


def floor_to_hundred(value: int) -> int:
    """Stage C: step down to the nearest multiple of 100.

    Visits at most 99 values, so the cost does not depend on magnitude.
    """
    while value % 100 != 0:
        value -= 1
    return value


def scale_to_output(value: int) -> float:
    """Stage D: convert to double and multiply by tau."""
    return float(value) * TAU


class TransformationEngine:
    """Runs the four stages in order and records every intermediate."""

    def run(self, x: int) -> TransformationState:
        value = to_unsigned(x)
        if value != x:
            logger.debug("input %d wrapped to %d", x, value)

        after_round_even = round_up_to_even(value)
        if after_round_even < value:
            logger.debug("stage A wrapped %d to %d", value, after_round_even)

        after_scale = scale_three_halves(after_round_even)
        intermediate = floor_to_hundred(after_scale)
        output = scale_to_output(intermediate)
        logger.debug(
            "normalized %d: even=%d scaled=%d floored=%d output=%f",
            value,
            after_round_even,
            after_scale,
            intermediate,
            output,
        )

        return TransformationState(
            input=value,
            after_round_even=after_round_even,
            after_scale=after_scale,
            intermediate=intermediate,
            output=output,
        )
