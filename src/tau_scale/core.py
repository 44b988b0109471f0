"""Core normalization functions."""

from tau_scale.config import TransformConfig
from tau_scale.pipeline.engine import TransformationEngine
from tau_scale.pipeline.types import TransformationState


def format_fixed(value: float) -> str:
    """Render a float in fixed notation with six fractional digits."""
    return "%f" % value


def trace(x: int) -> TransformationState:
    """Run the pipeline without writing anything and return every stage."""
    return TransformationEngine().run(x)


def normalize(x: int, *, debug: bool | None = None) -> float:
    """Normalize an unsigned 64-bit integer and scale it by tau.

    Args:
        x: Input integer. Values outside [0, 2**64) are reduced modulo 2**64.
        debug: Also report the floored integer before the result. Defaults to
            the `TAU_SCALE_DEBUG` env var, read on every call.

    Returns:
        The floored integer multiplied by tau.

    Raises:
        InputError: If x is not an integer.
    """
    state = trace(x)
    if debug is None:
        debug = TransformConfig.from_env().debug

    if debug:
        print(f"The final value is {state.intermediate}")
    print(f"The actual final value is {format_fixed(state.output)}")

    return state.output
