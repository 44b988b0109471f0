"""tau-scale: Fixed-width integer normalization scaled by tau."""

from tau_scale.core import normalize, trace
from tau_scale.pipeline import TAU, TransformationState

__version__ = "0.1.0"

__all__ = [
    "normalize",
    "trace",
    "TAU",
    "TransformationState",
    "__version__",
]
