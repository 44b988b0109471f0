"""Diagnostic configuration for tau-scale."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEBUG_ENV_VAR = "TAU_SCALE_DEBUG"


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TransformConfig:
    debug: bool = False

    @classmethod
    def from_env(cls) -> "TransformConfig":
        return cls(debug=_parse_bool(os.getenv(DEBUG_ENV_VAR), False))
