"""Custom exceptions for tau-scale."""


class TauScaleError(Exception):
    """Base exception for tau-scale."""

    pass


class InputError(TauScaleError, TypeError):
    """Raised when the input is not an integer."""

    pass
