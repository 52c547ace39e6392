"""Custom exception hierarchy for the lcc_measure package."""

from __future__ import annotations


class LccMeasureError(Exception):
    """Base exception for all lcc_measure errors."""


class InvalidParameterError(LccMeasureError):
    """Raised when a lifecycle argument is outside its valid range."""


class ArgumentValidationError(LccMeasureError):
    """Raised when user arguments are missing or have the wrong type."""


class HostModelError(LccMeasureError):
    """Raised when the host model rejects a cost record operation."""


class MeasureNotFoundError(LccMeasureError):
    """Raised when no registered measure matches a requested name."""
