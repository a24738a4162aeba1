"""
Shared helpers for the image plotter: error types and numeric coercion
"""
import math
import re

COVER = 'cover'
CONTAIN = 'contain'
ORIENTATIONS = (COVER, CONTAIN)

# Leading integer of a string, e.g. "640px" -> 640, "1e3" -> 1
_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


class PlotterError(Exception):
    """Base class for image plotter errors."""


class InvalidDimensionsError(PlotterError, ValueError):
    """Raised when a rectangle cannot be built from the given size."""


def to_int(value, default=None):
    """Truncate a number to an int, or read the leading integer of a string.

    Floats are truncated toward zero. Strings only contribute their leading
    digits, so "12.7" and "12px" both give 12. When the value cannot be
    converted, ``default`` is returned if one was given, otherwise the
    conversion error propagates.
    """
    if value is None:
        if default is not None:
            return default
        raise TypeError("expected a number, got None")

    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
        if default is not None:
            return default
        raise ValueError(f"no leading integer in {value!r}")

    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        if default is not None:
            return default
        raise


def safe_div(numerator, denominator):
    """Divide without raising on a zero denominator (yields inf or nan)."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
