"""Number rendering shared by tokens, expression trees, and results."""

from __future__ import annotations

import math


def format_number(value: float, precision: int | None = None) -> str:
    """Render a float for display.

    Integral values drop the fractional part ("14" rather than "14.0").
    Otherwise the shortest repr that round-trips is used, unless a
    precision is given, in which case the value is rounded to that many
    decimal places and trailing zeros are trimmed.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    if precision is not None:
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
        return text

    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
