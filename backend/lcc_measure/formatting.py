"""Formatting helpers for measure status messages.

Turns raw areas and costs into the comma-grouped numbers shown to the
modeler (e.g., 4125001.25641 becomes '4,125,001.26' or '4,125,001').
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def neat_numbers(number: float, round_to: int = 2) -> str:
    """Format a number with thousands separators.

    - ``round_to == 2``: two decimal places (e.g., '1,234,567.89')
    - anything else: rounded to an integer, half away from zero
      (e.g., '-1,500')

    Non-finite values are returned as ``str(number)`` ('inf', 'nan').
    """
    if not math.isfinite(number):
        return str(number)
    if round_to == 2:
        return f"{number:,.2f}"
    rounded = Decimal(str(number)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{int(rounded):,}"


def format_currency(amount: float) -> str:
    """Format a currency amount as whole dollars, e.g. '$1,234,567' or '$-1,500'."""
    return f"${neat_numbers(amount, 0)}"
