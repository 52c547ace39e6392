"""Area unit conversions between inch-pound and SI.

Cost rates are entered per square foot but stored by the host per square
meter, so rates and areas convert by the area factor, never the length one.
"""

from __future__ import annotations

# 1 ft^2 expressed in m^2 (exact, from 1 ft = 0.3048 m)
M2_PER_FT2 = 0.09290304


def ft2_to_m2(area_ft2: float) -> float:
    """Convert an area in square feet to square meters."""
    return area_ft2 * M2_PER_FT2


def m2_to_ft2(area_m2: float) -> float:
    """Convert an area in square meters to square feet."""
    return area_m2 / M2_PER_FT2


def cost_per_ft2_to_per_m2(rate_ip: float) -> float:
    """Convert a $/ft^2 rate to the equivalent $/m^2 rate.

    A square meter holds ~10.76 square feet, so the per-m^2 rate is larger.
    """
    return rate_ip / M2_PER_FT2


def cost_per_m2_to_per_ft2(rate_si: float) -> float:
    """Convert a $/m^2 rate to the equivalent $/ft^2 rate."""
    return rate_si * M2_PER_FT2
