"""Discovery of measures registered through package entry points.

Measures announce themselves in the ``lcc_measure.measures`` entry point
group; the key is the measure class name.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points

from lcc_measure.exceptions import MeasureNotFoundError

logger = logging.getLogger(__name__)

MEASURE_ENTRY_POINT_GROUP = "lcc_measure.measures"


def discover_measures() -> dict[str, type]:
    """Load every measure class registered in the entry point group."""
    measures: dict[str, type] = {}
    for ep in entry_points(group=MEASURE_ENTRY_POINT_GROUP):
        measures[ep.name] = ep.load()
        logger.debug("Discovered measure %s from %s", ep.name, ep.value)
    return measures


def get_measure(name: str) -> type:
    """Return the registered measure class called ``name``.

    Raises:
        MeasureNotFoundError: If no installed package registers ``name``.
    """
    measures = discover_measures()
    try:
        return measures[name]
    except KeyError:
        available = ", ".join(sorted(measures)) or "none"
        msg = f"No measure named '{name}' is registered (available: {available})"
        raise MeasureNotFoundError(msg) from None
