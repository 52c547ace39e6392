"""Factory functions for creating pre-configured measure instances."""

from __future__ import annotations

from lcc_measure.config import Settings
from lcc_measure.measure import AddCostPerFloorAreaToBuilding


def create_default_measure(settings: Settings | None = None) -> AddCostPerFloorAreaToBuilding:
    """Create the cost measure wired up with environment settings.

    This is the recommended way to get a measure for typical usage. When
    ``settings`` is omitted they are read from ``LCC_*`` environment
    variables.

    Example::

        from lcc_measure import create_default_measure, MeasureRunner, ModelBuilding

        measure = create_default_measure()
        measure.run(ModelBuilding.from_floor_area_ft2(10_000), MeasureRunner(), {})
    """
    return AddCostPerFloorAreaToBuilding(settings or Settings())
