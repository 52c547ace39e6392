"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging

from lcc_measure.config import Settings
from lcc_measure.factory import create_default_measure
from lcc_measure.measure import AddCostPerFloorAreaToBuilding

logger = logging.getLogger(__name__)


def create_measure(settings: Settings | None = None) -> AddCostPerFloorAreaToBuilding:
    """Create the measure served by the API.

    Reads ``LCC_*`` settings from the environment when none are given and
    logs whether the legacy lifecycle guards are active.
    """
    settings = settings or Settings()
    if settings.legacy_lifecycle_checks:
        logger.warning(
            "LCC_LEGACY_LIFECYCLE_CHECKS is set: start year and expected life "
            "will not be range checked"
        )
    return create_default_measure(settings)
