"""Host interfaces and the in-memory reference host."""

from lcc_measure.host.memory import LifeCycleCost, ModelBuilding
from lcc_measure.host.protocols import Building, CostRecord, Runner
from lcc_measure.host.runner import MeasureRunner

__all__ = [
    "Building",
    "CostRecord",
    "LifeCycleCost",
    "MeasureRunner",
    "ModelBuilding",
    "Runner",
]
