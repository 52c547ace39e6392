"""Life cycle cost measure for building energy models.

Usage::

    from lcc_measure import create_default_measure, MeasureRunner, ModelBuilding

    building = ModelBuilding.from_floor_area_ft2(10_000)
    runner = MeasureRunner()
    create_default_measure().run(building, runner, {"material_cost_ip": 2.0})
    result = runner.result()
"""

from lcc_measure.config import Settings
from lcc_measure.factory import create_default_measure
from lcc_measure.formatting import neat_numbers
from lcc_measure.host import (
    Building,
    CostRecord,
    LifeCycleCost,
    MeasureRunner,
    ModelBuilding,
    Runner,
)
from lcc_measure.measure import AddCostPerFloorAreaToBuilding
from lcc_measure.models import (
    ArgumentDefinition,
    ArgumentKind,
    CostCategory,
    CostUnits,
    MeasureArguments,
    MeasureResult,
    RunOutcome,
)

__all__ = [
    "AddCostPerFloorAreaToBuilding",
    "ArgumentDefinition",
    "ArgumentKind",
    "Building",
    "CostCategory",
    "CostRecord",
    "CostUnits",
    "LifeCycleCost",
    "MeasureArguments",
    "MeasureResult",
    "MeasureRunner",
    "ModelBuilding",
    "Runner",
    "RunOutcome",
    "Settings",
    "create_default_measure",
    "neat_numbers",
]
