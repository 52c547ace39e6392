"""Add Cost per Floor Area to Building.

Attaches life cycle cost records to the model's building from per-area
rates entered in $/ft^2:

1. **Request check** — New costs are requested only when the material or
   O&M rate is nonzero; a demolition rate alone is not enough.
2. **Lifecycle validation** — Reject start years and expected lives outside
   their valid ranges, and rates that overflow in $/m^2, before anything is
   touched.
3. **Removal** — Optionally delete every cost record already on the building.
4. **Creation** — Convert the rates to $/m^2 and create the material
   (Construction), demolition (Salvage) and O&M (Maintenance) records as one
   batch.
5. **Summary** — Report the building area and the total Construction cost.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from lcc_measure.config import Settings
from lcc_measure.exceptions import InvalidParameterError
from lcc_measure.formatting import format_currency, neat_numbers
from lcc_measure.models.arguments import ArgumentDefinition, MeasureArguments
from lcc_measure.models.enums import ArgumentKind, CostCategory, CostUnits
from lcc_measure.units import cost_per_ft2_to_per_m2, m2_to_ft2

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from lcc_measure.host.protocols import Building, CostRecord, Runner

logger = logging.getLogger(__name__)

MEASURE_VERSION = "0.1.0"

_MATERIAL_PREFIX = "LCC_Mat"
_DEMOLITION_PREFIX = "LCC_Demo"
_OM_PREFIX = "LCC_OM"

_MAX_EXPECTED_LIFE = 100


@dataclass(frozen=True)
class CostRecordPlan:
    """A cost record the measure is about to create (rate in $/m^2)."""

    name: str
    cost: float
    category: CostCategory
    repeat_period_years: int
    years_from_start: int
    cost_units: CostUnits = CostUnits.COST_PER_AREA


def plan_cost_records(args: MeasureArguments) -> list[CostRecordPlan]:
    """Work out the three records a run with ``args`` creates.

    Demolition recurs with the material record; it first occurs at the
    start year when it happens during initial construction, otherwise one
    expected life later.
    """
    if args.demo_cost_initial_const:
        demolition_start = args.years_until_costs_start
    else:
        demolition_start = args.years_until_costs_start + args.expected_life

    return [
        CostRecordPlan(
            name=f"{_MATERIAL_PREFIX} - {args.lcc_name}",
            cost=cost_per_ft2_to_per_m2(args.material_cost_ip),
            category=CostCategory.CONSTRUCTION,
            repeat_period_years=args.expected_life,
            years_from_start=args.years_until_costs_start,
        ),
        CostRecordPlan(
            name=f"{_DEMOLITION_PREFIX} - {args.lcc_name}",
            cost=cost_per_ft2_to_per_m2(args.demolition_cost_ip),
            category=CostCategory.SALVAGE,
            repeat_period_years=args.expected_life,
            years_from_start=demolition_start,
        ),
        CostRecordPlan(
            name=f"{_OM_PREFIX} - {args.lcc_name}",
            cost=cost_per_ft2_to_per_m2(args.om_cost_ip),
            category=CostCategory.MAINTENANCE,
            repeat_period_years=args.om_frequency,
            years_from_start=0,
        ),
    ]


def total_construction_cost(records: Sequence[CostRecord]) -> float:
    """Sum the total cost of every Construction-category record."""
    return sum(
        (r.total_cost for r in records if r.category == CostCategory.CONSTRUCTION),
        0.0,
    )


class AddCostPerFloorAreaToBuilding:
    """Measure that adds or removes building-level life cycle costs.

    Args:
        settings: Runtime settings. ``legacy_lifecycle_checks`` switches the
            start-year and expected-life guards to their historical form,
            which never rejects a value.

    Example::

        from lcc_measure import AddCostPerFloorAreaToBuilding, MeasureRunner, ModelBuilding

        building = ModelBuilding.from_floor_area_ft2(10_000)
        runner = MeasureRunner()
        AddCostPerFloorAreaToBuilding().run(building, runner, {"material_cost_ip": 2.0})
        print(runner.result().final_condition)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def name(self) -> str:
        return "Add Cost per Floor Area to Building"

    def description(self) -> str:
        return (
            "This measure will create life cycle cost objects associated with "
            "the building. You can set a material and installation cost, "
            "demolition cost, and O&M costs. Optionally existing cost objects "
            "already associated with building can be deleted. This measure will "
            "not affect energy use of the building."
        )

    def modeler_description(self) -> str:
        return (
            "In addition to the inputs for the cost values, a number of other "
            "inputs are exposed to specify when the cost first occurs and at "
            "what frequency it occurs in the future. This measure is intended to "
            "be used as an 'Always Run' measure to apply costs to the baseline "
            "simulation before any design alternatives manipulate it. This will "
            "allow you to show the full cost for your baseline building without "
            "having to manually cost all individual objects. You could include "
            "construction costs, land, design fees, or anything else you want.\n\n"
            "For baseline costs, 'Years Until Costs Start' indicates the year that "
            "the capital costs first occur. For new construction this will "
            "typically be 0 and 'Demolition Costs Occur During Initial "
            "Construction' will be 'false'. For a retrofit 'Years Until Costs "
            "Start' is between 0 and the 'Expected Life' of the object, while "
            "'Demolition Costs Occur During Initial Construction' is true. O&M "
            "cost and frequency can be whatever is appropriate for the component."
        )

    def arguments(self) -> list[ArgumentDefinition]:
        """Declare the arguments the host should collect, in display order."""
        return [
            ArgumentDefinition(
                name="remove_costs",
                kind=ArgumentKind.BOOL,
                display_name="Remove Existing Costs",
                default=True,
            ),
            ArgumentDefinition(
                name="lcc_name",
                kind=ArgumentKind.STRING,
                display_name="Name for Life Cycle Cost Object",
                default="Building - Life Cycle Costs",
            ),
            ArgumentDefinition(
                name="material_cost_ip",
                kind=ArgumentKind.DOUBLE,
                display_name="Material and Installation Costs for Construction per Area Used",
                units="$/ft^2",
                default=0.0,
            ),
            ArgumentDefinition(
                name="demolition_cost_ip",
                kind=ArgumentKind.DOUBLE,
                display_name="Demolition Costs for Construction per Area Used",
                units="$/ft^2",
                default=0.0,
            ),
            ArgumentDefinition(
                name="years_until_costs_start",
                kind=ArgumentKind.INTEGER,
                display_name="Years Until Costs Start",
                units="whole years",
                default=0,
            ),
            ArgumentDefinition(
                name="demo_cost_initial_const",
                kind=ArgumentKind.BOOL,
                display_name="Demolition Costs Occur During Initial Construction",
                default=False,
            ),
            ArgumentDefinition(
                name="expected_life",
                kind=ArgumentKind.INTEGER,
                display_name="Expected Life",
                units="whole years",
                default=20,
            ),
            ArgumentDefinition(
                name="om_cost_ip",
                kind=ArgumentKind.DOUBLE,
                display_name="O & M Costs for Construction per Area Used",
                units="$/ft^2",
                default=0.0,
            ),
            ArgumentDefinition(
                name="om_frequency",
                kind=ArgumentKind.INTEGER,
                display_name="O & M Frequency",
                units="whole years",
                default=1,
            ),
        ]

    def describe(self) -> dict[str, Any]:
        """Return the measure's metadata and argument declarations."""
        return {
            "name": self.name(),
            "class_name": type(self).__name__,
            "version": MEASURE_VERSION,
            "description": self.description(),
            "modeler_description": self.modeler_description(),
            "arguments": [a.model_dump(mode="json") for a in self.arguments()],
        }

    def run(
        self,
        building: Building,
        runner: Runner,
        user_arguments: Mapping[str, object],
    ) -> bool:
        """Apply the requested cost changes to ``building``.

        Returns False when the arguments are invalid (nothing is changed),
        True otherwise. Outcomes and messages are registered on ``runner``.
        Errors raised by the host while creating records propagate.
        """
        values = runner.validate_user_arguments(self.arguments(), user_arguments)
        if values is None:
            return False
        args = MeasureArguments(**values)  # type: ignore[arg-type]

        costs_requested = args.costs_requested
        costs_removed = False

        if not costs_requested:
            runner.register_info("No costs were requested for the building.")

        try:
            self._check_lifecycle(args)
        except InvalidParameterError as exc:
            runner.register_error(str(exc))
            return False

        runner.register_initial_condition(
            f"The Building has {len(building.life_cycle_costs())} lifecycle cost objects."
        )

        if building.life_cycle_costs() and args.remove_costs:
            runner.register_info(
                "Removing existing lifecycle cost objects associated with the building."
            )
            removed = building.remove_life_cycle_costs()
            costs_removed = len(removed) > 0

        if not costs_requested and not costs_removed:
            runner.register_as_not_applicable(
                "No new lifecycle costs objects were requested, and no costs were deleted."
            )

        if costs_requested:
            self._create_records(building, plan_cost_records(args))

        records = building.life_cycle_costs()
        total_mat_cost = total_construction_cost(records)

        if records:
            costed_area_ip = m2_to_ft2(records[0].costed_area or 0.0)
            runner.register_final_condition(
                "A new lifecycle cost object was added to the building. "
                f"The building has an area of {neat_numbers(costed_area_ip, 0)} (ft^2). "
                f"Material and Installation costs are {format_currency(total_mat_cost)}."
            )
        else:
            runner.register_final_condition(
                "There are no lifecycle cost objects associated with the building."
            )

        return True

    def _check_lifecycle(self, args: MeasureArguments) -> None:
        """Raise InvalidParameterError for out-of-range lifecycle values or rates."""
        start = args.years_until_costs_start
        life = args.expected_life

        if self._settings.legacy_lifecycle_checks:
            # Historical guards: both conjunctions are always false.
            start_invalid = start < 0 and start > life
            life_invalid = life < 1 and life > _MAX_EXPECTED_LIFE
        else:
            start_invalid = start < 0 or start > life
            life_invalid = life < 1 or life > _MAX_EXPECTED_LIFE

        if start_invalid:
            msg = "Years until costs start should be a non-negative integer less than Expected Life."
            raise InvalidParameterError(msg)
        if life_invalid:
            msg = "Choose an integer greater than 0 and less than or equal to 100 for Expected Life."
            raise InvalidParameterError(msg)
        if args.om_frequency < 1:
            msg = "Choose an integer greater than 0 for O & M Frequency."
            raise InvalidParameterError(msg)

        rates = {
            "Material and Installation Costs": args.material_cost_ip,
            "Demolition Costs": args.demolition_cost_ip,
            "O & M Costs": args.om_cost_ip,
        }
        for label, rate_ip in rates.items():
            if not math.isfinite(cost_per_ft2_to_per_m2(rate_ip)):
                msg = f"{label} of {rate_ip!r} $/ft^2 is too large to convert to $/m^2."
                raise InvalidParameterError(msg)

    @staticmethod
    def _create_records(building: Building, plans: list[CostRecordPlan]) -> None:
        """Create every planned record, or none of them."""
        created: list[CostRecord] = []
        try:
            for plan in plans:
                created.append(
                    building.create_life_cycle_cost(
                        name=plan.name,
                        cost=plan.cost,
                        cost_units=plan.cost_units.value,
                        category=plan.category.value,
                        repeat_period_years=plan.repeat_period_years,
                        years_from_start=plan.years_from_start,
                    )
                )
        except Exception:
            logger.error(
                "Cost record creation failed, removing %d record(s) from this batch",
                len(created),
            )
            for record in created:
                building.remove_life_cycle_cost(record)
            raise
        logger.debug("Created %d cost records on %s", len(created), building.name)
