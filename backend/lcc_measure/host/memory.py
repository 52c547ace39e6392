"""In-memory host model: a building and its life cycle cost records.

Stands in for the host application's object graph so the measure can be
run from tests, the HTTP API, or any embedding application.
"""

from __future__ import annotations

import logging

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    ValidationError,
    computed_field,
    model_validator,
)

from lcc_measure.exceptions import HostModelError
from lcc_measure.models.enums import CostCategory, CostUnits
from lcc_measure.units import ft2_to_m2, m2_to_ft2

logger = logging.getLogger(__name__)


class LifeCycleCost(BaseModel):
    """A timed, categorized cost line item owned by a building.

    ``cost`` is a rate: $/m^2 for per-area records, $ per item for
    per-each records.
    """

    name: str
    category: CostCategory
    cost: float
    cost_units: CostUnits = CostUnits.COST_PER_AREA
    repeat_period_years: int = Field(default=0, ge=0)
    years_from_start: int = Field(default=0, ge=0)
    quantity: float = Field(default=1.0, ge=0)

    _owner: ModelBuilding | None = PrivateAttr(default=None)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def costed_area(self) -> float | None:
        """Area (m^2) the rate applies to, or None for per-each records."""
        if self.cost_units != CostUnits.COST_PER_AREA:
            return None
        if self._owner is None:
            return 0.0
        return self._owner.floor_area_m2

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_cost(self) -> float:
        if self.cost_units == CostUnits.COST_PER_AREA:
            return self.cost * (self.costed_area or 0.0)
        return self.cost * self.quantity


class ModelBuilding(BaseModel):
    """The model's building, holding its life cycle cost records."""

    name: str = "Building"
    floor_area_m2: float = Field(default=0.0, ge=0)
    cost_records: list[LifeCycleCost] = Field(default_factory=list)

    @model_validator(mode="after")
    def _attach_records(self) -> ModelBuilding:
        for record in self.cost_records:
            record._owner = self
        return self

    @classmethod
    def from_floor_area_ft2(cls, floor_area_ft2: float, name: str = "Building") -> ModelBuilding:
        """Build an empty building from an inch-pound floor area."""
        return cls(name=name, floor_area_m2=ft2_to_m2(floor_area_ft2))

    @property
    def floor_area_ft2(self) -> float:
        return m2_to_ft2(self.floor_area_m2)

    def life_cycle_costs(self) -> list[LifeCycleCost]:
        return list(self.cost_records)

    def remove_life_cycle_costs(self) -> list[LifeCycleCost]:
        """Detach and return every cost record on the building."""
        removed = self.cost_records
        self.cost_records = []
        for record in removed:
            record._owner = None
        logger.debug("Removed %d cost records from %s", len(removed), self.name)
        return removed

    def remove_life_cycle_cost(self, record: LifeCycleCost) -> bool:
        for i, existing in enumerate(self.cost_records):
            if existing is record:
                del self.cost_records[i]
                record._owner = None
                return True
        return False

    def create_life_cycle_cost(
        self,
        name: str,
        cost: float,
        cost_units: str,
        category: str,
        repeat_period_years: int,
        years_from_start: int,
    ) -> LifeCycleCost:
        """Create a cost record and attach it to this building.

        Raises:
            HostModelError: If the category, units, or timing are invalid.
        """
        try:
            record = LifeCycleCost(
                name=name,
                category=category,  # type: ignore[arg-type]
                cost=cost,
                cost_units=cost_units,  # type: ignore[arg-type]
                repeat_period_years=repeat_period_years,
                years_from_start=years_from_start,
            )
        except ValidationError as exc:
            msg = f"Could not create life cycle cost '{name}': {exc}"
            raise HostModelError(msg) from exc
        record._owner = self
        self.cost_records.append(record)
        logger.debug("Created cost record '%s' (%s)", name, record.category)
        return record
