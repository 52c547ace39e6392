"""Interfaces the measure expects from its host application.

The host owns the building model and the reporting sink; the measure only
borrows them for the duration of a single run.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from lcc_measure.models.arguments import ArgumentDefinition, ArgumentValue


@runtime_checkable
class CostRecord(Protocol):
    """One life cycle cost line item attached to a model object."""

    name: str
    category: str
    cost: float
    cost_units: str
    repeat_period_years: int
    years_from_start: int

    @property
    def total_cost(self) -> float: ...

    @property
    def costed_area(self) -> float | None: ...


@runtime_checkable
class Building(Protocol):
    """The host's building object and its cost record collection."""

    name: str

    def life_cycle_costs(self) -> Sequence[CostRecord]: ...

    def remove_life_cycle_costs(self) -> Sequence[CostRecord]: ...

    def remove_life_cycle_cost(self, record: CostRecord) -> bool: ...

    def create_life_cycle_cost(
        self,
        name: str,
        cost: float,
        cost_units: str,
        category: str,
        repeat_period_years: int,
        years_from_start: int,
    ) -> CostRecord: ...


@runtime_checkable
class Runner(Protocol):
    """Argument validation and user-facing message sink."""

    def validate_user_arguments(
        self,
        definitions: Sequence[ArgumentDefinition],
        user_arguments: Mapping[str, object],
    ) -> dict[str, ArgumentValue] | None: ...

    def register_info(self, message: str) -> None: ...

    def register_warning(self, message: str) -> None: ...

    def register_error(self, message: str) -> None: ...

    def register_as_not_applicable(self, message: str) -> None: ...

    def register_initial_condition(self, message: str) -> None: ...

    def register_final_condition(self, message: str) -> None: ...
