"""Argument declarations and run parameters for the cost measure."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from lcc_measure.exceptions import ArgumentValidationError
from lcc_measure.models.enums import ArgumentKind

ArgumentValue = bool | int | float | str

_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no"}


class ArgumentDefinition(BaseModel):
    """A typed argument the measure asks the host application to collect."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ArgumentKind
    display_name: str
    units: str | None = None
    default: ArgumentValue | None = None
    required: bool = True

    def coerce(self, value: object) -> ArgumentValue:
        """Convert a raw user value to this argument's declared type.

        Accepts native values and their string forms (as a UI or a JSON
        form would submit them). Raises ArgumentValidationError otherwise.
        """
        if self.kind == ArgumentKind.BOOL:
            return self._coerce_bool(value)
        if self.kind == ArgumentKind.INTEGER:
            return self._coerce_integer(value)
        if self.kind == ArgumentKind.DOUBLE:
            return self._coerce_double(value)
        if isinstance(value, str):
            return value
        msg = f"Argument '{self.name}' expects a string, got {value!r}"
        raise ArgumentValidationError(msg)

    def _coerce_bool(self, value: object) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        msg = f"Argument '{self.name}' expects true or false, got {value!r}"
        raise ArgumentValidationError(msg)

    def _coerce_integer(self, value: object) -> int:
        if isinstance(value, bool):
            msg = f"Argument '{self.name}' expects an integer, got {value!r}"
            raise ArgumentValidationError(msg)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        msg = f"Argument '{self.name}' expects an integer, got {value!r}"
        raise ArgumentValidationError(msg)

    def _coerce_double(self, value: object) -> float:
        if isinstance(value, bool):
            msg = f"Argument '{self.name}' expects a number, got {value!r}"
            raise ArgumentValidationError(msg)
        number: float | None = None
        if isinstance(value, int | float):
            number = float(value)
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                pass
        if number is None:
            msg = f"Argument '{self.name}' expects a number, got {value!r}"
            raise ArgumentValidationError(msg)
        if not math.isfinite(number):
            msg = f"Argument '{self.name}' expects a finite number, got {value!r}"
            raise ArgumentValidationError(msg)
        return number


class MeasureArguments(BaseModel):
    """Validated user inputs for one run of the cost measure.

    Rates are in $/ft^2 as entered; the measure converts them to $/m^2
    before handing them to the host.
    """

    model_config = ConfigDict(frozen=True)

    remove_costs: bool = True
    lcc_name: str = "Building - Life Cycle Costs"
    material_cost_ip: float = 0.0
    demolition_cost_ip: float = 0.0
    years_until_costs_start: int = 0
    demo_cost_initial_const: bool = False
    expected_life: int = 20
    om_cost_ip: float = 0.0
    om_frequency: int = 1

    @property
    def costs_requested(self) -> bool:
        """True when a material or O&M rate was given.

        A demolition rate on its own does not request new costs.
        """
        return abs(self.material_cost_ip) + abs(self.om_cost_ip) != 0
