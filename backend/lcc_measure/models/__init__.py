"""Domain models for the lcc_measure package."""

from lcc_measure.models.arguments import (
    ArgumentDefinition,
    ArgumentValue,
    MeasureArguments,
)
from lcc_measure.models.enums import (
    ArgumentKind,
    CostCategory,
    CostUnits,
    MessageLevel,
    RunOutcome,
)
from lcc_measure.models.results import MeasureResult, RunMessage

__all__ = [
    "ArgumentDefinition",
    "ArgumentKind",
    "ArgumentValue",
    "CostCategory",
    "CostUnits",
    "MeasureArguments",
    "MeasureResult",
    "MessageLevel",
    "RunMessage",
    "RunOutcome",
]
