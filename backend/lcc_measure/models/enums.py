"""Enums for the lcc_measure domain models.

Category and cost-unit values match the tags the host model uses for
life cycle cost records.
"""

from enum import StrEnum


class CostCategory(StrEnum):
    """Life cycle cost categories recognised by the host model."""

    CONSTRUCTION = "Construction"
    MAINTENANCE = "Maintenance"
    REPAIR = "Repair"
    OPERATION = "Operation"
    REPLACEMENT = "Replacement"
    MINOR_OVERHAUL = "MinorOverhaul"
    MAJOR_OVERHAUL = "MajorOverhaul"
    OTHER_OPERATION = "OtherOperation"
    SALVAGE = "Salvage"


class CostUnits(StrEnum):
    """Basis a cost record's rate is multiplied against."""

    COST_PER_EACH = "CostPerEach"
    COST_PER_AREA = "CostPerArea"


class ArgumentKind(StrEnum):
    """Value types a measure argument can declare."""

    BOOL = "bool"
    STRING = "string"
    DOUBLE = "double"
    INTEGER = "integer"


class MessageLevel(StrEnum):
    """Severity of a message registered with the runner."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class RunOutcome(StrEnum):
    """Overall result of a measure run."""

    SUCCESS = "success"
    NOT_APPLICABLE = "not_applicable"
    FAIL = "fail"
