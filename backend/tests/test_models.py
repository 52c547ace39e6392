"""Tests for argument declarations, run parameters and run results."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lcc_measure.exceptions import ArgumentValidationError
from lcc_measure.models import (
    ArgumentDefinition,
    ArgumentKind,
    CostCategory,
    MeasureArguments,
    MeasureResult,
    MessageLevel,
    RunMessage,
    RunOutcome,
)


def _definition(kind: ArgumentKind, **overrides: object) -> ArgumentDefinition:
    defaults: dict[str, object] = {
        "name": "value",
        "kind": kind,
        "display_name": "Value",
    }
    defaults.update(overrides)
    return ArgumentDefinition(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# ArgumentDefinition.coerce
# ---------------------------------------------------------------------------


class TestBoolCoercion:
    def test_native_bool(self) -> None:
        assert _definition(ArgumentKind.BOOL).coerce(False) is False

    @pytest.mark.parametrize("raw", ["true", "True", " TRUE ", "yes", "1"])
    def test_true_strings(self, raw: str) -> None:
        assert _definition(ArgumentKind.BOOL).coerce(raw) is True

    @pytest.mark.parametrize("raw", ["false", "no", "0"])
    def test_false_strings(self, raw: str) -> None:
        assert _definition(ArgumentKind.BOOL).coerce(raw) is False

    def test_rejects_other_values(self) -> None:
        with pytest.raises(ArgumentValidationError, match="true or false"):
            _definition(ArgumentKind.BOOL).coerce("maybe")

    def test_rejects_integers(self) -> None:
        with pytest.raises(ArgumentValidationError):
            _definition(ArgumentKind.BOOL).coerce(1)


class TestIntegerCoercion:
    def test_native_int(self) -> None:
        assert _definition(ArgumentKind.INTEGER).coerce(20) == 20

    def test_integral_float(self) -> None:
        assert _definition(ArgumentKind.INTEGER).coerce(20.0) == 20

    def test_string(self) -> None:
        assert _definition(ArgumentKind.INTEGER).coerce(" -3 ") == -3

    def test_rejects_fractional_float(self) -> None:
        with pytest.raises(ArgumentValidationError, match="integer"):
            _definition(ArgumentKind.INTEGER).coerce(2.5)

    def test_rejects_bool(self) -> None:
        with pytest.raises(ArgumentValidationError):
            _definition(ArgumentKind.INTEGER).coerce(True)

    def test_rejects_text(self) -> None:
        with pytest.raises(ArgumentValidationError):
            _definition(ArgumentKind.INTEGER).coerce("twenty")


class TestDoubleCoercion:
    def test_int_becomes_float(self) -> None:
        value = _definition(ArgumentKind.DOUBLE).coerce(2)
        assert value == 2.0
        assert isinstance(value, float)

    def test_string(self) -> None:
        assert _definition(ArgumentKind.DOUBLE).coerce("0.5") == 0.5

    def test_rejects_bool(self) -> None:
        with pytest.raises(ArgumentValidationError, match="number"):
            _definition(ArgumentKind.DOUBLE).coerce(False)

    def test_rejects_none(self) -> None:
        with pytest.raises(ArgumentValidationError):
            _definition(ArgumentKind.DOUBLE).coerce(None)

    @pytest.mark.parametrize("raw", ["nan", "inf", " -Infinity ", float("nan"), float("inf")])
    def test_rejects_non_finite(self, raw: object) -> None:
        with pytest.raises(ArgumentValidationError, match="finite"):
            _definition(ArgumentKind.DOUBLE).coerce(raw)

    def test_accepts_largest_finite_value(self) -> None:
        assert _definition(ArgumentKind.DOUBLE).coerce(1e308) == 1e308


class TestStringCoercion:
    def test_string(self) -> None:
        assert _definition(ArgumentKind.STRING).coerce("Tower") == "Tower"

    def test_rejects_number(self) -> None:
        with pytest.raises(ArgumentValidationError, match="string"):
            _definition(ArgumentKind.STRING).coerce(12)


class TestArgumentDefinition:
    def test_frozen(self) -> None:
        definition = _definition(ArgumentKind.STRING)
        with pytest.raises(ValidationError):
            definition.name = "other"  # type: ignore[misc]

    def test_default_keeps_bool_type(self) -> None:
        definition = _definition(ArgumentKind.BOOL, default=True)
        assert definition.default is True

    def test_json_dump(self) -> None:
        data = _definition(ArgumentKind.DOUBLE, units="$/ft^2", default=0.0).model_dump(
            mode="json"
        )
        assert data["kind"] == "double"
        assert data["units"] == "$/ft^2"
        assert data["required"] is True


# ---------------------------------------------------------------------------
# MeasureArguments
# ---------------------------------------------------------------------------


class TestMeasureArguments:
    def test_defaults(self) -> None:
        args = MeasureArguments()
        assert args.remove_costs is True
        assert args.lcc_name == "Building - Life Cycle Costs"
        assert args.expected_life == 20
        assert args.om_frequency == 1

    def test_no_costs_requested_by_default(self) -> None:
        assert MeasureArguments().costs_requested is False

    def test_material_requests_costs(self) -> None:
        assert MeasureArguments(material_cost_ip=2.0).costs_requested is True

    def test_om_requests_costs(self) -> None:
        assert MeasureArguments(om_cost_ip=0.25).costs_requested is True

    def test_negative_rate_requests_costs(self) -> None:
        assert MeasureArguments(material_cost_ip=-1.0).costs_requested is True

    def test_demolition_alone_does_not_request_costs(self) -> None:
        assert MeasureArguments(demolition_cost_ip=5.0).costs_requested is False

    def test_opposite_rates_still_request_costs(self) -> None:
        args = MeasureArguments(material_cost_ip=1.0, om_cost_ip=-1.0)
        assert args.costs_requested is True


# ---------------------------------------------------------------------------
# Enums / MeasureResult
# ---------------------------------------------------------------------------


class TestEnums:
    def test_category_tags(self) -> None:
        assert CostCategory.CONSTRUCTION == "Construction"
        assert CostCategory.SALVAGE == "Salvage"
        assert CostCategory.MAINTENANCE == "Maintenance"


class TestMeasureResult:
    def _result(self) -> MeasureResult:
        return MeasureResult(
            outcome=RunOutcome.SUCCESS,
            initial_condition="The Building has 0 lifecycle cost objects.",
            final_condition="done",
            messages=[
                RunMessage(level=MessageLevel.INFO, text="first"),
                RunMessage(level=MessageLevel.WARNING, text="careful"),
                RunMessage(level=MessageLevel.INFO, text="second"),
            ],
        )

    def test_messages_grouped_by_level(self) -> None:
        result = self._result()
        assert result.info == ["first", "second"]
        assert result.warnings == ["careful"]
        assert result.errors == []

    def test_summary_dict(self) -> None:
        summary = self._result().to_summary_dict()
        assert summary["outcome"] == "success"
        assert summary["info"] == ["first", "second"]
        assert summary["not_applicable_reason"] is None
        assert set(summary) == {
            "outcome",
            "initial_condition",
            "final_condition",
            "not_applicable_reason",
            "info",
            "warnings",
            "errors",
        }
