"""Run result models reported back to the host application."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from lcc_measure.models.enums import MessageLevel, RunOutcome


class RunMessage(BaseModel):
    """A single message registered during a run."""

    level: MessageLevel
    text: str


class MeasureResult(BaseModel):
    """Everything a runner collected over one measure invocation."""

    outcome: RunOutcome
    initial_condition: str | None = None
    final_condition: str | None = None
    not_applicable_reason: str | None = None
    messages: list[RunMessage] = Field(default_factory=list)

    def _texts(self, level: MessageLevel) -> list[str]:
        return [m.text for m in self.messages if m.level == level]

    @property
    def info(self) -> list[str]:
        return self._texts(MessageLevel.INFO)

    @property
    def warnings(self) -> list[str]:
        return self._texts(MessageLevel.WARNING)

    @property
    def errors(self) -> list[str]:
        return self._texts(MessageLevel.ERROR)

    def to_summary_dict(self) -> dict[str, Any]:
        """Flatten the result for display, grouping messages by level."""
        return {
            "outcome": self.outcome.value,
            "initial_condition": self.initial_condition,
            "final_condition": self.final_condition,
            "not_applicable_reason": self.not_applicable_reason,
            "info": self.info,
            "warnings": self.warnings,
            "errors": self.errors,
        }
