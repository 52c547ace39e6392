"""Runner that validates arguments and collects run messages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lcc_measure.exceptions import ArgumentValidationError
from lcc_measure.models.enums import MessageLevel, RunOutcome
from lcc_measure.models.results import MeasureResult, RunMessage

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from lcc_measure.models.arguments import ArgumentDefinition, ArgumentValue

logger = logging.getLogger(__name__)


class MeasureRunner:
    """Collects everything a measure reports during one run.

    Each registered message is also written to the log so headless runs
    leave a trace. Call :meth:`result` once the measure returns.
    """

    def __init__(self) -> None:
        self._messages: list[RunMessage] = []
        self._initial_condition: str | None = None
        self._final_condition: str | None = None
        self._not_applicable_reason: str | None = None

    def validate_user_arguments(
        self,
        definitions: Sequence[ArgumentDefinition],
        user_arguments: Mapping[str, object],
    ) -> dict[str, ArgumentValue] | None:
        """Check user values against the declared arguments.

        Missing optional arguments fall back to their defaults. Every
        problem is registered as an error; returns None if there were any.
        """
        known = {d.name for d in definitions}
        problems: list[str] = [
            f"Unknown argument '{name}'"
            for name in user_arguments
            if name not in known
        ]
        values: dict[str, ArgumentValue] = {}

        for definition in definitions:
            if definition.name not in user_arguments:
                if definition.required and definition.default is None:
                    problems.append(f"Required argument '{definition.name}' is missing")
                elif definition.default is not None:
                    values[definition.name] = definition.default
                continue
            try:
                values[definition.name] = definition.coerce(user_arguments[definition.name])
            except ArgumentValidationError as exc:
                problems.append(str(exc))

        for problem in problems:
            self.register_error(problem)
        return None if problems else values

    def register_info(self, message: str) -> None:
        logger.info(message)
        self._messages.append(RunMessage(level=MessageLevel.INFO, text=message))

    def register_warning(self, message: str) -> None:
        logger.warning(message)
        self._messages.append(RunMessage(level=MessageLevel.WARNING, text=message))

    def register_error(self, message: str) -> None:
        logger.error(message)
        self._messages.append(RunMessage(level=MessageLevel.ERROR, text=message))

    def register_as_not_applicable(self, message: str) -> None:
        logger.warning("Not applicable: %s", message)
        self._not_applicable_reason = message

    def register_initial_condition(self, message: str) -> None:
        logger.info("Initial condition: %s", message)
        self._initial_condition = message

    def register_final_condition(self, message: str) -> None:
        logger.info("Final condition: %s", message)
        self._final_condition = message

    def result(self) -> MeasureResult:
        """Build the run result; any registered error means failure."""
        if any(m.level == MessageLevel.ERROR for m in self._messages):
            outcome = RunOutcome.FAIL
        elif self._not_applicable_reason is not None:
            outcome = RunOutcome.NOT_APPLICABLE
        else:
            outcome = RunOutcome.SUCCESS
        return MeasureResult(
            outcome=outcome,
            initial_condition=self._initial_condition,
            final_condition=self._final_condition,
            not_applicable_reason=self._not_applicable_reason,
            messages=list(self._messages),
        )
