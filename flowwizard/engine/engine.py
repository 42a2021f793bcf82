"""Core wizard engine - walks a flow definition one answer at a time."""

import logging
from typing import Any, Callable, Dict, List, Optional

from .definition import Definition
from .errors import InvalidState, UnknownStep
from .predicates import evaluate
from .schema import Step

logger = logging.getLogger(__name__)

PENDING = 'pending'
RUNNING = 'running'
FINISHED = 'finished'


class WizardEngine:
    """
    Executes one run of a flow definition.

    The engine is pull-based: the caller asks the respondent about
    ``current_step`` and hands the value back through ``answer()``. It never
    calls the presentation layer itself.

    Key responsibilities:
    - Track the current step, visitation history and answers
    - Pick the next step: first transition whose predicate holds wins
    - Stop when no transition applies
    """

    def __init__(self, definition: Definition):
        """
        Initialize the engine for a single run.

        Args:
            definition: Flow to execute (read-only)

        Raises:
            UnknownStep: If the definition's start step does not exist
        """
        if not definition.has_step(definition.start):
            raise UnknownStep(definition.start, f"Start step not found: {definition.start}")

        self.definition = definition
        self._current: Optional[str] = definition.start
        self._history: List[str] = []
        self._answers: Dict[str, Any] = {}

    @property
    def finished(self) -> bool:
        return self._current is None

    @property
    def phase(self) -> str:
        if self._current is None:
            return FINISHED
        return RUNNING if self._history else PENDING

    @property
    def current_step_id(self) -> str:
        if self._current is None:
            raise InvalidState("Flow is finished; there is no current step")
        return self._current

    @property
    def current_step(self) -> Step:
        return self.definition.step(self.current_step_id)

    @property
    def history(self) -> List[str]:
        return list(self._history)

    @property
    def answers(self) -> Dict[str, Any]:
        return dict(self._answers)

    def answer(self, value: Any) -> None:
        """
        Record an answer for the current step and advance.

        Args:
            value: Answer for the current step (None for display steps)

        Raises:
            InvalidState: If the flow is already finished
            UnknownStep: If the chosen transition targets a missing step
        """
        step = self.current_step
        if value is not None:
            self._answers[step.id] = value
        self._history.append(step.id)

        next_id = self._resolve_next(step)
        if next_id is None:
            logger.debug("Flow finished at step '%s'", step.id)
            self._current = None
            return

        if not self.definition.has_step(next_id):
            raise UnknownStep(next_id, f"Step '{step.id}' transitions to unknown step '{next_id}'")

        logger.debug("Transition %s -> %s", step.id, next_id)
        self._current = next_id

    def _resolve_next(self, step: Step) -> Optional[str]:
        """
        Resolve the next step ID from the step's transitions.

        Args:
            step: Step that was just answered

        Returns:
            Target of the first transition whose predicate holds, or None
        """
        for transition in step.transitions:
            if evaluate(transition.predicate, self._answers):
                return transition.target
        return None

    def run(self, ask: Callable[[Step], Any]) -> "WizardEngine":
        """
        Drive the flow to completion.

        Args:
            ask: Answer provider, called with each step in turn

        Returns:
            This engine, finished
        """
        while not self.finished:
            self.answer(ask(self.current_step))
        return self
