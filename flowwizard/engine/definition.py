"""Definition - the immutable flow graph, plus a fluent builder for it."""

from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional

from .errors import DefinitionError, UnknownStep
from .predicates import Predicate
from .schema import FlowDocument, Step, Transition


class Definition:
    """
    Immutable flow graph: a start step id and the steps keyed by id.

    Step order is declaration order and is kept for diagnostics and export.
    Transition targets are not checked here; see ``validator``.
    """

    def __init__(
        self,
        start: str,
        steps: Iterable[Step],
        name: Optional[str] = None,
        description: Optional[str] = None,
        version: Optional[str] = None,
    ):
        """
        Build a definition.

        Args:
            start: Id of the entry step
            steps: Steps in declaration order
            name: Optional flow name
            description: Optional human-readable description
            version: Optional flow version

        Raises:
            DefinitionError: If two steps share an id
        """
        by_id = {}
        for step in steps:
            if step.id in by_id:
                raise DefinitionError(f"Duplicate step id: {step.id}")
            by_id[step.id] = step

        self._start = start
        self._steps = MappingProxyType(by_id)
        self.name = name
        self.description = description
        self.version = None if version is None else str(version)

    @classmethod
    def from_document(cls, document: FlowDocument) -> "Definition":
        return cls(
            start=document.start,
            steps=document.steps,
            name=document.name,
            description=document.description,
            version=document.version,
        )

    @property
    def start(self) -> str:
        return self._start

    @property
    def steps(self) -> Mapping[str, Step]:
        return self._steps

    def step(self, step_id: str) -> Step:
        try:
            return self._steps[step_id]
        except KeyError:
            raise UnknownStep(step_id) from None

    def step_ids(self) -> List[str]:
        return list(self._steps)

    def has_step(self, step_id: str) -> bool:
        return step_id in self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Definition(name={self.name!r}, start={self._start!r}, steps={self.step_ids()!r})"


class DefinitionBuilder:
    """
    Fluent construction of a Definition from Python.

    Example:
        >>> flow = (DefinitionBuilder("intake")
        ...         .start("name")
        ...         .step("name", "text", "Your name?").transition("done")
        ...         .step("done", "display", "Thanks!")
        ...         .build())
    """

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None):
        self._name = name
        self._description = description
        self._start: Optional[str] = None
        self._steps: List[dict] = []

    def start(self, step_id: str) -> "DefinitionBuilder":
        self._start = step_id
        return self

    def step(
        self,
        step_id: str,
        type: str = "text",
        prompt: str = "",
        options: Iterable[str] = (),
        fields: Iterable[str] = (),
        **extra: Any,
    ) -> "DefinitionBuilder":
        """Open a new step; following ``transition`` calls attach to it."""
        self._steps.append({
            'id': step_id,
            'type': type,
            'prompt': prompt,
            'options': tuple(options),
            'fields': tuple(fields),
            'transitions': [],
            **extra,
        })
        return self

    def transition(self, to: str, when: Optional[Predicate] = None) -> "DefinitionBuilder":
        if not self._steps:
            raise DefinitionError("transition() called before any step()")
        self._steps[-1]['transitions'].append(Transition(target=to, predicate=when))
        return self

    def build(self) -> Definition:
        """
        Freeze the builder into a Definition.

        Raises:
            DefinitionError: If no start step was set or step ids are duplicated
        """
        if self._start is None:
            raise DefinitionError("Flow has no start step")

        steps = [Step(**data) for data in self._steps]
        return Definition(self._start, steps, name=self._name, description=self._description)
