"""Static checks over a flow definition.

Each check returns a list of diagnostics and never raises for a malformed
graph; the caller decides which findings are fatal.
"""

from collections import deque
from dataclasses import dataclass
from typing import List, Optional

from .definition import Definition

MISSING_START = 'missing_start'
UNKNOWN_TARGET = 'unknown_target'
UNREACHABLE = 'unreachable'


@dataclass(frozen=True)
class Diagnostic:
    """One validation finding."""

    code: str
    step_id: Optional[str]
    message: str

    def __str__(self) -> str:
        return self.message


def validate_start_step(definition: Definition) -> List[Diagnostic]:
    if definition.has_step(definition.start):
        return []
    return [Diagnostic(
        MISSING_START,
        definition.start,
        f"Start step '{definition.start}' not found in steps",
    )]


def validate_transition_targets(definition: Definition) -> List[Diagnostic]:
    diagnostics = []
    for step_id, step in definition.steps.items():
        for transition in step.transitions:
            if definition.has_step(transition.target):
                continue
            diagnostics.append(Diagnostic(
                UNKNOWN_TARGET,
                step_id,
                f"Step '{step_id}' has transition to unknown step '{transition.target}'",
            ))
    return diagnostics


def find_reachable_steps(definition: Definition) -> List[str]:
    """
    Breadth-first walk from the start step over the structural graph.

    Predicates are ignored. Transitions to unknown steps are skipped.

    Returns:
        Reachable step ids in visitation order
    """
    if not definition.has_step(definition.start):
        return []

    visited = [definition.start]
    seen = {definition.start}
    queue = deque([definition.start])

    while queue:
        step = definition.step(queue.popleft())
        for transition in step.transitions:
            target = transition.target
            if target in seen or not definition.has_step(target):
                continue
            seen.add(target)
            visited.append(target)
            queue.append(target)

    return visited


def validate_reachability(definition: Definition) -> List[Diagnostic]:
    reachable = set(find_reachable_steps(definition))
    return [
        Diagnostic(
            UNREACHABLE,
            step_id,
            f"Step '{step_id}' is unreachable from start step '{definition.start}'",
        )
        for step_id in definition.step_ids()
        if step_id not in reachable
    ]


CHECKS = (validate_start_step, validate_transition_targets, validate_reachability)


def validate_definition(definition: Definition) -> List[Diagnostic]:
    """Run every check and return all findings, in check order."""
    diagnostics = []
    for check in CHECKS:
        diagnostics.extend(check(definition))
    return diagnostics
