"""Transition guards - boolean rules over the answers collected so far.

Predicates are plain data (tagged variants), never executable code. Every
variant exposes ``evaluate(answers)`` and ``describe()``.

YAML forms accepted by :func:`parse_predicate`::

    if: {equals: {step: greeting, value: FileReturn}}
    if: {contains: {step: income_info, value: Business}}
    if: {all: [<predicate>, <predicate>]}
    if: {any: [<predicate>, <predicate>]}
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Collection, Dict, Mapping, Optional, Tuple

_MISSING = object()

_COLLECTION_TYPES = (list, tuple, set, frozenset, dict)


class Predicate(ABC):
    """Interface for transition guards."""

    @abstractmethod
    def evaluate(self, answers: Mapping[str, Any]) -> bool:
        """Return True if the guard holds for the answers collected so far."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable label, used for diagram edges."""
        pass


@dataclass(frozen=True)
class Equals(Predicate):
    """True iff ``answers[step] == value``.

    Booleans only equal booleans, so ``equals(step, 1)`` does not match ``True``.
    """

    step: str
    value: Any

    def evaluate(self, answers: Mapping[str, Any]) -> bool:
        answer = answers.get(self.step, _MISSING)
        if answer is _MISSING:
            return False
        if isinstance(answer, bool) != isinstance(self.value, bool):
            return False
        return answer == self.value

    def describe(self) -> str:
        return f"{self.step} == {self.value}"


@dataclass(frozen=True)
class Contains(Predicate):
    """True iff ``answers[step]`` is a collection that includes ``value``."""

    step: str
    value: Any

    def evaluate(self, answers: Mapping[str, Any]) -> bool:
        answer = answers.get(self.step, _MISSING)
        if not isinstance(answer, _COLLECTION_TYPES):
            return False
        try:
            return self.value in answer
        except TypeError:
            # unhashable value tested against a set or dict
            return False

    def describe(self) -> str:
        return f"{self.step} contains {self.value}"


@dataclass(frozen=True)
class AllOf(Predicate):
    """Logical AND over child predicates."""

    predicates: Tuple[Predicate, ...]

    def evaluate(self, answers: Mapping[str, Any]) -> bool:
        return all(p.evaluate(answers) for p in self.predicates)

    def describe(self) -> str:
        return " and ".join(f"({p.describe()})" for p in self.predicates)


@dataclass(frozen=True)
class AnyOf(Predicate):
    """Logical OR over child predicates."""

    predicates: Tuple[Predicate, ...]

    def evaluate(self, answers: Mapping[str, Any]) -> bool:
        return any(p.evaluate(answers) for p in self.predicates)

    def describe(self) -> str:
        return " or ".join(f"({p.describe()})" for p in self.predicates)


def evaluate(predicate: Optional[Predicate], answers: Mapping[str, Any]) -> bool:
    """Evaluate a transition guard. A missing guard is always true."""
    if predicate is None:
        return True
    return predicate.evaluate(answers)


# Rule helpers, for building definitions in Python.

def equals(step: str, value: Any) -> Equals:
    return Equals(step, value)


def contains(step: str, value: Any) -> Contains:
    return Contains(step, value)


def all_of(*predicates: Predicate) -> AllOf:
    return AllOf(tuple(predicates))


def any_of(*predicates: Predicate) -> AnyOf:
    return AnyOf(tuple(predicates))


def map_values(
    predicate: Optional[Predicate],
    steps: Collection[str],
    convert: Callable[[Any], Any],
) -> Optional[Predicate]:
    """
    Copy a predicate, applying ``convert`` to every operand that tests one of ``steps``.

    Args:
        predicate: Predicate to rewrite (None passes through)
        steps: Step ids whose operands should be converted
        convert: Function applied to each matching ``value``

    Returns:
        New predicate of the same shape
    """
    if isinstance(predicate, (AllOf, AnyOf)):
        return replace(predicate, predicates=tuple(map_values(p, steps, convert) for p in predicate.predicates))
    if isinstance(predicate, (Equals, Contains)) and predicate.step in steps:
        return replace(predicate, value=convert(predicate.value))
    return predicate


def _parse_operands(name: str, body: Any) -> Tuple[str, Any]:
    if isinstance(body, dict):
        if set(body) != {'step', 'value'}:
            raise ValueError(f"'{name}' needs exactly the keys 'step' and 'value', got {sorted(body)}")
        step, value = body['step'], body['value']
    elif isinstance(body, (list, tuple)) and len(body) == 2:
        step, value = body
    else:
        raise ValueError(f"'{name}' expects {{step, value}} or [step, value], got {body!r}")

    if not isinstance(step, str) or not step:
        raise ValueError(f"'{name}' step must be a non-empty string, got {step!r}")
    return step, value


def _parse_group(name: str, body: Any) -> Tuple[Predicate, ...]:
    if not isinstance(body, (list, tuple)) or not body:
        raise ValueError(f"'{name}' expects a non-empty list of predicates, got {body!r}")
    return tuple(parse_predicate(item) for item in body)


_PARSERS: Dict[str, Any] = {
    'equals': lambda body: Equals(*_parse_operands('equals', body)),
    'contains': lambda body: Contains(*_parse_operands('contains', body)),
    'all': lambda body: AllOf(_parse_group('all', body)),
    'any': lambda body: AnyOf(_parse_group('any', body)),
}


def parse_predicate(raw: Any) -> Optional[Predicate]:
    """
    Build a predicate from its declarative form.

    Args:
        raw: ``None``, an existing Predicate, or a single-key mapping

    Returns:
        Predicate instance, or None for an unconditional transition

    Raises:
        ValueError: If the form is not recognised
    """
    if raw is None or isinstance(raw, Predicate):
        return raw

    if not isinstance(raw, dict) or len(raw) != 1:
        raise ValueError(f"Predicate must be a mapping with exactly one operator, got {raw!r}")

    (name, body), = raw.items()
    parser = _PARSERS.get(name)
    if parser is None:
        raise ValueError(f"Unknown predicate operator '{name}' (expected one of: {', '.join(_PARSERS)})")
    return parser(body)
