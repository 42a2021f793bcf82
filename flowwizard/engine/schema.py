"""Pydantic models for flow definition documents."""

from typing import Any, List, Optional, Tuple, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .predicates import Predicate, map_values, parse_predicate


def choice_text(value: Any) -> Any:
    """Text form of a choice value; YAML reads bare entries such as 1099 as ints."""
    if isinstance(value, (list, tuple)):
        return [choice_text(item) for item in value]
    if isinstance(value, (int, float)):
        return str(value)
    return value


class Transition(BaseModel):
    """
    Directed edge from one step to another.

    A transition without a predicate always fires; declare it last so it acts
    as the default branch.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    target: str = Field(..., alias="to", description="Destination step id (may not exist)")
    predicate: Optional[Predicate] = Field(None, alias="if", description="Guard over collected answers")

    @field_validator("predicate", mode="before")
    @classmethod
    def _parse_predicate(cls, value: Any) -> Optional[Predicate]:
        return parse_predicate(value)

    @property
    def conditional(self) -> bool:
        return self.predicate is not None


class Step(BaseModel):
    """
    A single question in a flow.

    The step type is an open set: the model accepts any string and the
    presentation layer falls back to free text for types it does not know.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="Unique step identifier")
    type: str = Field("text", description="Step type: single_select, multi_select, number_matrix, text, ...")
    prompt: str = Field(
        "",
        validation_alias=AliasChoices("prompt", "question"),
        description="Question shown to the respondent",
    )
    options: Tuple[str, ...] = Field(default_factory=tuple, description="Choices for select types")
    fields: Tuple[str, ...] = Field(default_factory=tuple, description="Sub-questions for matrix types")
    transitions: Tuple[Transition, ...] = Field(default_factory=tuple, description="Outgoing edges, in order")

    @field_validator("options", "fields", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(choice_text(item) for item in value)
        return value


class FlowDocument(BaseModel):
    """Top-level flow document as authored in YAML."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(None, description="Flow identifier")
    version: Optional[Union[str, float, int]] = Field(None, description="Flow spec version")
    description: Optional[str] = Field(None, description="Human-readable description")
    start: str = Field(..., description="Id of the entry step")
    steps: List[Step] = Field(default_factory=list, description="Steps in declaration order")

    @model_validator(mode="after")
    def _align_choice_values(self) -> "FlowDocument":
        # Options are stored as text, so guards on choice steps must compare text too
        choice_steps = {step.id for step in self.steps if step.options}
        if choice_steps:
            self.steps = [_align_step(step, choice_steps) for step in self.steps]
        return self


def _align_step(step: Step, choice_steps) -> Step:
    transitions = tuple(
        transition.model_copy(update={'predicate': map_values(transition.predicate, choice_steps, choice_text)})
        for transition in step.transitions
    )
    return step.model_copy(update={'transitions': transitions})
