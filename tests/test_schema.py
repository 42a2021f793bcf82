"""Tests for Pydantic schema models."""

import pytest
from pydantic import ValidationError

from flowwizard.engine.predicates import Contains, Equals
from flowwizard.engine.schema import FlowDocument, Step, Transition


def test_step_minimal_valid():
    """Step can be created with just an id."""
    step = Step(id='name')

    assert step.id == 'name'
    assert step.type == 'text'
    assert step.prompt == ''
    assert step.options == ()
    assert step.fields == ()
    assert step.transitions == ()


def test_step_accepts_question_alias():
    """YAML authors may write 'question' instead of 'prompt'."""
    step = Step(id='q', type='text', question='Your name?')

    assert step.prompt == 'Your name?'


def test_step_requires_id():
    """Step must have an id."""
    with pytest.raises(ValidationError) as exc_info:
        Step(type='text', prompt='Value:')

    assert 'id' in str(exc_info.value)


def test_step_keeps_unknown_type():
    """The model layer does not reject step types it doesn't know."""
    step = Step(id='sig', type='signature', prompt='Sign here')

    assert step.type == 'signature'


def test_step_stringifies_numeric_options():
    """Bare YAML numbers in options become strings."""
    step = Step(id='income', type='multi_select', options=['W2', 1099])

    assert step.options == ('W2', '1099')


def test_step_is_immutable():
    """Steps cannot be modified after construction."""
    step = Step(id='name', prompt='Your name?')

    with pytest.raises(ValidationError):
        step.prompt = 'changed'


def test_transition_without_predicate_is_unconditional():
    transition = Transition(to='summary')

    assert transition.target == 'summary'
    assert transition.predicate is None
    assert not transition.conditional


def test_transition_parses_predicate_form():
    """Transition 'if' is parsed into a predicate variant."""
    transition = Transition(**{'to': 'details', 'if': {'contains': {'step': 'income', 'value': 'Business'}}})

    assert transition.predicate == Contains('income', 'Business')
    assert transition.conditional


def test_transition_accepts_predicate_instance():
    transition = Transition(target='b', predicate=Equals('a', 1))

    assert transition.predicate == Equals('a', 1)


def test_transition_rejects_unknown_operator():
    with pytest.raises(ValidationError) as exc_info:
        Transition(**{'to': 'b', 'if': {'matches': {'step': 'a', 'value': 'x'}}})

    assert 'matches' in str(exc_info.value)


def test_flow_document_minimal():
    """FlowDocument only needs a start step."""
    document = FlowDocument(start='a')

    assert document.start == 'a'
    assert document.steps == []
    assert document.name is None


def test_flow_document_requires_start():
    with pytest.raises(ValidationError) as exc_info:
        FlowDocument(steps=[])

    assert 'start' in str(exc_info.value)


def test_flow_document_matches_guard_operands_to_option_text():
    """Guards on choice steps are compared as text, even inside groups."""
    document = FlowDocument.model_validate({
        'start': 'income',
        'steps': [
            {'id': 'income', 'type': 'multi_select', 'options': ['W2', 1099]},
            {'id': 'count', 'type': 'number'},
            {'id': 'route', 'transitions': [
                {'to': 'done', 'if': {'any': [
                    {'contains': {'step': 'income', 'value': 1099}},
                    {'equals': {'step': 'count', 'value': 2}},
                ]}},
            ]},
        ],
    })

    predicate = document.steps[2].transitions[0].predicate
    assert predicate.predicates == (Contains('income', '1099'), Equals('count', 2))
