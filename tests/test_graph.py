"""Tests for Mermaid diagram export."""

import pytest

from flowwizard.engine.definition import Definition, DefinitionBuilder
from flowwizard.engine.graph import MermaidExporter, available_formats, export_definition, mm_text
from flowwizard.engine.predicates import equals
from flowwizard.engine.schema import Step, Transition


def test_export_sample_flow(sample_definition):
    lines = MermaidExporter(sample_definition).export().splitlines()

    assert lines[0] == 'flowchart TD'
    assert lines[1] == '    greeting["What would you like to do?"]'
    assert '    greeting -->|"greeting == FileReturn"| income_info' in lines
    assert '    greeting --> info' in lines
    assert '    income_info -->|"income_info contains Business"| business_details' in lines


def test_one_node_per_step_in_declaration_order(sample_definition):
    lines = MermaidExporter(sample_definition).export().splitlines()
    nodes = [line.strip().split('[')[0] for line in lines if '[' in line and '-->' not in line]

    assert nodes == sample_definition.step_ids()


def test_one_edge_per_transition_in_order(sample_definition):
    lines = MermaidExporter(sample_definition).export().splitlines()
    edges = [(line.split()[0], line.split()[-1]) for line in lines if '-->' in line]

    expected = [
        (step_id, t.target)
        for step_id, step in sample_definition.steps.items()
        for t in step.transitions
    ]
    assert edges == expected


def test_export_is_idempotent(sample_definition):
    exporter = MermaidExporter(sample_definition)

    assert exporter.export() == exporter.export()


def test_dangling_edges_and_orphans_are_rendered():
    """The diagram shows the graph as written, including what validation flags."""
    definition = Definition('a', [
        Step(id='a', transitions=[Transition(target='ghost')]),
        Step(id='orphan'),
    ])

    output = MermaidExporter(definition).export()

    assert '    a --> ghost' in output
    assert '    orphan["orphan"]' in output


def test_prompt_is_escaped():
    definition = (
        DefinitionBuilder()
        .start('q')
        .step('q', 'text', 'Say "hi" <now>')
        .transition('q', when=equals('q', 'a|b'))
        .build()
    )

    output = MermaidExporter(definition).export()

    assert 'q["Say #quot;hi#quot; #lt;now#gt;"]' in output
    assert '-->|"q == a#124;b"| q' in output


def test_mm_text_flattens_newlines():
    assert mm_text('one\ntwo') == 'one two'


def test_export_definition_dispatches_by_format(sample_definition):
    assert 'mermaid' in available_formats()
    assert export_definition(sample_definition, 'mermaid') == MermaidExporter(sample_definition).export()


def test_export_definition_unknown_format(sample_definition):
    with pytest.raises(ValueError) as exc_info:
        export_definition(sample_definition, 'dot')

    assert 'dot' in str(exc_info.value)
