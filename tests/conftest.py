"""Shared fixtures for flowwizard tests."""

import tempfile
from pathlib import Path

import pytest

from flowwizard.engine.definition import DefinitionBuilder
from flowwizard.engine.loader import FlowLoader
from flowwizard.engine.predicates import contains, equals

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_flow_path():
    """Path to the six-step tax intake flow."""
    return FIXTURES / "sample_flow.yaml"


@pytest.fixture
def sample_definition(sample_flow_path):
    """Sample flow loaded through FlowLoader."""
    return FlowLoader.load(sample_flow_path)


@pytest.fixture
def built_definition():
    """Same tax intake flow, built with the fluent builder."""
    return (
        DefinitionBuilder("tax_intake")
        .start("greeting")
        .step("greeting", "single_select", "What would you like to do?",
              options=["FileReturn", "GetEstimate", "LearnMore"])
        .transition("income_info", when=equals("greeting", "FileReturn"))
        .transition("estimate", when=equals("greeting", "GetEstimate"))
        .transition("info")
        .step("income_info", "multi_select", "Select your income types:",
              options=["W2", "1099", "Business", "Investment"])
        .transition("business_details", when=contains("income_info", "Business"))
        .transition("summary")
        .step("business_details", "number_matrix", "How many businesses?",
              fields=["LLC", "SCorp", "CCorp"])
        .transition("summary")
        .step("estimate", "text", "Describe your tax situation briefly:")
        .transition("summary")
        .step("info", "display", "Visit our website for more information.")
        .step("summary", "display", "Thank you for completing the intake!")
        .build()
    )


@pytest.fixture
def temp_dir():
    """Create temporary directory for test fixtures."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_flow(temp_dir):
    """Write YAML content to a flow file and return its path."""
    def _write(content: str, name: str = "flow.yaml") -> Path:
        path = temp_dir / name
        path.write_text(content)
        return path
    return _write


ORPHAN_FLOW = """
start: step_a
steps:
  - id: step_a
    type: text
    question: First step
    transitions:
      - to: step_b
  - id: step_b
    type: text
    question: Second step
  - id: orphan
    type: text
    question: I am unreachable
"""


@pytest.fixture
def orphan_flow_path(write_flow):
    """Flow with a step nothing transitions to."""
    return write_flow(ORPHAN_FLOW, name="orphan_flow.yaml")
