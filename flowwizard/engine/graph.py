"""Diagram export - renders the structural flow graph."""

from typing import Dict, List, Type

from .definition import Definition
from .schema import Step, Transition


def mm_text(text: str) -> str:
    """Escape text for a quoted Mermaid label."""
    return (
        text.replace('&', '#amp;')
        .replace('"', '#quot;')
        .replace('<', '#lt;')
        .replace('>', '#gt;')
        .replace('\n', ' ')
    )


class MermaidExporter:
    """
    Renders a Definition as a Mermaid flowchart.

    Every step becomes a node (declaration order) and every transition an
    edge (declaration order). Nothing is filtered: dangling edges and
    orphan steps appear exactly as the validator would see them.
    """

    def __init__(self, definition: Definition, direction: str = 'TD'):
        self.definition = definition
        self.direction = direction

    def export(self) -> str:
        lines = [f"flowchart {self.direction}"]
        steps = self.definition.steps

        for step in steps.values():
            lines.append(f"    {self._node(step)}")

        for step_id, step in steps.items():
            for transition in step.transitions:
                lines.append(f"    {self._edge(step_id, transition)}")

        return "\n".join(lines) + "\n"

    def _node(self, step: Step) -> str:
        label = step.prompt or step.id
        return f'{step.id}["{mm_text(label)}"]'

    def _edge(self, source: str, transition: Transition) -> str:
        if transition.predicate is None:
            return f"{source} --> {transition.target}"
        label = mm_text(transition.predicate.describe()).replace('|', '#124;')
        return f'{source} -->|"{label}"| {transition.target}'


EXPORTERS: Dict[str, Type[MermaidExporter]] = {
    'mermaid': MermaidExporter,
}


def available_formats() -> List[str]:
    return list(EXPORTERS)


def export_definition(definition: Definition, fmt: str = 'mermaid') -> str:
    """
    Export a definition in the requested diagram format.

    Raises:
        ValueError: If the format is not supported
    """
    exporter = EXPORTERS.get(fmt)
    if exporter is None:
        raise ValueError(f"Unsupported format '{fmt}' (expected one of: {', '.join(EXPORTERS)})")
    return exporter(definition).export()
