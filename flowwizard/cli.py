"""flowwizard command line - run, graph and validate YAML flow definitions."""

import json
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .config import Settings, configure_logging
from .engine import ENGINE_VERSION
from .engine.definition import Definition
from .engine.engine import WizardEngine
from .engine.errors import DefinitionError, FlowError, LoadError
from .engine.graph import available_formats, export_definition
from .engine.loader import FlowLoader
from .engine.validator import validate_definition
from .renderer import Renderer
from .runner import ConsolePromptRunner

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Run, visualise and validate declarative wizard flows.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    settings = Settings.from_env()
    if verbose:
        settings.verbose = True
    configure_logging(settings.effective_level)


def _frame(text: str, title: str = "") -> str:
    width = min(shutil.get_terminal_size((80, 24)).columns, 80)
    inner = width - 2
    top = f" {title} " if title else ""
    lines = [
        "+" + top + "-" * (inner - len(top)) + "+",
        "|" + " " * inner + "|",
        "|" + text.center(inner) + "|",
        "|" + " " * inner + "|",
        "+" + "-" * inner + "+",
    ]
    return "\n".join(lines)


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _run_flow(definition: Definition, renderer: Renderer) -> WizardEngine:
    engine = WizardEngine(definition)

    typer.echo(_frame(definition.name or "Interactive Wizard", title="FLOWWIZARD"))

    while not engine.finished:
        typer.echo(f"\n  Step {len(engine.history) + 1}: {engine.current_step_id}")
        typer.echo(f"  {'─' * 40}")
        engine.answer(renderer.render(engine.current_step))

    return engine


def _build_result(flow_file: str, engine: WizardEngine) -> dict:
    history = engine.history
    return {
        'flow_file': flow_file,
        'path_taken': history,
        'answers': engine.answers,
        'steps_completed': len(history),
        'completed_at': datetime.now().astimezone().isoformat(timespec='seconds'),
    }


@app.command()
def run(
    flow_file: str = typer.Argument(..., help="Path to flow definition (.yaml file)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file for JSON results"),
):
    """Run a flow definition interactively."""
    try:
        definition = FlowLoader.load(flow_file)
        engine = _run_flow(definition, Renderer(ConsolePromptRunner()))
    except LoadError as e:
        _fail(f"Error: {e}")
    except FlowError as e:
        _fail(f"Engine error: {e}")
    except (EOFError, KeyboardInterrupt):
        _fail("Error: input aborted before the flow finished")

    json_output = json.dumps(_build_result(flow_file, engine), indent=2)

    typer.echo(_frame("Flow completed!", title="SUCCESS"))
    typer.echo(json_output)

    if output:
        try:
            output.write_text(json_output + "\n", encoding="utf-8")
        except OSError as e:
            _fail(f"Error: cannot write {output}: {e}")
        typer.echo(f"\nResults saved to {output}")


@app.command()
def graph(
    flow_file: str = typer.Argument(..., help="Path to flow definition (.yaml file)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    fmt: str = typer.Option("mermaid", "--format", "-f", help=f"Output format ({', '.join(available_formats())})"),
):
    """Export a flow definition as a diagram."""
    try:
        definition = FlowLoader.load(flow_file)
        diagram = export_definition(definition, fmt)
    except LoadError as e:
        _fail(f"Error: {e}")
    except DefinitionError as e:
        _fail(f"Definition error: {e}")
    except ValueError as e:
        _fail(f"Error: {e}")

    if output:
        try:
            output.write_text(diagram, encoding="utf-8")
        except OSError as e:
            _fail(f"Error: cannot write {output}: {e}")
        typer.echo(f"Diagram written to {output}", err=True)
    else:
        typer.echo(diagram, nl=False)


@app.command()
def validate(
    flow_file: str = typer.Argument(..., help="Path to flow definition (.yaml file)"),
):
    """Validate a flow definition file."""
    try:
        definition = FlowLoader.load(flow_file)
    except LoadError as e:
        _fail(f"Error: {e}")
    except FlowError as e:
        _fail(f"Definition error: {e}")

    diagnostics = validate_definition(definition)
    if diagnostics:
        typer.echo("Flow definition has errors:", err=True)
        for diagnostic in diagnostics:
            typer.echo(f"  - {diagnostic}", err=True)
        raise typer.Exit(code=1)

    step_ids = definition.step_ids()
    typer.echo("Flow definition is valid!")
    typer.echo(f"  Start step: {definition.start}")
    typer.echo(f"  Total steps: {len(step_ids)}")
    typer.echo(f"  Steps: {', '.join(step_ids)}")


@app.command()
def version():
    """Print version information."""
    typer.echo(f"flowwizard {__version__}")
    typer.echo(f"flowwizard-engine {ENGINE_VERSION}")


def main():
    app()
