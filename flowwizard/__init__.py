"""flowwizard - data-driven interactive wizards built from YAML flow graphs."""

__version__ = "0.1.0"

from .renderer import Renderer
from .runner import PromptRunner, ConsolePromptRunner, MockPromptRunner

__all__ = [
    '__version__',
    'Renderer',
    'PromptRunner',
    'ConsolePromptRunner',
    'MockPromptRunner',
]
