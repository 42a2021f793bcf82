"""Renderer - asks the respondent about one step and returns a typed answer."""

import logging
from typing import Any, Dict, List, Optional

from .engine.schema import Step
from .runner import PromptRunner

logger = logging.getLogger(__name__)

TRUE_WORDS = ('y', 'yes', 'true', '1')
FALSE_WORDS = ('n', 'no', 'false', '0')


class Renderer:
    """
    Presentation layer for the wizard.

    Dispatches on ``step.type`` to a ``_render_<type>`` method. Types without
    a handler are asked as free text, so flows can use step types this
    renderer does not know yet.
    """

    def __init__(self, runner: PromptRunner):
        self.runner = runner

    def render(self, step: Step) -> Any:
        handler = getattr(self, f"_render_{step.type}", None)
        if handler is None:
            logger.debug("No renderer for step type '%s', falling back to text", step.type)
            handler = self._render_text
        return handler(step)

    __call__ = render

    def _show_options(self, options) -> None:
        self.runner.display("")  # Blank line before options
        for i, option in enumerate(options, 1):
            self.runner.display(f"  {i}. {option}")
        self.runner.display("")  # Blank line after options

    def _match_option(self, token: str, options) -> Optional[str]:
        token = token.strip()
        if token.isdigit() and 1 <= int(token) <= len(options):
            return options[int(token) - 1]
        for option in options:
            if option.lower() == token.lower():
                return option
        return None

    def _render_single_select(self, step: Step) -> str:
        if not step.options:
            return self._render_text(step)

        self._show_options(step.options)
        while True:
            user_input = self.runner.get_input(step.prompt)
            choice = self._match_option(user_input, step.options)
            if choice is not None:
                return choice
            self.runner.display(f"Error: Please choose 1-{len(step.options)} or an option name")

    def _render_multi_select(self, step: Step) -> List[str]:
        if not step.options:
            return [self._render_text(step)]

        self._show_options(step.options)
        while True:
            user_input = self.runner.get_input(f"{step.prompt} (comma-separated)")
            tokens = [t for t in user_input.split(',') if t.strip()]
            chosen = [self._match_option(t, step.options) for t in tokens]

            if not tokens:
                self.runner.display("Error: Select at least one option")
                continue
            if None in chosen:
                self.runner.display(f"Error: Please choose from 1-{len(step.options)} or option names")
                continue

            # Drop repeats, keep the order the respondent typed
            return list(dict.fromkeys(chosen))

    def _ask_int(self, prompt: str, default: Optional[int] = None) -> int:
        while True:
            user_input = self.runner.get_input(prompt, default)
            try:
                return int(str(user_input).strip())
            except ValueError:
                self.runner.display(f"Error: Invalid integer value: {user_input}")

    def _render_number_matrix(self, step: Step) -> Dict[str, int]:
        self.runner.display(f"\n{step.prompt}\n")
        return {field: self._ask_int(f"  {field}", default=0) for field in step.fields}

    def _render_number(self, step: Step) -> int:
        return self._ask_int(step.prompt)

    def _render_text(self, step: Step) -> str:
        return self.runner.get_input(step.prompt)

    def _render_boolean(self, step: Step) -> bool:
        while True:
            user_input = str(self.runner.get_input(step.prompt, False)).lower().strip()
            if user_input in TRUE_WORDS:
                return True
            if user_input in FALSE_WORDS:
                return False
            self.runner.display("Error: Please answer yes or no")

    def _render_display(self, step: Step) -> None:
        self.runner.display(f"\n{step.prompt}\n")
        self.runner.get_input("Press Enter to continue...")
        return None
