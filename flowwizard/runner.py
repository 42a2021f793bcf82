"""PromptRunner interface - all terminal I/O goes here."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class PromptRunner(ABC):
    """Interface for talking to the respondent."""

    @abstractmethod
    def display(self, message: str) -> None:
        """Display a message to the user.

        Args:
            message: Text to display (may contain newlines)
        """
        pass

    @abstractmethod
    def get_input(self, prompt: str, default: Optional[Any] = None) -> str:
        """Get input from user.

        Args:
            prompt: Question to ask user
            default: Default value if user presses Enter (shown in [brackets])

        Returns:
            User's input string (or default if empty)
        """
        pass


class ConsolePromptRunner(PromptRunner):
    """Real implementation - reads stdin and writes stdout."""

    def display(self, message: str) -> None:
        """Print message to stdout."""
        print(message)

    def get_input(self, prompt: str, default: Optional[Any] = None) -> str:
        """Read from stdin with optional default."""
        if default is not None:
            # Special formatting for boolean defaults
            if isinstance(default, bool):
                default_display = 'y/N' if not default else 'Y/n'
            else:
                default_display = str(default)

            response = input(f"{prompt} [{default_display}]: ").strip()
            return response if response else str(default)

        return input(f"{prompt}: ").strip()


class MockPromptRunner(PromptRunner):
    """Mock for testing - records calls and replays scripted input."""

    def __init__(self, inputs: Optional[List[str]] = None):
        self.calls = []
        self.input_queue = list(inputs or [])  # Pre-scripted user inputs for testing

    def display(self, message: str) -> None:
        """Capture display call for test verification."""
        self.calls.append(('display', message))

    def get_input(self, prompt: str, default: Optional[Any] = None) -> str:
        """Return next value from input_queue."""
        self.calls.append(('get_input', prompt, default))

        if self.input_queue:
            response = self.input_queue.pop(0)
            # Match ConsolePromptRunner: apply default if response is empty
            if response:
                return response
            return str(default) if default is not None else ''

        # An exhausted script would otherwise loop forever on re-prompts
        raise EOFError(f"No scripted input left for prompt: {prompt}")

    @property
    def displayed(self) -> List[str]:
        return [c[1] for c in self.calls if c[0] == 'display']
