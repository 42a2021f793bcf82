"""FlowLoader - loads and validates YAML flow definitions."""

import logging
import yaml
from pathlib import Path
from typing import Union
from pydantic import ValidationError

from .definition import Definition
from .errors import LoadError
from .schema import FlowDocument

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')


class FlowLoader:
    """
    Loads a flow definition from a YAML file.

    Structure is validated with Pydantic models before the Definition is
    built, so no code from the flow file is ever executed.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize loader.

        Args:
            path: Path to the flow file

        Raises:
            LoadError: If the file doesn't exist or is not a YAML file
        """
        self.path = Path(path).expanduser().resolve()
        self._validate_path()

    @classmethod
    def load(cls, path: Union[str, Path]) -> Definition:
        return cls(path).load_definition()

    def _validate_path(self) -> None:
        if not self.path.is_file():
            raise LoadError(f"File not found: {self.path}")
        if self.path.suffix.lower() not in YAML_SUFFIXES:
            raise LoadError(f"Not a YAML file: {self.path}")

    def load_document(self) -> FlowDocument:
        """
        Parse and validate the flow document.

        Returns:
            Validated FlowDocument instance

        Raises:
            LoadError: If the YAML is malformed or doesn't match the schema
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise LoadError(f"Syntax error in {self.path}: {e}") from e
        except OSError as e:
            raise LoadError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise LoadError(f"Invalid flow definition in {self.path}: expected a mapping at the top level")

        bad_keys = [key for key in data if not isinstance(key, str)]
        if bad_keys:
            raise LoadError(f"Invalid flow definition in {self.path}: top-level keys must be strings, got {bad_keys!r}")

        try:
            return FlowDocument.model_validate(data)
        except ValidationError as e:
            raise LoadError(f"Invalid flow definition in {self.path}: {e}") from e

    def load_definition(self) -> Definition:
        """
        Load the flow as an immutable Definition.

        Raises:
            LoadError: If the file can't be read or parsed
            DefinitionError: If step ids are duplicated
        """
        document = self.load_document()
        definition = Definition.from_document(document)
        logger.debug("Loaded flow %r from %s (%d steps)", definition.name, self.path, len(definition))
        return definition
