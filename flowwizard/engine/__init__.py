"""Flow engine - core graph model, traversal, validation and export."""

ENGINE_VERSION = "0.1.0"

from .definition import Definition, DefinitionBuilder
from .engine import WizardEngine
from .errors import DefinitionError, FlowError, InvalidState, LoadError, UnknownStep
from .graph import MermaidExporter, export_definition
from .loader import FlowLoader
from .predicates import AllOf, AnyOf, Contains, Equals, Predicate, all_of, any_of, contains, equals
from .schema import FlowDocument, Step, Transition
from .validator import Diagnostic, validate_definition

__all__ = [
    'ENGINE_VERSION',
    'Definition',
    'DefinitionBuilder',
    'WizardEngine',
    'FlowError',
    'LoadError',
    'DefinitionError',
    'UnknownStep',
    'InvalidState',
    'MermaidExporter',
    'export_definition',
    'FlowLoader',
    'Predicate',
    'Equals',
    'Contains',
    'AllOf',
    'AnyOf',
    'equals',
    'contains',
    'all_of',
    'any_of',
    'FlowDocument',
    'Step',
    'Transition',
    'Diagnostic',
    'validate_definition',
]
