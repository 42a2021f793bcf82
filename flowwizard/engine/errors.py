"""Error types raised by the flow engine core."""


class FlowError(Exception):
    """Base class for every error raised by flowwizard."""


class LoadError(FlowError):
    """Flow source could not be found, had the wrong kind, or failed to parse."""


class DefinitionError(FlowError):
    """Flow definition violates a structural invariant (e.g. duplicate step ids)."""


class UnknownStep(FlowError):
    """A step id was referenced that does not exist in the definition."""

    def __init__(self, step_id: str, message: str = None):
        self.step_id = step_id
        super().__init__(message or f"Unknown step: {step_id}")


class InvalidState(FlowError):
    """An engine operation was called out of sequence."""
