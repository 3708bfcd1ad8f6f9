"""Error taxonomy for the wedding plan core.

Every failure is local to a single mutation attempt; none is fatal to the process.
"""


class PlanError(Exception):
    """Base class for wedding plan errors."""


class NotFound(PlanError, LookupError):
    """An id (guest, task, vendor, template) does not exist."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} '{key}' not found")


class CategoryNotFound(NotFound):
    """A budget category outside the fixed set was referenced."""

    def __init__(self, category: str):
        super().__init__("Budget category", category)


class InvalidInput(PlanError, ValueError):
    """Input could not be accepted (non-numeric amount, unknown status, unknown field)."""

    def __init__(self, message: str, errors=None):
        self.errors = errors or []
        super().__init__(message)


class DeserializationError(PlanError, ValueError):
    """A stored or imported plan document is malformed."""


__all__ = ['PlanError', 'NotFound', 'CategoryNotFound', 'InvalidInput', 'DeserializationError']
