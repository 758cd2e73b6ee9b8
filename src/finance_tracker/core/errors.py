"""Domain error taxonomy.

Every condition the core can detect is its own class so callers branch on
type, never on message text. All of them are raised before any mutation.
"""


class FinanceError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(FinanceError):
    """Record does not exist, is deleted, or belongs to another user."""


class InvalidDateRangeError(FinanceError):
    """Dates are out of order or a due date is not in the future."""


class ReferenceInactiveError(FinanceError):
    """Referenced category or account exists but is inactive or deleted."""


class OverlapError(FinanceError):
    """A budget for the same category already covers part of the range."""
