"""Base exception classes for the task ledger domain layer."""


class TaskLedgerError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.

    Every subclass carries a stable ``code`` identifier. Callers match on
    the code (or the class) to decide whether to retry with different
    arguments, obtain a different credential, or give up.

    Attributes:
        code: Stable error identifier exposed to callers.
    """

    code: str = "TaskLedgerError"

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
