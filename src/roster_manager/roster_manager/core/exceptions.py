class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or log entry does not exist."""


class DuplicateWarning(DomainError):
    """Soft check: the legal id is already used by an active employee.

    Callers may retry with ``confirm_duplicate=True`` to register anyway.
    """

    def __init__(self, legal_id: str, count: int):
        super().__init__(f"Legal id {legal_id} already belongs to {count} active employee(s)")
        self.legal_id = legal_id
        self.count = count


class PersistenceError(DomainError):
    """Raised by storage backends; the gateway downgrades it to a logged warning."""


class AssistantError(DomainError):
    """Raised when the assistant backend cannot produce a reply."""
