"""Domain-specific exceptions — framework-independent.

These are returned as values inside a ``Result`` rather than raised; the
presentation layer decides how each one is rendered to callers.
"""


class DomainError(Exception):
    """Base class for every failure the content domain can report."""

    code = "domain_error"


class InvalidInputError(DomainError):
    """A field invariant would be violated (title/body length, unknown tag)."""

    code = "invalid_input"

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class InvalidStateError(InvalidInputError):
    """An unknown content state tag was supplied."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid content state: {value}", field="state")


class IllegalTransitionError(DomainError):
    """The lifecycle state machine forbids the requested transition."""

    code = "illegal_transition"

    def __init__(self, from_state: str, to_state: str):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(f"Cannot transition from {from_state} to {to_state}")


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    code = "not_found"

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PermissionDeniedError(DomainError):
    """The caller's role/ownership does not allow the action."""

    code = "permission_denied"

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Permission denied: cannot {action}")


class InvalidOperationError(DomainError):
    """An operation was used against the wrong lifecycle phase."""

    code = "invalid_operation"


class StorageError(DomainError):
    """The persistence backend failed.

    Provider-agnostic — wraps driver errors so they travel as values.
    """

    code = "storage_error"

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"[{operation}] {message}")
