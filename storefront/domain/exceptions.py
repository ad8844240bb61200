"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str | None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class PermissionDeniedError(Exception):
    """Raised when the acting user does not own the requested customer data."""

    def __init__(self, entity_id: int | str | None):
        self.entity_id = entity_id
        super().__init__(f'Not allowed to access customer data for ID "{entity_id}"')


class ValidationFailedError(Exception):
    """Raised when input values are incomplete for the requested operation.

    ``field`` names the missing or invalid input key, if there is one.
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class TypeMismatchError(TypeError):
    """Raised when an object does not provide the expected capability set."""

    def __init__(self, expected: type, actual: object):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Class '{type(actual).__name__}' does not implement '{expected.__name__}'"
        )
