"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A submission is missing a required field."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class IdempotencyConflictError(DomainError):
    """Raised when a client-supplied comment id is reused for different content."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(
            f"Comment {comment_id} already exists with different content"
        )
