"""Domain layer errors.

Every error raised by the scheduling engine is one of the subclasses below.
None of them is retried by the engine; callers decide how to present them.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        resource_id: str | None = None,
    ):
        self.message = message
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed input, rejected before any persistence access."""

    pass


class AuthorizationError(DomainError):
    """Raised when an actor is not permitted to perform a transition."""

    def __init__(self, resource: str, resource_id: str, actor_id: str, action: str):
        self.actor_id = actor_id
        self.action = action
        super().__init__(
            f"Person {actor_id} is not allowed to {action} {resource} {resource_id}",
            resource=resource,
            resource_id=resource_id,
        )


class ConflictError(DomainError):
    """Raised when an entity is not in the state a transition requires.

    Also raised for the loser of a concurrent accept race.
    """

    def __init__(
        self,
        message: str,
        resource: str,
        resource_id: str,
        current_state: str | None = None,
    ):
        self.current_state = current_state
        super().__init__(message, resource=resource, resource_id=resource_id)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"{resource} not found: {identifier}",
            resource=resource,
            resource_id=identifier,
        )


class TransientError(DomainError):
    """Connectivity or persistence-layer failure. Safe to retry."""

    pass
