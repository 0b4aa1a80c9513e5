"""Error kinds raised by the domain and use-case layers.

The three kinds are siblings: catching one never catches another, so the
HTTP layer can map each to its own response shape.
"""

from typing import Optional


class ValidationError(Exception):
    """Structural problems with incoming data, one message per violated rule."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("Validation failed")


class NotFoundError(Exception):
    """A referenced resource does not exist."""

    def __init__(self, resource: str, id: Optional[str] = None) -> None:
        self.resource = resource
        self.id = id
        if id:
            message = f"{resource} with id {id} not found"
        else:
            message = f"{resource} not found"
        self.message = message
        super().__init__(message)


class DomainError(Exception):
    """An entity invariant was violated."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
