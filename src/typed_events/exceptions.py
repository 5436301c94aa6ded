"""Exceptions raised by typed-events."""


class EventEmitterError(RuntimeError):
    """Base error for all dispatcher related exceptions."""


class SchemaError(EventEmitterError):
    """Raised when an event declaration cannot be turned into a schema."""


class UnknownEventError(EventEmitterError, LookupError):
    """Raised when an event key is not part of the declared schema."""

    def __init__(self, event: object) -> None:
        super().__init__(f"Unknown event: {event!r}")
        self.event = event


class EventArgumentsError(EventEmitterError, TypeError):
    """Raised when emitted arguments do not match the declared signature."""

    def __init__(self, event: object, reason: str) -> None:
        super().__init__(f"Invalid arguments for event {event!r}: {reason}")
        self.event = event
        self.reason = reason
