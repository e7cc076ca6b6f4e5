"""Error types raised by the observer and prototype components."""


class PatternError(Exception):
    """Base class for errors raised by this package."""


class NotFoundError(PatternError, LookupError):
    """Requested registry key does not exist."""

    def __init__(self, key: str) -> None:
        super().__init__(f"no prototype registered under {key!r}")
        self.key = key


class InvalidStateError(PatternError, RuntimeError):
    """A channel was mutated from inside one of its own notifications."""

    def __init__(self, channel_name: str, operation: str) -> None:
        super().__init__(
            f"cannot {operation} on channel {channel_name!r} while it is notifying subscribers"
        )
        self.channel_name = channel_name
        self.operation = operation
