"""
Exceptions raised by the rendezvous package.

Membership and lookup operations are total and never raise; these errors
only surface while resolving configuration (hasher names, environment).
"""


class RendezvousError(Exception):
    """Base class for all rendezvous errors."""

    pass


class UnknownHasherError(RendezvousError, ValueError):
    """
    Raised when a hasher is requested by a name that is not registered.

    Subclasses ValueError so callers validating user input can catch it
    alongside other bad-value errors.
    """

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown hasher {name!r}, expected one of: {', '.join(available)}"
        )
