"""Exception types raised by the LEA core.

All of them derive from ValueError, so callers that already guard
against bad sizes with ``except ValueError`` keep working.
"""


class LeaError(ValueError):
    """Base class for LEA input errors."""


class InvalidKeyLength(LeaError):
    """Key is not 16, 24 or 32 bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Key must be 16, 24 or 32 bytes, got {length}")


class InvalidDirection(LeaError):
    """Direction is not a Direction member, or does not match the schedule."""

    def __init__(self, direction: object, expected: object | None = None):
        self.direction = direction
        self.expected = expected
        if expected is None:
            msg = f"Unknown direction: {direction!r}"
        else:
            msg = f"Schedule built for {direction!r}, expected {expected!r}"
        super().__init__(msg)


class InvalidBlockLength(LeaError):
    """Block is not exactly 16 bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Block must be 16 bytes, got {length}")
