"""Contract faults raised by the engine.

Business-rule failures are not exceptions: the validator returns a
Rejection value. These two signal that a caller skipped validation.
"""


class InvalidArgument(ValueError):
    """A structurally impossible input reached the calculation stage."""


class InvalidState(RuntimeError):
    """An internal ordering invariant was violated."""
