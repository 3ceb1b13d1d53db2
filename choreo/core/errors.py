"""
K-Pop Choreo Formation Editor - Drag Errors

Recoverable error kinds raised while mapping pointers and driving drags.
None of these escape the drag controller; each turns into a no-op.
"""


class DragError(Exception):
    """Base class for recoverable drag errors."""


class TransformUnavailable(DragError):
    """The viewport transform is missing or not invertible."""


class EntityNotFound(DragError):
    """A press referenced a dancer id that is not in the formation."""

    def __init__(self, dancer_id: str):
        super().__init__(f"No dancer with id {dancer_id!r}")
        self.dancer_id = dancer_id


class InvalidTransition(DragError):
    """An event arrived in a state where it has no meaning."""
