"""
K-Pop Choreo Formation Editor - Drag State

Drag status exposed to the rendering layer and the session record held
while a dancer is being dragged.
"""

from dataclasses import dataclass
from enum import Enum

from choreo.core.constants import MOUSE_POINTER_ID


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class DragStatus:
    """Read-only view of the drag state machine."""

    phase: DragPhase = DragPhase.IDLE
    dancer_id: str | None = None

    @property
    def is_idle(self) -> bool:
        return self.phase is DragPhase.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.phase is DragPhase.DRAGGING


IDLE = DragStatus()


@dataclass(frozen=True)
class DragSession:
    """An active drag.

    grab_offset is the vector from the dancer's center to the stage point
    under the pointer at press time. It does not change during the drag.
    """

    dancer_id: str
    grab_offset: tuple[float, float]
    pointer_id: int = MOUSE_POINTER_ID

    @property
    def status(self) -> DragStatus:
        return DragStatus(DragPhase.DRAGGING, self.dancer_id)
