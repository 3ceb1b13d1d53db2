"""
K-Pop Choreo Formation Editor - Drag Controller

Press/drag/release state machine for moving dancers around the stage.
"""

from typing import Callable

from choreo.core.constants import MOUSE_POINTER_ID
from choreo.core.errors import DragError, InvalidTransition
from choreo.data.formation import Dancer, Formation

from .drag_state import IDLE, DragSession, DragStatus
from .view_state import CoordinateMapper, ViewportTransform

TransformProvider = Callable[[], ViewportTransform | None]


class DragResult:
    """Outcome of a drag transition."""

    def __init__(
        self,
        handled: bool = False,
        needs_render: bool = False,
        error: DragError | None = None,
        message: str | None = None,
    ):
        self.handled = handled
        self.needs_render = needs_render
        self.error = error
        self.message = message

    @staticmethod
    def changed(message: str | None = None) -> "DragResult":
        """State or positions changed; redraw."""
        return DragResult(handled=True, needs_render=True, message=message)

    @staticmethod
    def unchanged() -> "DragResult":
        """Event accepted but nothing changed."""
        return DragResult(handled=True)

    @staticmethod
    def ignored(error: DragError) -> "DragResult":
        """Event rejected; state is untouched."""
        return DragResult(handled=False, error=error, message=str(error))


class DragController:
    """Owns the drag session and writes dancer positions.

    States are Idle and Dragging(dancer_id). At most one session exists.
    Rejected events never change state; they come back as ignored results.
    """

    def __init__(self, formation: Formation, transform_provider: TransformProvider):
        """
        Initialize drag controller.

        Args:
            formation: Dancer position table to edit
            transform_provider: Returns the current stage -> device transform
        """
        self.formation = formation
        self.transform_provider = transform_provider
        self._session: DragSession | None = None

    @property
    def session(self) -> DragSession | None:
        return self._session

    @property
    def status(self) -> DragStatus:
        """Current state for the rendering layer."""
        if self._session is None:
            return IDLE
        return self._session.status

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    def press(
        self,
        dancer_id: str,
        device_point: tuple[float, float],
        pointer_id: int = MOUSE_POINTER_ID,
    ) -> DragResult:
        """
        Start dragging a dancer.

        Args:
            dancer_id: Dancer under the pointer
            device_point: Pointer position in window pixels
            pointer_id: Device pointer that owns the drag
        """
        try:
            if self._session is not None:
                raise InvalidTransition(
                    f"Press on {dancer_id} while dragging {self._session.dancer_id}"
                )
            dancer = self.formation.get(dancer_id)
            stage_x, stage_y = self._to_stage(device_point)
        except DragError as e:
            return DragResult.ignored(e)

        offset = (stage_x - dancer.x, stage_y - dancer.y)
        self._session = DragSession(dancer_id, offset, pointer_id)
        return DragResult.changed(f"Dragging {dancer_id}")

    def move(self, device_point: tuple[float, float]) -> DragResult:
        """Move the dragged dancer so the grabbed point follows the pointer."""
        try:
            if self._session is None:
                raise InvalidTransition("Move with no active drag")
            stage_x, stage_y = self._to_stage(device_point)
        except DragError as e:
            return DragResult.ignored(e)

        dx, dy = self._session.grab_offset
        self.formation.move_dancer(self._session.dancer_id, stage_x - dx, stage_y - dy)
        return DragResult.changed()

    def release(self) -> DragResult:
        """End the drag. Safe to call in any state."""
        if self._session is None:
            return DragResult.unchanged()
        dancer_id = self._session.dancer_id
        self._session = None
        return DragResult.changed(f"Dropped {dancer_id}")

    def pointer_leave(self) -> DragResult:
        """Pointer left the interaction surface; ends the drag like release."""
        return self.release()

    def dragged_dancer(self) -> Dancer | None:
        """Snapshot of the dancer being dragged, if any."""
        if self._session is None:
            return None
        return self.formation.get(self._session.dancer_id)

    def _to_stage(self, device_point: tuple[float, float]) -> tuple[float, float]:
        return CoordinateMapper.to_stage(device_point, self.transform_provider())
