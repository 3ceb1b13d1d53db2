"""
Drag tool for repositioning dancers with the mouse or a finger.
"""

import pygame

from choreo.controllers.view_state import CoordinateMapper
from choreo.core.constants import MOUSE_POINTER_ID
from choreo.core.errors import TransformUnavailable

from .base_tool import ToolResult


class DragTool:
    """Drag tool - press a dancer, drag it, release to drop."""

    def handle_mouse_down(self, pos, button, modifiers, context, pointer_id=MOUSE_POINTER_ID):
        if button != 1:
            return ToolResult.not_handled()

        try:
            stage_point = CoordinateMapper.to_stage(pos, context.get_transform())
        except TransformUnavailable:
            return ToolResult.not_handled()

        dancer_id = context.formation.hit_test(stage_point)
        if dancer_id is None:
            return ToolResult.not_handled()

        return ToolResult.from_drag(
            context.drag_controller.press(dancer_id, pos, pointer_id)
        )

    def handle_mouse_up(self, pos, button, context, pointer_id=MOUSE_POINTER_ID):
        if button != 1 or not self._owns_drag(context, pointer_id):
            return ToolResult.not_handled()
        return ToolResult.from_drag(context.drag_controller.release())

    def handle_mouse_motion(self, pos, context, pointer_id=MOUSE_POINTER_ID):
        if not self._owns_drag(context, pointer_id):
            return ToolResult.not_handled()
        return ToolResult.from_drag(context.drag_controller.move(pos))

    def handle_pointer_leave(self, context):
        return ToolResult.from_drag(context.drag_controller.pointer_leave())

    def handle_key_down(self, key, modifiers, context):
        # Escape drops the dancer where it is
        if key == pygame.K_ESCAPE and context.drag_controller.is_dragging:
            return ToolResult.from_drag(context.drag_controller.release())
        return ToolResult.not_handled()

    def _owns_drag(self, context, pointer_id):
        """Only the pointer that started the drag may move or end it."""
        session = context.drag_controller.session
        return session is not None and session.pointer_id == pointer_id
