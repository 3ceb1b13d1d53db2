"""
K-Pop Choreo Formation Editor - Event Handler

Handles user input events including mouse, touch, keyboard, and window events.
"""

from typing import Callable

import pygame

from choreo.core.constants import MOUSE_POINTER_ID
from choreo.core.errors import TransformUnavailable
from choreo.data.formation import Formation
from choreo.tools.base_tool import Tool, ToolContext, ToolResult
from choreo.ui.widgets import Button

from .drag_controller import DragController, TransformProvider
from .editor_state import EditorState
from .view_state import CoordinateMapper


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: EditorState,
        formation: Formation,
        drag_controller: DragController,
        tool: Tool,
        buttons: list[Button],
        screen_width: int,
        screen_height: int,
        transform_provider: TransformProvider,
        on_resize: Callable[[int, int], None],
    ):
        """
        Initialize event handler.

        Args:
            state: Editor state
            formation: Dancer formation being edited
            drag_controller: Drag state machine
            tool: Active pointer tool
            buttons: List of UI buttons
            screen_width: Screen width
            screen_height: Screen height
            transform_provider: Returns the current stage -> device transform
            on_resize: Callback for window resize (width, height)
        """
        self.state = state
        self.formation = formation
        self.drag_controller = drag_controller
        self.tool = tool
        self.buttons = buttons
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.transform_provider = transform_provider
        self.on_resize = on_resize

        self.tool_context = ToolContext(
            formation=formation,
            drag_controller=drag_controller,
            state=state,
            transform_provider=transform_provider,
        )

    def update_screen_size(self, width: int, height: int):
        """Update screen dimensions."""
        self.screen_width = width
        self.screen_height = height

    def handle_events(self, events: list[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Args:
            events: List of pygame events to process

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                if not self._handle_key(event):
                    return False
                continue

            # Mouse events synthesized from touch arrive twice otherwise
            if getattr(event, "touch", False):
                continue

            # Buttons only take clicks and taps while no dancer is held
            if not self.drag_controller.is_dragging:
                screen_size = (self.screen_width, self.screen_height)
                if any(button.handle_event(event, screen_size) for button in self.buttons):
                    continue

            if event.type == pygame.MOUSEBUTTONDOWN:
                self._apply(self.tool.handle_mouse_down(
                    event.pos, event.button, pygame.key.get_mods(), self.tool_context
                ))

            elif event.type == pygame.MOUSEBUTTONUP:
                self._apply(self.tool.handle_mouse_up(event.pos, event.button, self.tool_context))

            elif event.type == pygame.MOUSEMOTION:
                self._track_hover(event.pos)
                self._apply(self.tool.handle_mouse_motion(event.pos, self.tool_context))

            elif event.type == pygame.FINGERDOWN:
                self._apply(self.tool.handle_mouse_down(
                    self._finger_pos(event), 1, 0, self.tool_context,
                    pointer_id=self._finger_pointer_id(event),
                ))

            elif event.type == pygame.FINGERMOTION:
                self._apply(self.tool.handle_mouse_motion(
                    self._finger_pos(event), self.tool_context,
                    pointer_id=self._finger_pointer_id(event),
                ))

            elif event.type == pygame.FINGERUP:
                self._apply(self.tool.handle_mouse_up(
                    self._finger_pos(event), 1, self.tool_context,
                    pointer_id=self._finger_pointer_id(event),
                ))

            elif event.type == pygame.WINDOWLEAVE:
                self.state.hover_stage_pos = None
                self._apply(self.tool.handle_pointer_leave(self.tool_context))

            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)

        return True

    def _handle_key(self, event) -> bool:
        """Handle keyboard input. Returns False if quit requested."""
        if event.key == pygame.K_q and pygame.key.get_mods() & pygame.KMOD_CTRL:
            return False

        result = self.tool.handle_key_down(event.key, pygame.key.get_mods(), self.tool_context)
        if result.handled:
            self._apply(result)
            return True

        if event.key == pygame.K_g:
            self.state.toggle_grid()
        elif event.key == pygame.K_m:
            self.state.toggle_markers()

        return True

    def _apply(self, result: ToolResult):
        self.state.set_message(result.message)

    def _track_hover(self, pos: tuple[int, int]):
        """Remember the stage position under the mouse for the status bar."""
        try:
            self.state.hover_stage_pos = CoordinateMapper.to_stage(pos, self.transform_provider())
        except TransformUnavailable:
            self.state.hover_stage_pos = None

    def _finger_pos(self, event) -> tuple[float, float]:
        """Finger events carry positions normalized to the window size."""
        return (event.x * self.screen_width, event.y * self.screen_height)

    @staticmethod
    def _finger_pointer_id(event) -> int:
        # Offset so finger 0 never collides with the mouse pointer id
        return MOUSE_POINTER_ID + 1 + event.finger_id
