"""
Tool protocol and base definitions for editor tools.
"""

from typing import Protocol

from choreo.controllers.drag_controller import DragResult


class Tool(Protocol):
    """Protocol defining the tool interface.

    Tools don't need to inherit from this - they just need to implement these methods.
    Pointer handlers take a pointer_id so touch fingers and the mouse can be
    told apart.
    """

    def handle_mouse_down(
        self, pos: tuple[float, float], button: int, modifiers: int,
        context: "ToolContext", pointer_id: int = 0,
    ) -> "ToolResult":
        """Handle pointer press."""
        ...

    def handle_mouse_up(
        self, pos: tuple[float, float], button: int, context: "ToolContext",
        pointer_id: int = 0,
    ) -> "ToolResult":
        """Handle pointer release."""
        ...

    def handle_mouse_motion(
        self, pos: tuple[float, float], context: "ToolContext", pointer_id: int = 0
    ) -> "ToolResult":
        """Handle pointer motion."""
        ...

    def handle_pointer_leave(self, context: "ToolContext") -> "ToolResult":
        """Handle the pointer leaving the window."""
        ...

    def handle_key_down(
        self, key: int, modifiers: int, context: "ToolContext"
    ) -> "ToolResult":
        """Handle key down event (for tool-specific shortcuts)."""
        ...


class ToolContext:
    """Context object providing tools access to application state.

    This acts as a facade, limiting what tools can access and preventing
    tight coupling to Application internals.
    """

    def __init__(
        self,
        formation,
        drag_controller,
        state,
        transform_provider,
    ):
        self.formation = formation
        self.drag_controller = drag_controller
        self.state = state
        self.transform_provider = transform_provider

    def get_transform(self):
        """Current stage -> device transform, or None if the canvas has no size."""
        return self.transform_provider()


class ToolResult:
    """Result of a tool operation."""

    def __init__(
        self,
        handled: bool = False,
        needs_render: bool = False,
        message: str | None = None,
    ):
        self.handled = handled
        self.needs_render = needs_render
        self.message = message

    @staticmethod
    def handled() -> "ToolResult":
        """Event handled but no action needed."""
        return ToolResult(handled=True)

    @staticmethod
    def not_handled() -> "ToolResult":
        """Event not handled."""
        return ToolResult(handled=False)

    @staticmethod
    def from_drag(result: DragResult) -> "ToolResult":
        """Wrap a drag controller result."""
        return ToolResult(
            handled=result.handled,
            needs_render=result.needs_render,
            message=result.message,
        )
