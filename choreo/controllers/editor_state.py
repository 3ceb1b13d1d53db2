"""
K-Pop Choreo Formation Editor - Editor State

Manages view settings and status-bar feedback for the editor window.
"""


class EditorState:
    """Manages editor application state."""

    def __init__(self):
        # View settings
        self.show_grid: bool = True
        self.show_markers: bool = True

        # Last pointer position over the stage, in stage units
        self.hover_stage_pos: tuple[float, float] | None = None

        # Feedback for the status bar
        self.status_message: str | None = None

    def toggle_grid(self):
        """Toggle grid visibility."""
        self.show_grid = not self.show_grid

    def toggle_markers(self):
        """Toggle front/center marker visibility."""
        self.show_markers = not self.show_markers

    def set_message(self, message: str | None):
        """Show a message in the status bar (None keeps the current one)."""
        if message:
            self.status_message = message
