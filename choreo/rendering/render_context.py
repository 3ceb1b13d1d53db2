"""
K-Pop Choreo Formation Editor - Render Context

Bundles rendering resources and settings for stage rendering.
"""

import pygame

from choreo.controllers.drag_state import DragStatus
from choreo.controllers.view_state import ViewportTransform


class RenderContext:
    """Bundles rendering resources and settings."""

    def __init__(
        self,
        transform: ViewportTransform,
        font: pygame.font.Font,
        drag_status: DragStatus,
        show_grid: bool = True,
        show_markers: bool = True,
    ):
        """
        Initialize render context.

        Args:
            transform: Stage -> screen transform for this frame
            font: Font for dancer labels and stage markers
            drag_status: Current drag state (which dancer is held, if any)
            show_grid: Whether to show grid overlay
            show_markers: Whether to show front and center markers
        """
        self.transform = transform
        self.font = font
        self.drag_status = drag_status
        self.show_grid = show_grid
        self.show_markers = show_markers
