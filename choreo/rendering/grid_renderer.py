"""
K-Pop Choreo Formation Editor - Grid Renderer

Renders the alignment grid over the stage.
"""

import pygame
from pygame import Surface

from choreo.controllers.view_state import CoordinateMapper, ViewportTransform
from choreo.core.constants import COLOR_GRID


class GridRenderer:
    """Renders grid overlay on the stage."""

    @staticmethod
    def render(
        screen: Surface,
        transform: ViewportTransform,
        stage_width: float,
        stage_height: float,
        grid_size: int,
    ):
        """
        Render grid overlay.

        Args:
            screen: Pygame surface to draw on
            transform: Stage -> screen transform
            stage_width: Stage width in stage units
            stage_height: Stage height in stage units
            grid_size: Grid pitch in stage units
        """
        to_device = CoordinateMapper.to_device

        # Vertical lines
        x = 0
        while x <= stage_width:
            start = to_device((x, 0), transform)
            end = to_device((x, stage_height), transform)
            pygame.draw.line(screen, COLOR_GRID, start, end)
            x += grid_size

        # Horizontal lines
        y = 0
        while y <= stage_height:
            start = to_device((0, y), transform)
            end = to_device((stage_width, y), transform)
            pygame.draw.line(screen, COLOR_GRID, start, end)
            y += grid_size
