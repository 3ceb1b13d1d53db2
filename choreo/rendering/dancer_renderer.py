"""
K-Pop Choreo Formation Editor - Dancer Renderer

Renders dancers as labeled circles, highlighting the one being dragged.
"""

import pygame
from pygame import Surface

from choreo.controllers.view_state import CoordinateMapper
from choreo.core.constants import (
    COLOR_DANCER_LABEL,
    COLOR_DANCER_OUTLINE,
    COLOR_DRAG_HIGHLIGHT,
)
from choreo.data.formation import Dancer

from .render_context import RenderContext


class DancerRenderer:
    """Renders dancer circles."""

    @staticmethod
    def render(screen: Surface, dancers: list[Dancer], context: RenderContext):
        """
        Render all dancers in draw order.

        Args:
            screen: Pygame surface to draw on
            dancers: Dancers bottom to top
            context: Rendering context
        """
        scale = context.transform.scale
        dragged_id = context.drag_status.dancer_id

        for dancer in dancers:
            center = CoordinateMapper.to_device((dancer.x, dancer.y), context.transform)
            radius = max(1, round(dancer.radius * scale))

            if dancer.id == dragged_id:
                pygame.draw.circle(screen, COLOR_DRAG_HIGHLIGHT, center, radius + 4)

            pygame.draw.circle(screen, dancer.color, center, radius)
            pygame.draw.circle(screen, COLOR_DANCER_OUTLINE, center, radius, 2)

            if dancer.name:
                text_surf = context.font.render(dancer.name, True, COLOR_DANCER_LABEL)
                screen.blit(text_surf, text_surf.get_rect(center=center))
