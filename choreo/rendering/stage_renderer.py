"""
K-Pop Choreo Formation Editor - Stage Renderer

Renders the stage floor, border and the front/center markers.
"""

import pygame
from pygame import Rect, Surface

from choreo.controllers.view_state import CoordinateMapper, ViewportTransform
from choreo.core.constants import (
    CENTER_LABEL,
    CENTER_MARKER_RADIUS,
    COLOR_MARKER,
    COLOR_STAGE,
    COLOR_STAGE_BORDER,
    FRONT_LABEL,
    FRONT_LABEL_Y,
)

from .render_context import RenderContext


class StageRenderer:
    """Renders the stage background and fixed markers."""

    @staticmethod
    def stage_rect(transform: ViewportTransform, stage_width: float, stage_height: float) -> Rect:
        """Screen rectangle covered by the stage."""
        corners = [
            CoordinateMapper.to_device(p, transform)
            for p in ((0, 0), (stage_width, 0), (0, stage_height), (stage_width, stage_height))
        ]
        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        left, top = round(min(xs)), round(min(ys))
        return Rect(left, top, round(max(xs)) - left, round(max(ys)) - top)

    @staticmethod
    def render_floor(screen: Surface, transform: ViewportTransform, stage_width: float, stage_height: float):
        """Fill the stage area."""
        pygame.draw.rect(screen, COLOR_STAGE, StageRenderer.stage_rect(transform, stage_width, stage_height))

    @staticmethod
    def render_overlay(
        screen: Surface,
        context: RenderContext,
        stage_width: float,
        stage_height: float,
    ):
        """
        Render stage border and markers on top of the grid.

        Args:
            screen: Pygame surface to draw on
            context: Rendering context
            stage_width: Stage width in stage units
            stage_height: Stage height in stage units
        """
        transform = context.transform
        border = StageRenderer.stage_rect(transform, stage_width, stage_height)
        pygame.draw.rect(screen, COLOR_STAGE_BORDER, border, 2)

        if not context.show_markers:
            return

        # Front of stage faces the audience
        front_x, front_y = CoordinateMapper.to_device((stage_width / 2, FRONT_LABEL_Y), transform)
        text_surf = context.font.render(FRONT_LABEL, True, COLOR_MARKER)
        screen.blit(text_surf, text_surf.get_rect(center=(front_x, front_y)))

        center = CoordinateMapper.to_device((stage_width / 2, stage_height / 2), transform)
        marker_radius = max(1, round(CENTER_MARKER_RADIUS * transform.scale))
        pygame.draw.circle(screen, COLOR_MARKER, center, marker_radius)

        label_pos = CoordinateMapper.to_device((stage_width / 2 + 10, stage_height / 2), transform)
        text_surf = context.font.render(CENTER_LABEL, True, COLOR_MARKER)
        screen.blit(text_surf, text_surf.get_rect(midleft=label_pos))
