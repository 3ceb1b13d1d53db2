"""
K-Pop Choreo Formation Editor - Editor Application

Main application class that orchestrates all editor components.
"""

import pygame
from pygame import Rect

from .core.config import StageConfig
from .core.constants import *
from .data.formation import Formation
from .ui.widgets import Button
from .controllers.drag_controller import DragController
from .controllers.editor_state import EditorState
from .controllers.event_handler import EventHandler
from .controllers.view_state import ViewportTransform
from .rendering.dancer_renderer import DancerRenderer
from .rendering.grid_renderer import GridRenderer
from .rendering.render_context import RenderContext
from .rendering.stage_renderer import StageRenderer
from .tools.drag_tool import DragTool

RADIUS_STEP = 2


class EditorApplication:
    """Main editor application."""

    def __init__(self, config: StageConfig):
        # Formation first, so a stage it cannot hold fails before any window opens
        self.config = config
        self.formation = Formation.default(config)

        pygame.init()

        self.screen_width = WINDOW_WIDTH
        self.screen_height = WINDOW_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.RESIZABLE
        )
        pygame.display.set_caption("K-Pop Choreo Formation Editor")

        self.font = pygame.font.SysFont("monospace", 14)

        # Create application state
        self.state = EditorState()
        self.drag_controller = DragController(self.formation, self.get_transform)
        self.tool = DragTool()

        # Create UI elements
        self.buttons: list[Button] = []
        self._create_ui()

        # Create event handler
        self.event_handler = EventHandler(
            self.state,
            self.formation,
            self.drag_controller,
            self.tool,
            self.buttons,
            self.screen_width,
            self.screen_height,
            transform_provider=self.get_transform,
            on_resize=self._on_resize,
        )

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_ui(self):
        """Create UI elements."""
        self.buttons.clear()
        x = 10

        self.buttons.append(Button(
            Rect(x, 5, 60, 30), "Grid", self.state.toggle_grid,
            is_active=lambda: self.state.show_grid,
        ))
        x += 70

        self.buttons.append(Button(
            Rect(x, 5, 80, 30), "Markers", self.state.toggle_markers,
            is_active=lambda: self.state.show_markers,
        ))
        x += 100

        self.buttons.append(Button(Rect(x, 5, 40, 30), "R-", lambda: self._change_radius(-RADIUS_STEP)))
        x += 50

        self.buttons.append(Button(Rect(x, 5, 40, 30), "R+", lambda: self._change_radius(RADIUS_STEP)))

    def _change_radius(self, delta: float):
        """Grow or shrink every dancer, keeping them on stage."""
        try:
            moved = self.formation.adjust_radius(delta)
        except ValueError as e:
            self.state.set_message(str(e))
            return
        for dancer_id in moved:
            print(f"Warning: Dancer {dancer_id} moved back inside the stage")

    def _on_resize(self, width: int, height: int):
        """Handle window resize."""
        self.screen_width = width
        self.screen_height = height
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.event_handler.update_screen_size(width, height)

    def _get_canvas_rect(self) -> Rect:
        """Get the canvas drawing area."""
        return Rect(
            CANVAS_OFFSET_X,
            CANVAS_OFFSET_Y,
            max(0, self.screen_width - 2 * CANVAS_MARGIN),
            max(0, self.screen_height - CANVAS_OFFSET_Y - CANVAS_MARGIN - STATUS_HEIGHT)
        )

    def get_transform(self) -> ViewportTransform:
        """Stage -> screen transform for the current window size."""
        return ViewportTransform.fit(
            self._get_canvas_rect(), self.formation.width, self.formation.height
        )

    def run(self):
        """Main loop."""
        while self.running:
            events = pygame.event.get()
            self.running = self.event_handler.handle_events(events)
            self._render()
            self.clock.tick(FPS)

        pygame.quit()

    def _render(self):
        """Render the editor."""
        self.screen.fill(COLOR_BG)

        self._render_toolbar()
        self._render_stage()
        self._render_status()

        pygame.display.flip()

    def _render_toolbar(self):
        """Render toolbar with buttons."""
        pygame.draw.rect(self.screen, COLOR_TOOLBAR, (0, 0, self.screen_width, TOOLBAR_HEIGHT))
        for button in self.buttons:
            button.render(self.screen, self.font)

    def _render_stage(self):
        """Render the stage, grid, markers and dancers."""
        transform = self.get_transform()
        if not transform.is_invertible():
            return

        context = RenderContext(
            transform,
            self.font,
            self.drag_controller.status,
            show_grid=self.state.show_grid,
            show_markers=self.state.show_markers,
        )
        width, height = self.formation.width, self.formation.height

        StageRenderer.render_floor(self.screen, transform, width, height)
        if context.show_grid:
            GridRenderer.render(self.screen, transform, width, height, self.config.grid_size)
        StageRenderer.render_overlay(self.screen, context, width, height)
        DancerRenderer.render(self.screen, self.formation.dancers(), context)

    def _render_status(self):
        """Render status bar."""
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)

        dragged = self.drag_controller.dragged_dancer()
        if dragged is not None:
            status_parts = [f"Currently dragging: {dragged.id} ({dragged.x:.0f}, {dragged.y:.0f})"]
        else:
            status_parts = ["Currently dragging: none"]

        if self.state.hover_stage_pos is not None:
            x, y = self.state.hover_stage_pos
            status_parts.append(f"Stage: ({x:.0f}, {y:.0f})")

        if self.state.status_message:
            status_parts.append(self.state.status_message)

        status_text = "  |  ".join(status_parts)
        text_surf = self.font.render(status_text, True, COLOR_TEXT)
        self.screen.blit(text_surf, (10, self.screen_height - STATUS_HEIGHT + 8))
