"""
K-Pop Choreo Formation Editor - Rendering Module

Rendering components for the stage, grid and dancers.
"""

from .dancer_renderer import DancerRenderer
from .grid_renderer import GridRenderer
from .render_context import RenderContext
from .stage_renderer import StageRenderer

__all__ = ['DancerRenderer', 'GridRenderer', 'RenderContext', 'StageRenderer']
