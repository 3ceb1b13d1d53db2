"""
K-Pop Choreo Formation Editor - Controllers Module

Coordinate mapping, drag state machine and event handling.
"""

from .drag_controller import DragController, DragResult
from .drag_state import DragPhase, DragSession, DragStatus
from .editor_state import EditorState
from .view_state import CoordinateMapper, ViewportTransform

__all__ = [
    'CoordinateMapper',
    'DragController',
    'DragPhase',
    'DragResult',
    'DragSession',
    'DragStatus',
    'EditorState',
    'ViewportTransform',
]
