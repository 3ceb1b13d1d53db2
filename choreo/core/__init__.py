"""
K-Pop Choreo Formation Editor - Core Module

Constants, stage configuration and error kinds.
"""

from . import constants
from .config import StageConfig
from .errors import DragError, EntityNotFound, InvalidTransition, TransformUnavailable

__all__ = [
    'constants',
    'StageConfig',
    'DragError',
    'EntityNotFound',
    'InvalidTransition',
    'TransformUnavailable',
]
