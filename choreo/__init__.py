"""
K-Pop Choreo Formation Editor

A Pygame-based editor for arranging dancers into stage formations.
"""

from .application import EditorApplication
from .main import main

__all__ = ['EditorApplication', 'main']
