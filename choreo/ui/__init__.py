"""
K-Pop Choreo Formation Editor - UI Module

Toolbar widgets.
"""

from .widgets import Button

__all__ = ['Button']
