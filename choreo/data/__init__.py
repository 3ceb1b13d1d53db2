"""
K-Pop Choreo Formation Editor - Data Module

Dancer and formation data structures.
"""

from .formation import Dancer, Formation, clamp

__all__ = ['Dancer', 'Formation', 'clamp']
