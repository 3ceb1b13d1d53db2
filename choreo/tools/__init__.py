"""
Editor tools.
"""

from .base_tool import Tool, ToolContext, ToolResult
from .drag_tool import DragTool

__all__ = ['Tool', 'ToolContext', 'ToolResult', 'DragTool']
