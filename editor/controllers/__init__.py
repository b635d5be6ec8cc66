"""
Wang Terrain Tools - Controllers Module

Application state, terrain selection and undo history.
"""

from .editor_state import EditorState
from .terrain_selection import TerrainSelection
from .undo_manager import UndoManager

__all__ = ['EditorState', 'TerrainSelection', 'UndoManager']
