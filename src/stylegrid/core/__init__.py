"""
Core package for the styled character grid.

This package implements the Grid class, an auto-growing surface of
(character, style) cells, and the SyntaxHighlighter class which paints
Pygments tokens into a grid.
"""

from .grid import Cell, Grid, GridCapacityError, Style
from .syntax import SyntaxHighlighter

__all__ = ['Cell', 'Grid', 'GridCapacityError', 'Style', 'SyntaxHighlighter']
