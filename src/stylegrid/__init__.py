"""
stylegrid - an auto-growing grid of styled characters for editor surfaces.
"""

from .core import Cell, Grid, GridCapacityError, Style, SyntaxHighlighter
from .utils import GridSearch, SearchResult

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'Grid',
    'GridCapacityError',
    'Style',
    'SyntaxHighlighter',
    'GridSearch',
    'SearchResult',
]
