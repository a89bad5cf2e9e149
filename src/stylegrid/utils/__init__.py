"""
Utility package for grid support functions.
"""

from .search import GridSearch, SearchResult

__all__ = ['GridSearch', 'SearchResult']
