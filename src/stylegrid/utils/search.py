"""
Search functionality for styled grids.
"""

import re
import logging
from typing import Dict, List, Optional, Tuple
from ..core.grid import Grid, GridCapacityError, Style

logger = logging.getLogger(__name__)


class SearchResult:
    """Represents a search result with position and match information."""

    def __init__(self, line: int, column: int, length: int, match: str):
        self.line = line
        self.column = column
        self.length = length
        self.match = match

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchResult):
            return NotImplemented

        return (self.line, self.column, self.length, self.match) == \
            (other.line, other.column, other.length, other.match)

    def __repr__(self) -> str:
        return f"SearchResult(line={self.line}, column={self.column}, length={self.length}, match={self.match!r})"


class GridSearch:
    """Handles text, regex and style searches across the rows of a grid."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.last_search: Optional[Tuple[str, str, bool]] = None

    def _scan(self, finder, start: Tuple[int, int]) -> Optional[SearchResult]:
        """Run finder(row_text, from_column) on each row from start onwards."""

        start_line, start_col = start

        for line in range(max(0, start_line), self.grid.row_count):
            row_text = self.grid.line_text(line)
            from_col = max(0, start_col) if line == start_line else 0

            span = finder(row_text, from_col)
            if span is None:
                continue

            begin, end = span
            return SearchResult(line, begin, end - begin, row_text[begin:end])

        return None

    def find_text(self, text: str, case_sensitive: bool = True,
                  start: Tuple[int, int] = (0, 0)) -> Optional[SearchResult]:
        """Search for a plain string within a single row."""

        if not text:
            return None

        # lower() can change string length, so match case-insensitively in place
        regex = None if case_sensitive else re.compile(re.escape(text), re.IGNORECASE)

        def finder(row_text: str, from_col: int) -> Optional[Tuple[int, int]]:
            if regex is not None:
                match = regex.search(row_text, from_col)
                return (match.start(), match.end()) if match else None

            pos = row_text.find(text, from_col)
            if pos < 0:
                return None

            return pos, pos + len(text)

        return self._scan(finder, start)

    def find_regex(self, pattern: str, case_sensitive: bool = True,
                   start: Tuple[int, int] = (0, 0)) -> Optional[SearchResult]:
        """
        Search using a regular expression pattern, one row at a time.

        Args:
            pattern: The regular expression
            case_sensitive: Whether to match case
            start: (line, column) to start searching from

        Returns:
            The first match, or None. Empty matches are skipped.

        Raises:
            ValueError: If the pattern does not compile
        """

        if not pattern:
            return None

        flags = 0 if case_sensitive else re.IGNORECASE
        try:
            regex = re.compile(pattern, flags)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {pattern!r}: {e}") from e

        def finder(row_text: str, from_col: int) -> Optional[Tuple[int, int]]:
            for match in regex.finditer(row_text, from_col):
                if match.end() > match.start():
                    return match.start(), match.end()

            return None

        return self._scan(finder, start)

    def find_style(self, style: Style, start: Tuple[int, int] = (0, 0)) -> Optional[SearchResult]:
        """Find the first maximal run of cells tagged with style."""

        start_line, start_col = start

        for line in range(max(0, start_line), self.grid.row_count):
            cells = self.grid.line_cells(line)
            col = max(0, start_col) if line == start_line else 0

            while col < len(cells) and cells[col].style is not style:
                col += 1

            if col >= len(cells):
                continue

            end = col
            while end < len(cells) and cells[end].style is style:
                end += 1

            match = ''.join(cell.char for cell in cells[col:end])
            return SearchResult(line, col, end - col, match)

        return None

    def find_next(self, pattern: str, search_type: str = 'text',
                  case_sensitive: bool = False,
                  start: Tuple[int, int] = (0, 0)) -> Optional[SearchResult]:
        """
        Find the next occurrence of a pattern.

        Args:
            pattern (str): The pattern to search for
            search_type (str): One of 'text' or 'regex'
            case_sensitive (bool): Whether to perform case-sensitive search
            start (tuple): (line, column) to start searching from

        Returns:
            Optional[SearchResult]: The search result if found
        """

        if not pattern:
            return None

        self.last_search = (pattern, search_type, case_sensitive)

        if search_type == 'regex':
            return self.find_regex(pattern, case_sensitive, start)

        return self.find_text(pattern, case_sensitive, start)

    def find_all(self, pattern: str, search_type: str = 'text',
                 case_sensitive: bool = False) -> List[SearchResult]:
        """Find all non-overlapping occurrences of a pattern."""

        if not pattern:
            return []

        results = []
        position = (0, 0)

        while True:
            result = self.find_next(pattern, search_type, case_sensitive, position)
            if not result:
                break

            results.append(result)
            position = (result.line, result.column + result.length)

        return results

    def replace_all(self, pattern: str, replacement: str, style: Optional[Style] = None,
                    case_sensitive: bool = False) -> int:
        """
        Replace all occurrences of a plain-text pattern.

        Args:
            pattern (str): Text to search for
            replacement (str): Replacement text
            style (Style): Style for the new cells; defaults to the style of
                the first replaced cell
            case_sensitive (bool): Whether to perform case-sensitive search

        Returns:
            int: Number of replacements made

        Raises:
            GridCapacityError: If a capped row would overflow; the grid is left untouched
        """

        results = self.find_all(pattern, 'text', case_sensitive)

        if self.grid.max_columns is not None:
            new_lengths: Dict[int, int] = {}
            for result in results:
                length = new_lengths.get(result.line, self.grid.row_length(result.line))
                new_lengths[result.line] = length - result.length + len(replacement)

            for line, length in new_lengths.items():
                if length > self.grid.max_columns:
                    raise GridCapacityError(
                        f"Replacing {pattern!r} would grow row {line} past "
                        f"{self.grid.max_columns} columns"
                    )

        count = 0

        for result in reversed(results):
            cells = self.grid.line_cells(result.line)
            new_style = style if style is not None else cells[result.column].style
            tail = cells[result.column + result.length:]

            for col in range(len(cells) - 1, result.column - 1, -1):
                self.grid.delete_char(result.line, col)

            self.grid.put_string(result.line, result.column, replacement, new_style)

            col = result.column + len(replacement)
            for offset, cell in enumerate(tail):
                self.grid.put_char(result.line, col + offset, cell.char, cell.style)

            count += 1

        logger.debug("Replaced %d occurrence(s) of %r", count, pattern)
        return count
