"""
Grid module for storing styled characters in an auto-growing 2D surface.
"""

import logging
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)


class Style(Enum):
    """Display tag attached to every cell."""

    NO_STYLE = 'no_style'
    KEYWORD = 'keyword'
    SYMBOL = 'symbol'


class Cell(NamedTuple):
    """A single (character, style) pair."""

    char: str = ' '
    style: Style = Style.NO_STYLE


class GridCapacityError(ValueError):
    """Raised when a write would grow a capped grid past its limits."""


class Grid:
    """Rows of styled cells that grow on demand when any coordinate is touched."""

    BLANK = Cell(' ', Style.NO_STYLE)

    def __init__(self, max_lines: Optional[int] = None, max_columns: Optional[int] = None) -> None:
        self.rows: List[List[Cell]] = []
        self.max_lines = max_lines
        self.max_columns = max_columns

    @property
    def row_count(self) -> int:
        """Get the number of rows currently stored."""

        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[Cell, ...]]:
        """Yield a copy of each row, top to bottom."""

        for row in self.rows:
            yield tuple(row)

    def _check_coordinates(self, line: int, col: int) -> None:
        """Reject coordinates that can never become valid."""

        if line < 0 or col < 0:
            raise ValueError(f"Coordinates must be non-negative, got ({line}, {col})")

        if self.max_lines is not None and line >= self.max_lines:
            logger.debug("Rejected line %d, grid is capped at %d lines", line, self.max_lines)
            raise GridCapacityError(f"Line {line} exceeds capacity of {self.max_lines} lines")

        if self.max_columns is not None and col >= self.max_columns:
            logger.debug("Rejected column %d, grid is capped at %d columns", col, self.max_columns)
            raise GridCapacityError(f"Column {col} exceeds capacity of {self.max_columns} columns")

    def _ensure(self, line: int, col: int) -> None:
        """Grow the grid until (line, col) is a valid cell."""

        self._check_coordinates(line, col)
        self.ensure_line(line)

        row = self.rows[line]
        if col >= len(row):
            row.extend([self.BLANK] * (col + 1 - len(row)))

    def ensure_line(self, line: int) -> None:
        """Append empty rows until line exists, without adding any cells."""

        self._check_coordinates(line, 0)

        if line >= len(self.rows):
            logger.debug("Growing grid from %d to %d rows", len(self.rows), line + 1)
            self.rows.extend([] for _ in range(line + 1 - len(self.rows)))

    @staticmethod
    def _make_cell(char: str, style: Style) -> Cell:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")

        if not isinstance(style, Style):
            raise TypeError(f"Expected a Style, got {type(style).__name__}")

        return Cell(char, style)

    def put_char(self, line: int, col: int, char: str, style: Style = Style.NO_STYLE) -> None:
        """Overwrite the cell at (line, col)."""

        cell = self._make_cell(char, style)
        self._ensure(line, col)
        self.rows[line][col] = cell

    def put_string(self, line: int, col: int, text: str, style: Style = Style.NO_STYLE) -> None:
        """
        Overwrite consecutive cells starting at (line, col) with text.

        Args:
            line: Row to write into
            col: Column of the first character
            text: Characters to write, one cell per code point
            style: Style applied to every written cell

        An empty string writes nothing and does not grow the grid.
        """

        if not isinstance(style, Style):
            raise TypeError(f"Expected a Style, got {type(style).__name__}")

        if not text:
            return

        self._check_coordinates(line, col)
        self._ensure(line, col + len(text) - 1)

        row = self.rows[line]
        row[col:col + len(text)] = [Cell(c, style) for c in text]

    def insert_char(self, line: int, col: int, char: str, style: Style = Style.NO_STYLE) -> None:
        """Insert a cell at (line, col), shifting the rest of the row right."""

        cell = self._make_cell(char, style)
        self._check_coordinates(line, col)

        if self.max_columns is not None and max(self.row_length(line), col + 1) + 1 > self.max_columns:
            logger.debug("Rejected insert at (%d, %d), grid is capped at %d columns",
                         line, col, self.max_columns)
            raise GridCapacityError(
                f"Row {line} cannot grow past {self.max_columns} columns"
            )

        self._ensure(line, col)
        self.rows[line].insert(col, cell)

    def delete_char(self, line: int, col: int) -> None:
        """Remove the cell at (line, col), shifting the rest of the row left."""

        if not 0 <= line < len(self.rows) or not 0 <= col < len(self.rows[line]):
            logger.debug("Ignoring delete of missing cell (%d, %d)", line, col)
            return

        del self.rows[line][col]

    def delete_line(self, line: int) -> None:
        """Remove a whole row, shifting later rows up."""

        if not 0 <= line < len(self.rows):
            logger.debug("Ignoring delete of missing line %d", line)
            return

        del self.rows[line]

    def cell_at(self, line: int, col: int) -> Cell:
        """Get the cell at (line, col), growing the grid if it does not exist yet."""

        self._ensure(line, col)
        return self.rows[line][col]

    def row_length(self, line: int) -> int:
        """Get the length of a row without growing the grid."""

        if not 0 <= line < len(self.rows):
            return 0

        return len(self.rows[line])

    def line_cells(self, line: int) -> Tuple[Cell, ...]:
        """Get a copy of a row's cells without growing the grid."""

        if not 0 <= line < len(self.rows):
            return ()

        return tuple(self.rows[line])

    def line_text(self, line: int) -> str:
        """Get the characters of a row as a string."""

        return ''.join(cell.char for cell in self.line_cells(line))

    def style_runs(self, line: int) -> List[Tuple[str, Style]]:
        """
        Collapse a row into runs of adjacent cells sharing a style.

        Args:
            line: The row to inspect

        Returns:
            A list of (text, style) tuples, empty for a missing row
        """

        runs: List[Tuple[str, Style]] = []

        for cell in self.line_cells(line):
            if runs and runs[-1][1] is cell.style:
                runs[-1] = (runs[-1][0] + cell.char, cell.style)
                continue

            runs.append((cell.char, cell.style))

        return runs

    def __repr__(self) -> str:
        lines = []
        for index in range(len(self.rows)):
            runs = ', '.join(f"{text!r}:{style.name}" for text, style in self.style_runs(index))
            lines.append(f"  {index}: [{runs}]")

        if not lines:
            return "Grid(rows=[])"

        return "Grid(rows=[\n" + ",\n".join(lines) + "\n])"
