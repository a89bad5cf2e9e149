"""Tests for stylegrid.core.syntax."""

import pytest

from stylegrid.core.grid import Grid, Style
from stylegrid.core.syntax import SyntaxHighlighter


@pytest.fixture
def python_highlighter() -> SyntaxHighlighter:
    highlighter = SyntaxHighlighter()
    highlighter.set_language('python')
    return highlighter


class TestDetectLanguage:
    def test_by_filename(self) -> None:
        highlighter = SyntaxHighlighter()
        assert highlighter.detect_language("main.rs", "") == "Rust"
        assert highlighter.get_language_name() == "Rust"

    def test_by_content(self) -> None:
        highlighter = SyntaxHighlighter()
        assert highlighter.detect_language("snippet.zzz", "def foo():\n    pass\n") == "Python"

    def test_c_and_cpp_content(self) -> None:
        highlighter = SyntaxHighlighter()
        assert highlighter.detect_language("a.zzz", "#include <stdio.h>\n") == "C"
        assert highlighter.detect_language("b.zzz", "#include <x>\nnamespace app {}\n") == "C++"

    def test_unknown(self) -> None:
        highlighter = SyntaxHighlighter()
        assert highlighter.detect_language("notes.zzz", "hello world") is None
        assert highlighter.get_language_name() is None

    def test_set_language_unknown_alias(self) -> None:
        with pytest.raises(ValueError):
            SyntaxHighlighter().set_language("no-such-language")


class TestHighlightLine:
    def test_without_lexer(self) -> None:
        assert SyntaxHighlighter().highlight_line("x = 1") == [("x = 1", Style.NO_STYLE)]

    def test_fragments_cover_line(self, python_highlighter: SyntaxHighlighter) -> None:
        line = "def f(x): return x + 1"
        runs = python_highlighter.highlight_line(line)
        assert ''.join(text for text, _ in runs) == line

    def test_keyword_and_symbols(self, python_highlighter: SyntaxHighlighter) -> None:
        runs = python_highlighter.highlight_line("def f(x): return x + 1")
        assert ("def", Style.KEYWORD) in runs
        assert ("return", Style.KEYWORD) in runs
        assert ("+", Style.SYMBOL) in runs
        assert ("(", Style.SYMBOL) in runs

    def test_names_are_unstyled(self, python_highlighter: SyntaxHighlighter) -> None:
        runs = python_highlighter.highlight_line("value = 1")
        assert runs[0] == ("value", Style.NO_STYLE)


class TestPaint:
    def test_paint_line(self, python_highlighter: SyntaxHighlighter) -> None:
        grid = Grid()
        end = python_highlighter.paint_line(grid, 1, "x = 1")
        assert end == 5
        assert grid.line_text(1) == "x = 1"
        assert grid.row_length(1) == 5
        assert grid.cell_at(1, 0) == ('x', Style.NO_STYLE)
        assert grid.cell_at(1, 2) == ('=', Style.SYMBOL)

    def test_paint_line_at_column(self, python_highlighter: SyntaxHighlighter) -> None:
        grid = Grid()
        end = python_highlighter.paint_line(grid, 0, "if", col=4)
        assert end == 6
        assert grid.style_runs(0) == [("    ", Style.NO_STYLE), ("if", Style.KEYWORD)]

    def test_paint_text(self, python_highlighter: SyntaxHighlighter) -> None:
        grid = Grid()
        count = python_highlighter.paint_text(grid, "import os\n\nprint(os)\n")
        assert count == 3
        assert grid.row_count == 3
        assert grid.line_text(0) == "import os"
        assert grid.row_length(1) == 0
        assert grid.line_text(2) == "print(os)"
        assert grid.cell_at(0, 0).style is Style.KEYWORD

    def test_paint_text_keeps_trailing_blank_lines(self, python_highlighter: SyntaxHighlighter) -> None:
        grid = Grid()
        count = python_highlighter.paint_text(grid, "a\n\n\n")
        assert count == 3
        assert grid.row_count == count
        assert grid.line_text(0) == "a"
        assert grid.row_length(2) == 0

    def test_paint_text_blank_only(self) -> None:
        grid = Grid()
        assert SyntaxHighlighter().paint_text(grid, "\n\n", line=1) == 2
        assert grid.row_count == 3
