"""
Syntax highlighting module that paints Pygments tokens into a grid.
"""

import re
import logging
from typing import Any, Dict, Final, List, Optional, Tuple
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.python import PythonLexer
from pygments.lexers.javascript import JavascriptLexer
from pygments.lexers.html import HtmlLexer
from pygments.lexers.c_cpp import CLexer, CppLexer
from pygments.lexers.shell import BashLexer
from pygments.lexers.rust import RustLexer
from pygments.token import Token
from pygments.util import ClassNotFound

from .grid import Grid, Style

logger = logging.getLogger(__name__)

C_PATTERN: Final[str] = r'^\s*(#include|int\s+main|void\s+main|struct\s+\w+\s*{)'
CPP_PATTERN: Final[str] = r'^\s*(class\s+\w+|namespace\s+\w+|template\s*<)'

LANGUAGE_PATTERNS: Final[Dict[str, Tuple[Any, str]]] = {
    r'^\s*(def|class|import|from|if __name__ == [\'"]__main__[\'"])':
        (PythonLexer, 'Python'),
    r'^\s*(function|const|let|var|document\.|window\.|=>)':
        (JavascriptLexer, 'JavaScript'),
    r'<html|<!DOCTYPE html|<body|<script|<div':
        (HtmlLexer, 'HTML'),
    r'^\s*(#!\s*/bin/(ba)?sh|function\s+\w+\s*\(\))':
        (BashLexer, 'Bash'),
    r'^\s*(fn\s+\w+|pub\s+(struct|fn|enum)|impl\s+\w+|#\[derive)':
        (RustLexer, 'Rust'),
}

SYNTAX_STYLES: Final[Dict[Any, Style]] = {
    Token.Keyword: Style.KEYWORD,
    Token.Operator: Style.SYMBOL,
    Token.Punctuation: Style.SYMBOL,
}


class SyntaxHighlighter:
    """Turns source lines into style runs and writes them into a Grid."""

    def __init__(self) -> None:
        self.lexer = None
        self.language: Optional[str] = None

    def detect_language(self, filename: str, content: str) -> Optional[str]:
        """
        Detect the programming language of a file based on its extension and content.

        Args:
            filename: The name of the file
            content: The content of the file

        Returns:
            The detected language or None if not detected
        """

        try:
            self.lexer = get_lexer_for_filename(filename, stripnl=False)
            self.language = self.lexer.name
            return self.language
        except ClassNotFound:
            pass

        for pattern, (lexer_class, lang_name) in LANGUAGE_PATTERNS.items():
            if re.search(pattern, content, re.MULTILINE):
                self.lexer = lexer_class(stripnl=False)
                self.language = lang_name
                return self.language

        if re.search(C_PATTERN, content, re.MULTILINE):
            if re.search(CPP_PATTERN, content, re.MULTILINE):
                self.lexer = CppLexer(stripnl=False)
                self.language = 'C++'

                return self.language

            self.lexer = CLexer(stripnl=False)
            self.language = 'C'

            return self.language

        logger.debug("No language detected for %s", filename)
        return None

    def set_language(self, name: str) -> str:
        """Select a lexer by its Pygments alias, e.g. 'python' or 'rust'."""

        try:
            self.lexer = get_lexer_by_name(name, stripnl=False)
        except ClassNotFound as e:
            raise ValueError(f"Unknown language: {name}") from e

        self.language = self.lexer.name
        return self.language

    def highlight_line(self, line: str) -> List[Tuple[str, Style]]:
        """
        Highlight a line of code using the detected lexer.

        Args:
            line: The line of code to highlight

        Returns:
            A list of (text, style) tuples
        """

        if not self.lexer or not line:
            return [(line, Style.NO_STYLE)]

        result = []

        for token_type, text in self.lexer.get_tokens(line):
            if not text:
                continue

            result.append((text, self._get_token_style(token_type)))

        if result and not line.endswith('\n') and result[-1][0].endswith('\n'):
            text, style = result.pop()
            if text[:-1]:
                result.append((text[:-1], style))

        return result

    def _get_token_style(self, token_type: Any) -> Style:
        """Get the style for a token type, walking up to its parent types."""

        while token_type is not None:
            if token_type in SYNTAX_STYLES:
                return SYNTAX_STYLES[token_type]

            token_type = token_type.parent

        return Style.NO_STYLE

    def paint_line(self, grid: Grid, line: int, text: str, col: int = 0) -> int:
        """
        Write a highlighted line into the grid.

        Args:
            grid: The grid to write into
            line: Target row
            text: Source line, without a trailing newline
            col: Column of the first character

        Returns:
            The column following the last written cell
        """

        for fragment, style in self.highlight_line(text):
            grid.put_string(line, col, fragment, style)
            col += len(fragment)

        return col

    def paint_text(self, grid: Grid, text: str, line: int = 0) -> int:
        """Paint every line of text into consecutive rows; returns the number of lines."""

        lines = text.splitlines()

        for offset, source_line in enumerate(lines):
            grid.ensure_line(line + offset)
            self.paint_line(grid, line + offset, source_line)

        return len(lines)

    def get_language_name(self) -> Optional[str]:
        """Get the name of the currently detected language."""

        return self.language
