"""Tests for the stylegrid command line entry point."""

from pathlib import Path

import pytest

from stylegrid.__main__ import build_demo_grid, main
from stylegrid.core.grid import Style


def test_demo_grid() -> None:
    grid = build_demo_grid()
    assert grid.cell_at(1, 1) == ('@', Style.SYMBOL)
    assert grid.cell_at(1, 2) == ('*', Style.KEYWORD)
    assert grid.cell_at(2, 3) == ('o', Style.KEYWORD)


def test_main_prints_demo(capsys: pytest.CaptureFixture) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "'@':SYMBOL" in out
    assert "'void':KEYWORD" in out


def test_main_paints_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    source = tmp_path / "sample.py"
    source.write_text("def f():\n    return 1\n", encoding="utf-8")

    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert "'def':KEYWORD" in out
    assert "'return':KEYWORD" in out


def test_main_language_override(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    source = tmp_path / "sample.txt"
    source.write_text("fn main() {}\n", encoding="utf-8")

    assert main(["--language", "rust", str(source)]) == 0
    assert "'fn':KEYWORD" in capsys.readouterr().out


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main([str(tmp_path / "missing.py")]) == 1
    assert "Error loading" in capsys.readouterr().err
