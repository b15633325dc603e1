"""Tests for input pattern validation and expansion."""

from pathlib import Path

import pytest

from tsdocgen.errors import PatternError
from tsdocgen.resolve_input_files import resolve_input_files, validate_pattern


@pytest.mark.parametrize(
    "pattern",
    ["src/*.ts", "src/**/*.ts", "**", "src/[ab].ts", "src/[!a].ts", "src/[]].ts"],
)
def test_valid_patterns(pattern: str) -> None:
    """Verify well-formed globs pass validation."""
    validate_pattern(pattern)


@pytest.mark.parametrize(
    "pattern",
    ["", "   ", "src/[ab.ts", "src/***/x.ts", "src/a**/x.ts", "src/**.ts"],
)
def test_invalid_patterns(pattern: str) -> None:
    """Verify malformed globs raise PatternError."""
    with pytest.raises(PatternError):
        validate_pattern(pattern)


def test_resolve_sorted(tmp_path: Path) -> None:
    """Verify matches come back in sorted order."""
    for name in ["c.ts", "a.ts", "b.js"]:
        (tmp_path / name).write_text("", encoding="utf-8")
    assert resolve_input_files(str(tmp_path / "*.ts")) == [
        tmp_path / "a.ts",
        tmp_path / "c.ts",
    ]


def test_resolve_expands_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify a leading ~ is expanded before globbing."""
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / "x.ts").write_text("", encoding="utf-8")
    assert resolve_input_files("~/*.ts") == [tmp_path / "x.ts"]
