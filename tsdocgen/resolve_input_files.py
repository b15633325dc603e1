"""Logic for expanding the input pattern into concrete file paths."""

import glob
import os
import re
from pathlib import Path

from tsdocgen.errors import PatternError

# A run of 3+ stars, or ** glued to other characters within a path component.
_BAD_RECURSIVE_RE = re.compile(r"\*{3,}|[^/\\]\*\*|\*\*[^/\\]")


def validate_pattern(pattern: str) -> None:
    """Raise PatternError if ``pattern`` is not a well-formed glob."""
    if not pattern.strip():
        raise PatternError("Input pattern is empty")

    if _BAD_RECURSIVE_RE.search(pattern):
        msg = f"Invalid pattern {pattern!r}: '**' must form a whole path component"
        raise PatternError(msg)

    i = 0
    while i < len(pattern):
        if pattern[i] == "[":
            # A ']' directly after '[' or '[!' is a literal member of the class.
            j = i + 1
            if j < len(pattern) and pattern[j] == "!":
                j += 1
            if j < len(pattern) and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                msg = f"Invalid pattern {pattern!r}: unterminated '[' at offset {i}"
                raise PatternError(msg)
            i = close
        i += 1


def resolve_input_files(pattern: str) -> list[Path]:
    """Expand ``~`` and the glob, returning matched paths in sorted order."""
    expanded = os.path.expanduser(pattern)
    validate_pattern(expanded)
    return [Path(p) for p in sorted(glob.glob(expanded, recursive=True))]
