from __future__ import annotations

from typing import Optional

from bugslang.errors.base import BugsError


def format_error(err: BugsError, source: Optional[str] = None) -> str:
    base = str(err)
    if not source or err.line is None:
        return base

    lines = source.splitlines()
    line_index = err.line - 1
    if line_index < 0 or line_index >= len(lines):
        return base

    line_text = lines[line_index]
    if err.column is None:
        return f"{base}\n{line_text}"
    caret_pos = max(1, min(err.column, len(line_text) + 1))
    caret_line = " " * (caret_pos - 1) + "^"
    return f"{base}\n{line_text}\n{caret_line}"


__all__ = ["format_error"]
