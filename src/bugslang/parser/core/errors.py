from __future__ import annotations

from typing import NoReturn

from bugslang.errors.base import BugsSyntaxError


def raise_syntax_error(stream, message: str) -> NoReturn:
    tok = stream.peek()
    column = tok.column if stream.options.track_lines else None
    details = {"error_id": "parse.syntax", "token_kind": tok.kind, "token_text": tok.text}
    if stream.trace is not None:
        stream.trace.record(level="error", message=message, fields={"line": stream.line, **details})
    raise BugsSyntaxError(message, line=stream.line, column=column, details=details)


__all__ = ["raise_syntax_error"]
