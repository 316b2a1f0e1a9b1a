from __future__ import annotations

from typing import Optional

from bugslang.lexer.tokens import EOF, EOL, KEYWORD, NAME, NUMBER, SYMBOL


def next_token_matches(stream, kind: str, text: Optional[str] = None) -> bool:
    tok = stream.next_token()
    if tok.is_(kind, text):
        return True
    stream.push_back()
    return False


def number(stream) -> bool:
    return next_token_matches(stream, NUMBER)


def name(stream) -> bool:
    return next_token_matches(stream, NAME)


def eol(stream) -> bool:
    return next_token_matches(stream, EOL)


def eof(stream) -> bool:
    return next_token_matches(stream, EOF)


def keyword(stream, expected: Optional[str] = None) -> bool:
    if not next_token_matches(stream, KEYWORD, expected):
        return False
    if stream.trace is not None:
        tok = stream.tokens[stream.position - 1]
        stream.trace.record(level="debug", message=f"keyword {tok.text}", fields={"line": stream.line})
    return True


def symbol(stream, expected: str) -> bool:
    return next_token_matches(stream, SYMBOL, expected)


def begin(stream, word: str, construct: str) -> bool:
    """Match the keyword that commits the caller to ``construct``."""
    if not keyword(stream, word):
        return False
    trace_begin(stream, construct)
    return True


def trace_begin(stream, construct: str) -> None:
    if stream.trace is not None:
        stream.trace.record(level="info", message=f"begin {construct}", fields={"line": stream.line})


__all__ = ["begin", "eof", "eol", "keyword", "name", "next_token_matches", "number", "symbol", "trace_begin"]
