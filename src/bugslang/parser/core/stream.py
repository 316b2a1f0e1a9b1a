from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from bugslang.errors.base import PushbackError
from bugslang.lang.keywords import Lexicon
from bugslang.lexer.lexer import Lexer
from bugslang.lexer.tokens import EOL, Token
from bugslang.observability.trace_log import TraceLog


@dataclass(frozen=True)
class RecognizerOptions:
    # Observed behavior keeps both off: the line counter stays at 1 and a dangling leading sign is dropped.
    track_lines: bool = False
    restore_sign: bool = False


@dataclass(frozen=True)
class Mark:
    position: int
    line: int


class TokenStream:
    """Cursor over one token sequence with a single-slot pushback buffer.

    The stream is the whole mutable state of a recognition pass. Every matcher
    receives it explicitly, so a stream must stay confined to one recognizer.
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        *,
        options: Optional[RecognizerOptions] = None,
        trace: Optional[TraceLog] = None,
    ) -> None:
        self.tokens = tuple(tokens)
        if not self.tokens:
            raise ValueError("token stream needs at least the EOF token")
        self.position = 0
        self.line = 1
        self.options = options or RecognizerOptions()
        self.trace = trace
        self._pushback_slot: Optional[int] = None

    @classmethod
    def from_source(
        cls,
        source: str,
        *,
        lexicon: Optional[Lexicon] = None,
        options: Optional[RecognizerOptions] = None,
        trace: Optional[TraceLog] = None,
    ) -> "TokenStream":
        return cls(Lexer(source, lexicon).tokenize(), options=options, trace=trace)

    def next_token(self) -> Token:
        # The final EOF token repeats for any fetch past the end.
        tok = self.tokens[min(self.position, len(self.tokens) - 1)]
        self._pushback_slot = self.line
        self.position += 1
        if tok.kind == EOL and self.options.track_lines:
            self.line = tok.line + 1
        return tok

    def push_back(self) -> None:
        if self._pushback_slot is None:
            raise PushbackError("push_back called twice without an intervening next_token")
        self.position -= 1
        self.line = self._pushback_slot
        self._pushback_slot = None

    def peek(self) -> Token:
        return self.tokens[min(self.position, len(self.tokens) - 1)]

    def mark(self) -> Mark:
        return Mark(position=self.position, line=self.line)

    def reset(self, mark: Mark) -> None:
        # Undoes a prefix longer than the one-token pushback can restore.
        self.position = mark.position
        self.line = mark.line
        self._pushback_slot = None


__all__ = ["Mark", "RecognizerOptions", "TokenStream"]
