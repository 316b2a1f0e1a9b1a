from __future__ import annotations

from typing import List, Optional

from bugslang.lang.keywords import DEFAULT_LEXICON, Lexicon
from bugslang.lexer.tokens import EOF, EOL, KEYWORD, NAME, NUMBER, QUOTED, SYMBOL, Token


_LINE_BREAKS = ("\n", "\r")


class Lexer:
    """Splits Bugs source into tokens; newlines are significant, comments are dropped.

    Every character is classified, so tokenizing never fails:

    * codes up to 32 are blanks, except ``\\n``, ``\\r`` and ``\\r\\n`` which end a line
    * ASCII letters and anything from U+00A0 upwards start a word
    * the remaining printable ASCII and U+007F-U+009F are one-character symbols
    """

    def __init__(self, source: str, lexicon: Optional[Lexicon] = None) -> None:
        self.source = source
        self.lexicon = lexicon or DEFAULT_LEXICON
        self._pos = 0
        self._line = 1
        self._line_start = 0

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        text = self.source
        self._pos, self._line, self._line_start = 0, 1, 0
        while True:
            self._skip_blanks_and_comments()
            if self._pos >= len(text):
                tokens.append(Token(EOF, "EOF", self._line, self._column()))
                return tokens
            ch = text[self._pos]
            line, column = self._line, self._column()
            if ch in _LINE_BREAKS:
                tokens.append(Token(EOL, "\n", line, column))
                self._newline(self._line_break_end(self._pos))
                continue
            if _is_digit(ch):
                tokens.append(Token(NUMBER, self._read_number(), line, column))
                continue
            if _is_word_char(ch):
                word = self._read_word()
                kind = KEYWORD if self.lexicon.is_keyword(word) else NAME
                tokens.append(Token(kind, word, line, column))
                continue
            if ch == '"':
                tokens.append(Token(QUOTED, self._read_quoted(), line, column))
                continue
            tokens.append(Token(SYMBOL, ch, line, column))
            self._pos += 1

    def _column(self) -> int:
        return self._pos - self._line_start + 1

    def _newline(self, next_pos: int) -> None:
        self._line += 1
        self._line_start = next_pos
        self._pos = next_pos

    def _line_break_end(self, pos: int) -> int:
        if self.source.startswith("\r\n", pos):
            return pos + 2
        return pos + 1

    def _skip_blanks_and_comments(self) -> None:
        text = self.source
        while self._pos < len(text):
            ch = text[self._pos]
            if ch not in _LINE_BREAKS and ord(ch) <= 32:
                self._pos += 1
                continue
            if text.startswith("//", self._pos):
                self._pos = self._line_end(self._pos)
                continue
            if text.startswith("/*", self._pos):
                self._skip_block_comment()
                continue
            return

    def _skip_block_comment(self) -> None:
        # Newlines inside the comment advance the line count but never become EOL tokens.
        text = self.source
        i = self._pos + 2
        while i < len(text):
            if text.startswith("*/", i):
                self._pos = i + 2
                return
            if text[i] in _LINE_BREAKS:
                i = self._line_break_end(i)
                self._line += 1
                self._line_start = i
                continue
            i += 1
        self._pos = len(text)

    def _line_end(self, pos: int) -> int:
        text = self.source
        while pos < len(text) and text[pos] not in _LINE_BREAKS:
            pos += 1
        return pos

    def _read_number(self) -> str:
        # One '.' belongs to the number even without digits after it, so "1." is a single NUMBER.
        text = self.source
        start = self._pos
        i = start
        while i < len(text) and _is_digit(text[i]):
            i += 1
        if i < len(text) and text[i] == ".":
            i += 1
            while i < len(text) and _is_digit(text[i]):
                i += 1
        self._pos = i
        return text[start:i]

    def _read_word(self) -> str:
        text = self.source
        start = self._pos
        i = start + 1
        while i < len(text) and (_is_word_char(text[i]) or _is_digit(text[i])):
            i += 1
        self._pos = i
        return text[start:i]

    def _read_quoted(self) -> str:
        # Quoted text stops at the closing quote or, when unterminated, at the end of the line.
        text = self.source
        start = self._pos + 1
        end = self._line_end(start)
        close = text.find('"', start, end)
        if close == -1:
            self._pos = end
            return text[start:end]
        self._pos = close + 1
        return text[start:close]


def tokenize(source: str, lexicon: Optional[Lexicon] = None) -> List[Token]:
    return Lexer(source, lexicon).tokenize()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_word_char(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ord(ch) >= 0xA0


__all__ = ["Lexer", "tokenize"]
