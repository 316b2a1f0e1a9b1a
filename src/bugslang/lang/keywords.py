from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


RESERVED_WORDS: tuple[str, ...] = (
    "Allbugs",
    "Bug",
    "var",
    "initially",
    "move",
    "moveto",
    "turn",
    "turnto",
    "line",
    "loop",
    "exit",
    "if",
    "switch",
    "case",
    "return",
    "do",
    "color",
    "define",
    "using",
)

COLOR_NAMES: tuple[str, ...] = (
    "black",
    "blue",
    "cyan",
    "darkGray",
    "gray",
    "green",
    "lightGray",
    "magenta",
    "orange",
    "pink",
    "purple",
    "red",
    "white",
    "yellow",
    "brown",
    "none",
)


@dataclass(frozen=True)
class Lexicon:
    """Closed word sets the lexer checks word-shaped text against."""

    reserved: frozenset[str]
    colors: frozenset[str]

    @property
    def keywords(self) -> frozenset[str]:
        return self.reserved | self.colors

    def is_keyword(self, word: str) -> bool:
        return word in self.reserved or word in self.colors

    def with_colors(self, extra: Iterable[str]) -> "Lexicon":
        return Lexicon(reserved=self.reserved, colors=self.colors | frozenset(extra))


DEFAULT_LEXICON = Lexicon(reserved=frozenset(RESERVED_WORDS), colors=frozenset(COLOR_NAMES))
KEYWORDS = DEFAULT_LEXICON.keywords


def is_keyword(word: str) -> bool:
    return DEFAULT_LEXICON.is_keyword(word)


__all__ = ["COLOR_NAMES", "DEFAULT_LEXICON", "KEYWORDS", "Lexicon", "RESERVED_WORDS", "is_keyword"]
