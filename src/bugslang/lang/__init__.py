"""Lexicon of the Bugs language."""

from bugslang.lang.keywords import COLOR_NAMES, DEFAULT_LEXICON, KEYWORDS, Lexicon, RESERVED_WORDS, is_keyword

__all__ = ["COLOR_NAMES", "DEFAULT_LEXICON", "KEYWORDS", "Lexicon", "RESERVED_WORDS", "is_keyword"]
