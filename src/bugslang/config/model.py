from __future__ import annotations

from dataclasses import dataclass, field

from bugslang.lang.keywords import DEFAULT_LEXICON, Lexicon
from bugslang.parser.core.stream import RecognizerOptions


@dataclass
class RecognizerConfig:
    track_lines: bool = False
    restore_sign: bool = False
    extra_colors: list[str] = field(default_factory=list)

    def options(self) -> RecognizerOptions:
        return RecognizerOptions(track_lines=self.track_lines, restore_sign=self.restore_sign)

    def lexicon(self) -> Lexicon:
        if not self.extra_colors:
            return DEFAULT_LEXICON
        return DEFAULT_LEXICON.with_colors(self.extra_colors)


__all__ = ["RecognizerConfig"]
