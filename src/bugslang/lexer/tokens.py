from __future__ import annotations

from dataclasses import dataclass

NUMBER = "NUMBER"
NAME = "NAME"
KEYWORD = "KEYWORD"
SYMBOL = "SYMBOL"
EOL = "EOL"
EOF = "EOF"
QUOTED = "QUOTED"


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    line: int = 1
    column: int = 1

    def is_(self, kind: str, text: str | None = None) -> bool:
        if self.kind != kind:
            return False
        return text is None or self.text == text

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind, "text": self.text, "line": self.line, "column": self.column}

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Token({self.kind}, {self.text!r}, {self.line}:{self.column})"


__all__ = ["EOF", "EOL", "KEYWORD", "NAME", "NUMBER", "QUOTED", "SYMBOL", "Token"]
