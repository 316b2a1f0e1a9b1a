import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bugslang.config.loader import ENV_EXTRA_COLORS, ENV_RESTORE_SIGN, ENV_TRACK_LINES  # noqa: E402
from bugslang.parser.core.stream import RecognizerOptions  # noqa: E402
from bugslang.parser.recognizer import Recognizer  # noqa: E402


def recognizer_for(text: str, *, track_lines: bool = False, restore_sign: bool = False, trace=None) -> Recognizer:
    """Build a recognizer over ``text`` with the given options."""
    options = RecognizerOptions(track_lines=track_lines, restore_sign=restore_sign)
    return Recognizer(text, options=options, trace=trace)


def cursor(recognizer: Recognizer) -> tuple[int, int]:
    """Observable cursor state: token position and line counter."""
    return recognizer.stream.position, recognizer.stream.line


def remaining_kinds(recognizer: Recognizer) -> list[str]:
    stream = recognizer.stream
    return [tok.kind for tok in stream.tokens[stream.position:]]


@pytest.fixture
def clean_env(monkeypatch):
    for name in (ENV_TRACK_LINES, ENV_RESTORE_SIGN, ENV_EXTRA_COLORS):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
