from bugslang.parser.core.stream import RecognizerOptions, TokenStream
from bugslang.parser.recognizer import FATAL, MATCHED, NOT_MATCHED, Outcome, Recognizer, check_source

__all__ = [
    "FATAL",
    "MATCHED",
    "NOT_MATCHED",
    "Outcome",
    "Recognizer",
    "RecognizerOptions",
    "TokenStream",
    "check_source",
]
