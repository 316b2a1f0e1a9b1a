"""
Bugslang: a syntax recognizer for the Bugs agent-behavior language.
"""

__all__ = ["Recognizer", "check_source"]


def check_source(*args, **kwargs):
    from bugslang.parser.recognizer import check_source as _check_source

    return _check_source(*args, **kwargs)


def __getattr__(name: str):
    if name == "Recognizer":
        from bugslang.parser.recognizer import Recognizer

        return Recognizer
    raise AttributeError(f"module 'bugslang' has no attribute {name!r}")
