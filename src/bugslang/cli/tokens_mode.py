from __future__ import annotations

from bugslang.cli.json_io import dumps_pretty
from bugslang.cli.source_io import read_source
from bugslang.config.loader import load_config
from bugslang.errors.base import BugsError
from bugslang.errors.guidance import build_guidance_message
from bugslang.lexer.lexer import tokenize


def run_tokens(args: list[str]) -> int:
    json_mode = "--json" in args
    positional = [arg for arg in args if arg != "--json"]
    if len(positional) != 1 or positional[0].startswith("--"):
        raise BugsError(
            build_guidance_message(
                what="tokens needs exactly one source file.",
                why="The token listing is produced for a single program.",
                fix="Pass the path of the program to tokenize.",
                example="bugs tokens walker.bugs --json",
            )
        )
    path, source = read_source(positional[0])
    config = load_config(source_path=path)
    tokens = tokenize(source, config.lexicon())
    if json_mode:
        print(dumps_pretty([tok.to_dict() for tok in tokens]))
        return 0
    for tok in tokens:
        text = "\\n" if tok.text == "\n" else tok.text
        print(f"{tok.line}:{tok.column}\t{tok.kind}\t{text}")
    return 0


__all__ = ["run_tokens"]
