from __future__ import annotations

from dataclasses import dataclass, replace

from bugslang.cli.json_io import dumps_pretty
from bugslang.cli.source_io import read_source
from bugslang.config.loader import load_config
from bugslang.errors.base import BugsError
from bugslang.errors.guidance import build_guidance_message
from bugslang.errors.render import format_error
from bugslang.observability.trace_log import TraceLog, format_trace
from bugslang.parser.recognizer import check_source


@dataclass(frozen=True)
class _CheckCommand:
    path: str
    json_mode: bool
    trace: bool
    track_lines: bool
    restore_sign: bool


def run_check(args: list[str]) -> int:
    params = _parse_args(args)
    path, source = read_source(params.path)
    config = load_config(source_path=path)
    if params.track_lines:
        config = replace(config, track_lines=True)
    if params.restore_sign:
        config = replace(config, restore_sign=True)
    trace = TraceLog() if params.trace else None
    outcome = check_source(source, lexicon=config.lexicon(), options=config.options(), trace=trace)

    if params.json_mode:
        payload = outcome.to_dict()
        payload["file"] = path.as_posix()
        if trace is not None:
            payload["trace"] = trace.snapshot()
        print(dumps_pretty(payload))
        return 0 if outcome.ok else 1

    if trace is not None and trace.count():
        print(format_trace(trace.snapshot()))
    if outcome.ok:
        print("Syntax: OK")
        return 0
    if outcome.diagnostic is None:
        print("Syntax: FAIL\nNo Bug definition found.")
        return 1
    print(f"Syntax: FAIL\n{format_error(outcome.diagnostic, source)}")
    return 1


def _parse_args(args: list[str]) -> _CheckCommand:
    flags = {"--json": False, "--trace": False, "--track-lines": False, "--restore-sign": False}
    positional: list[str] = []
    for arg in args:
        if arg in flags:
            flags[arg] = True
            continue
        if arg.startswith("--"):
            raise BugsError(_unknown_flag_message(arg))
        positional.append(arg)
    if len(positional) != 1:
        raise BugsError(_missing_path_message())
    return _CheckCommand(
        path=positional[0],
        json_mode=flags["--json"],
        trace=flags["--trace"],
        track_lines=flags["--track-lines"],
        restore_sign=flags["--restore-sign"],
    )


def _unknown_flag_message(flag: str) -> str:
    return build_guidance_message(
        what=f"Unknown flag '{flag}'.",
        why="check supports --json, --trace, --track-lines and --restore-sign.",
        fix="Remove the flag or check the help output.",
        example="bugs check walker.bugs --json",
    )


def _missing_path_message() -> str:
    return build_guidance_message(
        what="check needs exactly one source file.",
        why="Each run recognizes a single Bugs program.",
        fix="Pass the path of the program to check.",
        example="bugs check walker.bugs",
    )


__all__ = ["run_check"]
