from __future__ import annotations

import sys

from bugslang.cli.check_mode import run_check
from bugslang.cli.tokens_mode import run_tokens
from bugslang.errors.base import BugsError
from bugslang.errors.guidance import build_guidance_message
from bugslang.errors.render import format_error
from bugslang.version import get_version


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        if not args:
            _print_usage()
            return 1
        cmd = args[0]
        if cmd == "--version":
            print(f"bugslang {get_version()}")
            return 0
        if cmd in {"help", "--help", "-h"}:
            _print_usage()
            return 0
        if cmd == "check":
            return run_check(args[1:])
        if cmd == "tokens":
            return run_tokens(args[1:])
        raise BugsError(_unknown_command_message(cmd))
    except BugsError as err:
        print(format_error(err), file=sys.stderr)
        return 1


def _print_usage() -> None:
    print(
        "Usage:\n"
        "  bugs check <file.bugs> [--json] [--trace] [--track-lines] [--restore-sign]\n"
        "  bugs tokens <file.bugs> [--json]\n"
        "  bugs --version"
    )


def _unknown_command_message(cmd: str) -> str:
    return build_guidance_message(
        what=f"Unknown command '{cmd}'.",
        why="Supported commands are check and tokens.",
        fix="Use one of the supported commands.",
        example="bugs check walker.bugs",
    )


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
