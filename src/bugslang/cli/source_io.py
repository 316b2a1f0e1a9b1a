from __future__ import annotations

from pathlib import Path

from bugslang.errors.base import BugsError
from bugslang.errors.guidance import build_guidance_message


def read_source(path_str: str) -> tuple[Path, str]:
    path = Path(path_str)
    if not path.is_file():
        raise BugsError(
            build_guidance_message(
                what=f"Source file '{path_str}' was not found.",
                why="The command needs an existing Bugs program file.",
                fix="Check the path and try again.",
                example="bugs check walker.bugs",
            )
        )
    try:
        return path, path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise BugsError(
            build_guidance_message(
                what=f"Source file '{path_str}' is not valid UTF-8.",
                why=str(err),
                fix="Save the file as UTF-8 text.",
            )
        ) from err


__all__ = ["read_source"]
