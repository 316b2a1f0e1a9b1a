from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from bugslang.config.model import RecognizerConfig
from bugslang.errors.base import ConfigError
from bugslang.errors.guidance import build_guidance_message


CONFIG_FILENAME = "bugs.toml"
ENV_TRACK_LINES = "BUGS_TRACK_LINES"
ENV_RESTORE_SIGN = "BUGS_RESTORE_SIGN"
ENV_EXTRA_COLORS = "BUGS_EXTRA_COLORS"
RESERVED_TRUE_VALUES = {"1", "true", "yes", "on"}
RESERVED_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ConfigSource:
    kind: str
    path: str | None = None


def load_config(source_path: Path | None = None, root: Path | None = None) -> RecognizerConfig:
    config, _ = resolve_config(source_path=source_path, root=root)
    return config


def resolve_config(
    source_path: Path | None = None,
    root: Path | None = None,
) -> tuple[RecognizerConfig, list[ConfigSource]]:
    config = RecognizerConfig()
    sources: list[ConfigSource] = []
    project_root = _resolve_root(source_path, root)
    if project_root:
        toml_path = project_root / CONFIG_FILENAME
        if toml_path.exists():
            data = _parse_toml(toml_path.read_text(encoding="utf-8"), toml_path)
            _apply_toml_config(config, data, toml_path)
            sources.append(ConfigSource(kind="toml", path=toml_path.as_posix()))
    if apply_env_overrides(config):
        sources.append(ConfigSource(kind="env", path=None))
    return config, sources


def apply_env_overrides(config: RecognizerConfig) -> bool:
    used = False
    track_lines = os.getenv(ENV_TRACK_LINES)
    if track_lines:
        config.track_lines = _parse_env_flag(ENV_TRACK_LINES, track_lines)
        used = True
    restore_sign = os.getenv(ENV_RESTORE_SIGN)
    if restore_sign:
        config.restore_sign = _parse_env_flag(ENV_RESTORE_SIGN, restore_sign)
        used = True
    extra_colors = os.getenv(ENV_EXTRA_COLORS)
    if extra_colors:
        values = [item.strip() for item in extra_colors.split(",")]
        config.extra_colors = [item for item in values if item]
        used = True
    return used


def _resolve_root(source_path: Path | None, root: Path | None) -> Path | None:
    if root:
        return Path(root).resolve()
    if source_path:
        return Path(source_path).resolve().parent
    return None


def _parse_toml(text: str, path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        raise ConfigError(
            build_guidance_message(
                what=f"{path.name} is not valid TOML.",
                why=f"TOML parsing failed: {err}.",
                fix=f"Fix the TOML syntax in {path.name}.",
                example="[recognizer]\ntrack_lines = true",
            ),
            details={"file": path.as_posix()},
        ) from err
    return data if isinstance(data, dict) else {}


def _apply_toml_config(config: RecognizerConfig, data: Dict[str, Any], path: Path) -> None:
    section = data.get("recognizer")
    if section is None:
        return
    if not isinstance(section, dict):
        raise ConfigError(_invalid_value_message(path, "recognizer", "a table"))
    if "track_lines" in section:
        config.track_lines = _expect_bool(section["track_lines"], "track_lines", path)
    if "restore_sign" in section:
        config.restore_sign = _expect_bool(section["restore_sign"], "restore_sign", path)
    if "extra_colors" in section:
        colors = section["extra_colors"]
        if not isinstance(colors, list) or not all(isinstance(item, str) and item for item in colors):
            raise ConfigError(_invalid_value_message(path, "extra_colors", "a list of names"))
        config.extra_colors = list(colors)


def _expect_bool(value: object, key: str, path: Path) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(_invalid_value_message(path, key, "true or false"))
    return value


def _parse_env_flag(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in RESERVED_TRUE_VALUES:
        return True
    if lowered in RESERVED_FALSE_VALUES:
        return False
    raise ConfigError(
        build_guidance_message(
            what=f"{name} has an unsupported value '{raw}'.",
            why="Flags accept 1/0, true/false, yes/no or on/off.",
            fix=f"Set {name} to one of the supported values.",
            example=f"{name}=1",
        )
    )


def _invalid_value_message(path: Path, key: str, expected: str) -> str:
    return build_guidance_message(
        what=f"Invalid value for '{key}' in {path.name}.",
        why=f"'{key}' must be {expected}.",
        fix=f"Update '{key}' under [recognizer].",
        example="[recognizer]\nrestore_sign = false",
    )


__all__ = ["CONFIG_FILENAME", "ConfigSource", "apply_env_overrides", "load_config", "resolve_config"]
