from __future__ import annotations

from importlib import metadata
from pathlib import Path


# src/bugslang/version.py -> repository root
VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION"


def get_version() -> str:
    """Installed distribution version, else the checkout's VERSION file."""
    try:
        return metadata.version("bugslang")
    except metadata.PackageNotFoundError:
        pass
    if VERSION_FILE.exists():
        return VERSION_FILE.read_text(encoding="utf-8").strip()
    return "0.0.0"
