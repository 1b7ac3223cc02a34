"""Runtime configuration for qr-forge."""
from __future__ import annotations

import os
from pathlib import Path

VERSION = "1.0.0"

DEFAULT_WIDTH = 300
DEFAULT_MARGIN = 4
DEFAULT_DARK_COLOR = "#000000FF"
DEFAULT_LIGHT_COLOR = "#FFFFFFFF"
DEFAULT_ERROR_CORRECTION = "M"
LOGO_ERROR_CORRECTION = "H"
DEFAULT_LOGO_SIZE_PERCENT = 20


def default_export_dir(env=None) -> Path:
    """Return ``~/.qr-forge/exports`` for the home directory found in *env*."""

    source = os.environ if env is None else env
    home = source.get("HOME") or source.get("USERPROFILE")
    base = Path(home) if home else Path.home()
    return base / ".qr-forge" / "exports"


class Settings:
    def __init__(self, env=None) -> None:
        source = os.environ if env is None else env
        override = source.get("QR_FORGE_EXPORT_DIR", "").strip()
        self.export_dir = Path(override).expanduser() if override else default_export_dir(source)
