"""Resolve where generated files are written."""
from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def now_millis() -> int:
    return int(time.time() * 1000)


def ensure_directory(path: PathLike) -> Path:
    """Create *path* and its parents if missing. Safe to call repeatedly."""

    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def resolve_output_path(
    output: Optional[PathLike],
    fmt: str,
    export_dir: Path,
    timestamp: Optional[int] = None,
) -> Path:
    """Return the destination file for a single QR code.

    Without *output* a ``qr-<millis>.<fmt>`` name is generated inside
    *export_dir*. A bare file name also lands in *export_dir*; anything with
    a directory component is resolved against the working directory.
    """

    if not output:
        stamp = now_millis() if timestamp is None else timestamp
        return Path(export_dir) / f"qr-{stamp}.{fmt}"

    text = str(output)
    if not os.path.isabs(text) and os.sep not in text and "/" not in text:
        return Path(export_dir) / text

    return Path(text).resolve()


def resolve_batch_output_dir(
    output: Optional[PathLike],
    batch_name: str,
    export_dir: Path,
    timestamp: Optional[int] = None,
) -> Path:
    """Return the directory that receives every file of one batch run."""

    stamp = now_millis() if timestamp is None else timestamp
    folder = f"{batch_name}_batch_{stamp}"
    if not output:
        return Path(export_dir) / folder

    target = Path(str(output))
    if target.suffix:
        target = target.parent

    if not target.is_absolute():
        target = Path(export_dir) / target
    return target / folder


def batch_item_filename(index: int, fmt: str) -> str:
    """``qr-001.png`` for the first item of a batch."""

    return f"qr-{index:03d}.{fmt}"
