"""Validation of raw command line values."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from qr_forge.colors import is_valid_hex_color

SUPPORTED_FORMATS = ("png", "svg")
LOGO_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp")

SIZE_RANGE = (50, 2000)
MARGIN_RANGE = (0, 20)
LOGO_SIZE_RANGE = (5, 40)


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class BatchFileCheck:
    valid: bool
    lines: List[str] = field(default_factory=list)
    error: Optional[str] = None


def file_exists(path: Any) -> bool:
    try:
        return Path(path).is_file()
    except (OSError, TypeError, ValueError):
        return False


def is_valid_number(value: Any, minimum: float = 0, maximum: float = math.inf) -> bool:
    """Return True when *value* parses as a number within ``[minimum, maximum]``."""

    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return minimum <= number <= maximum


def is_valid_format(fmt: Any) -> bool:
    return isinstance(fmt, str) and fmt.lower() in SUPPORTED_FORMATS


def is_valid_logo_file(path: Any) -> bool:
    if not file_exists(path):
        return False
    return Path(path).suffix.lower() in LOGO_EXTENSIONS


def split_batch_lines(content: str) -> List[str]:
    """Return the trimmed, non-blank lines of a batch file."""

    stripped = (line.strip() for line in content.splitlines())
    return [line for line in stripped if line]


def validate_batch_file(path: Any) -> BatchFileCheck:
    if not file_exists(path):
        return BatchFileCheck(False, error="Batch file not found")

    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return BatchFileCheck(False, error=f"Failed to read batch file: {exc}")

    lines = split_batch_lines(content)
    if not lines:
        return BatchFileCheck(False, error="Batch file is empty")
    return BatchFileCheck(True, lines=lines)


def _given(value: Any) -> bool:
    return value is not None and value != ""


def validate_options(options: Any, data: Optional[str]) -> ValidationResult:
    """Check every option on *options* and collect all problems at once."""

    errors: List[str] = []
    batch = getattr(options, "batch", None)

    if not data and not batch:
        errors.append("Data argument is required (or use --batch for batch processing)")

    color = getattr(options, "color", None)
    if _given(color) and not is_valid_hex_color(color):
        errors.append(f'Invalid color format: "{color}". Use hex format (#RGB, #RGBA, #RRGGBB, or #RRGGBBAA)')

    background = getattr(options, "background", None)
    if _given(background) and not is_valid_hex_color(background):
        errors.append(
            f'Invalid background format: "{background}". Use hex format (#RGB, #RGBA, #RRGGBB, or #RRGGBBAA)'
        )

    size = getattr(options, "size", None)
    if _given(size) and not is_valid_number(size, *SIZE_RANGE):
        errors.append(f'Invalid size: "{size}". Must be between 50 and 2000 pixels')

    margin = getattr(options, "margin", None)
    if _given(margin) and not is_valid_number(margin, *MARGIN_RANGE):
        errors.append(f'Invalid margin: "{margin}". Must be between 0 and 20')

    fmt = getattr(options, "format", None)
    if _given(fmt) and not is_valid_format(fmt):
        errors.append(f'Invalid format: "{fmt}". Supported formats: {", ".join(SUPPORTED_FORMATS)}')

    logo = getattr(options, "logo", None)
    if _given(logo) and not is_valid_logo_file(logo):
        errors.append(f'Invalid logo file: "{logo}". File must exist and be a valid image (png, jpg, jpeg, webp)')

    logo_size = getattr(options, "logo_size", None)
    if _given(logo_size) and not is_valid_number(logo_size, *LOGO_SIZE_RANGE):
        errors.append(f'Invalid logo size: "{logo_size}". Must be between 5% and 40%')

    if batch:
        check = validate_batch_file(batch)
        if not check.valid:
            errors.append(check.error or "Invalid batch file")

    return ValidationResult(valid=not errors, errors=errors)
