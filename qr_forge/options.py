"""Map validated command line options onto encoder parameters."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from qr_forge.colors import normalize_hex_color
from qr_forge.config import (
    DEFAULT_DARK_COLOR,
    DEFAULT_ERROR_CORRECTION,
    DEFAULT_LIGHT_COLOR,
    DEFAULT_LOGO_SIZE_PERCENT,
    DEFAULT_MARGIN,
    DEFAULT_WIDTH,
    LOGO_ERROR_CORRECTION,
)

RASTER = "png"
VECTOR = "svg"

LOGO_SIZE_MIN = 5
LOGO_SIZE_MAX = 40
LOGO_STYLES = ("square", "circle")


@dataclass(frozen=True)
class GenerationRequest:
    """Everything the encoder and compositor need for one QR code."""

    data: str
    format: str
    pixel_width: int
    margin: int
    dark_color: str
    light_color: str
    error_correction: str
    logo_path: Optional[Path] = None
    logo_size: float = DEFAULT_LOGO_SIZE_PERCENT / 100
    logo_style: str = "square"

    @property
    def embeds_logo(self) -> bool:
        return self.logo_path is not None and self.format == RASTER

    def with_data(self, data: str) -> "GenerationRequest":
        return dataclasses.replace(self, data=data)


@dataclass(frozen=True)
class TerminalOptions:
    margin: int
    error_correction: str
    small: bool = True


def _option(options: Any, name: str) -> Any:
    value = getattr(options, name, None)
    return None if value == "" else value


def _as_int(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def get_error_correction(options: Any) -> str:
    return LOGO_ERROR_CORRECTION if _option(options, "logo") else DEFAULT_ERROR_CORRECTION


def get_output_format(options: Any) -> str:
    """Pick the output format: ``--format`` first, then the ``--output`` extension, then PNG."""

    fmt = _option(options, "format")
    if fmt:
        return str(fmt).lower()

    output = _option(options, "output")
    if output:
        suffix = Path(str(output)).suffix.lower().lstrip(".")
        if suffix in (RASTER, VECTOR):
            return suffix

    return RASTER


def should_embed_logo(options: Any) -> bool:
    return bool(_option(options, "logo")) and get_output_format(options) == RASTER


def get_logo_size(options: Any) -> float:
    """Return the logo edge as a fraction of the QR edge, clamped to [0.05, 0.40]."""

    percent = _as_int(_option(options, "logo_size"), DEFAULT_LOGO_SIZE_PERCENT) or DEFAULT_LOGO_SIZE_PERCENT
    return min(max(percent, LOGO_SIZE_MIN), LOGO_SIZE_MAX) / 100


def build_request(options: Any, data: str = "") -> GenerationRequest:
    logo = _option(options, "logo")
    style = _option(options, "logo_style") or "square"
    return GenerationRequest(
        data=data,
        format=get_output_format(options),
        pixel_width=_as_int(_option(options, "size"), DEFAULT_WIDTH),
        margin=_as_int(_option(options, "margin"), DEFAULT_MARGIN),
        dark_color=normalize_hex_color(_option(options, "color") or DEFAULT_DARK_COLOR),
        light_color=normalize_hex_color(_option(options, "background") or DEFAULT_LIGHT_COLOR),
        error_correction=get_error_correction(options),
        logo_path=Path(logo) if logo else None,
        logo_size=get_logo_size(options),
        logo_style=style if style in LOGO_STYLES else "square",
    )


def build_terminal_options(options: Any) -> TerminalOptions:
    return TerminalOptions(
        margin=_as_int(_option(options, "margin"), DEFAULT_MARGIN),
        error_correction=get_error_correction(options),
    )
