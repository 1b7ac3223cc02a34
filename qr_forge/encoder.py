"""Adapter around the ``qrcode`` library and renderers for its module matrix."""
from __future__ import annotations

import base64
import io
from collections.abc import Sequence
from typing import List, Tuple

from PIL import Image
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError
from qrcode.main import QRCode

from qr_forge.colors import parse_color, svg_color
from qr_forge.errors import EncodingError
from qr_forge.options import GenerationRequest, TerminalOptions

ERROR_CORRECTION_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}

# Pixels per module when the requested width cannot hold one pixel per module.
FALLBACK_SCALE = 4

Matrix = List[List[bool]]


def _make_qr(data: str, error_correction: str, margin: int) -> QRCode:
    level = ERROR_CORRECTION_LEVELS.get(error_correction.upper())
    if level is None:
        raise EncodingError(f"Unknown error correction level: {error_correction}")
    if not data:
        raise EncodingError("Cannot encode an empty payload")

    qr = QRCode(error_correction=level, box_size=1, border=margin)
    try:
        qr.add_data(data)
        qr.make(fit=True)
    except UnicodeEncodeError as exc:
        raise EncodingError("Data contains characters that cannot be encoded as UTF-8") from exc
    # newer qrcode releases raise ValueError instead of DataOverflowError
    except (DataOverflowError, ValueError) as exc:
        raise EncodingError(
            f"Data is too long for a QR code at error correction level {error_correction}"
        ) from exc
    return qr


def create_qr_matrix(data: str, error_correction: str = "M", margin: int = 4) -> Matrix:
    """Return the module matrix for *data*, quiet zone included."""

    return _make_qr(data, error_correction, margin).get_matrix()


def image_width(modules: int, requested: int) -> int:
    if requested >= modules:
        return requested
    return modules * FALLBACK_SCALE


def render_matrix(matrix: Sequence[Sequence[bool]], width: int, dark: str, light: str) -> Image.Image:
    """Paint *matrix* one pixel per module and scale it to *width* pixels square."""

    size = len(matrix)
    dark_rgba = parse_color(dark)
    light_rgba = parse_color(light)

    canvas = Image.new("RGBA", (size, size), light_rgba)
    canvas.putdata([dark_rgba if cell else light_rgba for row in matrix for cell in row])

    target = image_width(size, width)
    if target != size:
        canvas = canvas.resize((target, target), Image.Resampling.NEAREST)
    return canvas


def render_png(request: GenerationRequest) -> Image.Image:
    matrix = create_qr_matrix(request.data, request.error_correction, request.margin)
    return render_matrix(matrix, request.pixel_width, request.dark_color, request.light_color)


def _dark_runs(matrix: Sequence[Sequence[bool]]) -> List[Tuple[int, int, int]]:
    """Return ``(row, start, length)`` for each horizontal run of dark modules."""

    runs = []
    for y, row in enumerate(matrix):
        start = None
        for x, cell in enumerate(list(row) + [False]):
            if cell and start is None:
                start = x
            elif not cell and start is not None:
                runs.append((y, start, x - start))
                start = None
    return runs


def _fill_attributes(color: str) -> str:
    fill, opacity = svg_color(color)
    if opacity < 1:
        return f'fill="{fill}" fill-opacity="{opacity}"'
    return f'fill="{fill}"'


def render_svg(request: GenerationRequest) -> str:
    matrix = create_qr_matrix(request.data, request.error_correction, request.margin)
    size = len(matrix)
    width = image_width(size, request.pixel_width)

    path = "".join(f"M{x} {y}h{length}v1h-{length}z" for y, x, length in _dark_runs(matrix))
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{width}"'
        f' viewBox="0 0 {size} {size}" shape-rendering="crispEdges">',
        f'<path {_fill_attributes(request.light_color)} d="M0 0h{size}v{size}H0z"/>',
        f'<path {_fill_attributes(request.dark_color)} d="{path}"/>',
        "</svg>",
    ]
    return "\n".join(parts) + "\n"


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def to_data_url(image: Image.Image) -> str:
    encoded = base64.b64encode(png_bytes(image)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def render_terminal(data: str, options: TerminalOptions) -> str:
    """Render *data* as block characters for a terminal preview."""

    qr = _make_qr(data, options.error_correction, options.margin)
    out = io.StringIO()
    if options.small:
        qr.print_ascii(out=out, tty=False, invert=True)
    else:
        for row in qr.get_matrix():
            out.write("".join("██" if cell else "  " for cell in row) + "\n")
    return out.getvalue()
