"""Center logo overlay for raster QR codes."""
from __future__ import annotations

from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageOps, UnidentifiedImageError

from qr_forge.errors import CompositingError

RESAMPLE_FILTER = Image.Resampling.LANCZOS

SQUARE_PADDING = 0.1
CIRCLE_PADDING = 0.15
BACKING_COLOR = (255, 255, 255, 255)
TRANSPARENT = (255, 255, 255, 0)


def logo_box(qr_size: Tuple[int, int], logo_size: float) -> Tuple[int, int, int, int]:
    """Return ``(x, y, width, height)`` of the centered logo area."""

    qr_width, qr_height = qr_size
    width = round(qr_width * logo_size)
    height = round(qr_height * logo_size)
    x = round((qr_width - width) / 2)
    y = round((qr_height - height) / 2)
    return x, y, width, height


def load_logo(logo_path: Path, size: Tuple[int, int]) -> Image.Image:
    """Open *logo_path* and contain-fit it on a transparent canvas of *size*."""

    try:
        with Image.open(logo_path) as source:
            logo = source.convert("RGBA")
    except FileNotFoundError as exc:
        raise CompositingError(f"Logo file not found: {logo_path}") from exc
    except (UnidentifiedImageError, OSError) as exc:
        raise CompositingError(f"Logo '{logo_path}' is not a readable image") from exc
    except Image.DecompressionBombError as exc:
        raise CompositingError(f"Logo '{logo_path}' is too large to decode safely") from exc

    return ImageOps.pad(logo, size, method=RESAMPLE_FILTER, color=TRANSPARENT)


def _base_layer(qr_image: Image.Image) -> Image.Image:
    try:
        return qr_image.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise CompositingError("QR raster could not be read") from exc


def square_backing(side: int) -> Image.Image:
    return Image.new("RGBA", (side, side), BACKING_COLOR)


def circle_backing(diameter: int) -> Image.Image:
    backing = Image.new("RGBA", (diameter, diameter), TRANSPARENT)
    ImageDraw.Draw(backing).ellipse((0, 0, diameter - 1, diameter - 1), fill=BACKING_COLOR)
    return backing


def embed_logo(qr_image: Image.Image, logo_path: Path, logo_size: float) -> Image.Image:
    """Overlay the logo on a white square in the middle of *qr_image*.

    The square extends the logo box by a tenth of the logo width on each side,
    so the modules right next to the logo stay clean.
    """

    base = _base_layer(qr_image)
    x, y, width, height = logo_box(base.size, logo_size)
    logo = load_logo(logo_path, (width, height))

    padding = round(width * SQUARE_PADDING)
    base.alpha_composite(square_backing(width + padding * 2), (x - padding, y - padding))
    base.alpha_composite(logo, (x, y))
    return base


def embed_logo_circular(qr_image: Image.Image, logo_path: Path, logo_size: float) -> Image.Image:
    """Like :func:`embed_logo` but with a round white backing."""

    base = _base_layer(qr_image)
    x, y, width, height = logo_box(base.size, logo_size)
    logo = load_logo(logo_path, (width, height))

    padding = round(width * CIRCLE_PADDING)
    diameter = width + padding * 2
    backing_x = round((base.width - diameter) / 2)
    backing_y = round((base.height - diameter) / 2)
    base.alpha_composite(circle_backing(diameter), (backing_x, backing_y))
    base.alpha_composite(logo, (x, y))
    return base


LOGO_EMBEDDERS = {
    "square": embed_logo,
    "circle": embed_logo_circular,
}
