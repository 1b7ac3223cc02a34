"""Convenience entry point for running the QR code generator without CLI flags.

Update the configuration variables below to control what data is encoded, where
the resulting file is written, and how the QR code looks. When you run
``main.py`` (for example from PyCharm) the script will use these values and
immediately generate the QR code image.
"""

from __future__ import annotations

from argparse import Namespace

from qr_forge.config import Settings
from qr_forge.generate import generate_qr

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
# Text or URL that should be encoded inside the QR code.
DATA_TO_ENCODE = "https://example.com"

# File name for the generated image. A bare name is written to the export
# directory (~/.qr-forge/exports, or $QR_FORGE_EXPORT_DIR when set). Use
# ".svg" to get a vector file instead of a PNG.
OUTPUT_FILENAME = "qr.png"

# Edge length of the image in pixels (50-2000) and quiet zone in modules (0-20).
SIZE = 300
MARGIN = 4

# Module and background colors. Accepts #RGB, #RGBA, #RRGGBB or #RRGGBBAA.
COLOR = "#000000"
BACKGROUND_COLOR = "#FFFFFFFF"

# Optional logo placed in the center (PNG, JPG or WEBP), or None.
LOGO_PATH = None

# Logo edge as a percentage of the QR code edge (5-40).
LOGO_SIZE = 20


def main() -> None:
    """Generate a QR code using the configuration specified above."""

    options = Namespace(
        output=OUTPUT_FILENAME,
        format=None,
        size=SIZE,
        margin=MARGIN,
        color=COLOR,
        background=BACKGROUND_COLOR,
        logo=LOGO_PATH,
        logo_size=LOGO_SIZE,
        logo_style="square",
    )

    saved_path = generate_qr(DATA_TO_ENCODE, options, Settings())

    print(f"QR code saved to {saved_path}")


if __name__ == "__main__":
    main()
