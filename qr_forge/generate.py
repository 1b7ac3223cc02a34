"""Generate a single QR code as a file, data URL, HTML page or img tag."""
from __future__ import annotations

import dataclasses
import html
from pathlib import Path
from string import Template
from typing import Any, Optional, Union

from PIL import Image

from qr_forge.config import Settings
from qr_forge.encoder import render_png, render_svg, render_terminal, to_data_url
from qr_forge.errors import QRForgeError
from qr_forge.logo import LOGO_EMBEDDERS
from qr_forge.options import RASTER, VECTOR, GenerationRequest, build_request, build_terminal_options
from qr_forge.paths import ensure_directory, resolve_output_path
from qr_forge.reporter import ConsoleReporter

HTML_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>QR Code - qr-forge</title>
    <style>
      body {
        display: flex;
        justify-content: center;
        align-items: center;
        min-height: 100vh;
        margin: 0;
        background: #f5f5f5;
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      }
      .qr-container {
        background: white;
        padding: 24px;
        border-radius: 12px;
        box-shadow: 0 4px 24px rgba(0,0,0,0.1);
        text-align: center;
      }
      .qr-container img {
        display: block;
        margin: 0 auto 16px;
      }
      .qr-data {
        color: #666;
        font-size: 14px;
        word-break: break-all;
        max-width: ${size}px;
      }
      .qr-footer {
        margin-top: 16px;
        color: #999;
        font-size: 12px;
      }
    </style>
  </head>
  <body>
    <div class="qr-container">
      $img
      <p class="qr-data">$data</p>
      <p class="qr-footer">Generated with qr-forge</p>
    </div>
  </body>
</html>
"""
)


def render_request(request: GenerationRequest) -> Union[Image.Image, str]:
    """Return SVG markup for vector requests, otherwise the (logo-decorated) raster."""

    if request.format == VECTOR:
        return render_svg(request)

    image = render_png(request)
    if request.embeds_logo:
        embedder = LOGO_EMBEDDERS[request.logo_style]
        image = embedder(image, request.logo_path, request.logo_size)
    return image


def write_qr_file(request: GenerationRequest, output: Path) -> Path:
    rendered = render_request(request)
    if isinstance(rendered, str):
        output.write_text(rendered, encoding="utf-8")
    else:
        rendered.save(output, format="PNG")
    return output


def show_terminal_preview(data: str, options: Any, reporter: ConsoleReporter) -> None:
    try:
        preview = render_terminal(data, build_terminal_options(options))
    except QRForgeError as exc:
        reporter.warn(f"Could not display terminal preview: {exc}")
        return
    reporter.divider()
    reporter.qr(preview)
    reporter.divider()


def generate_qr(
    data: str,
    options: Any,
    settings: Optional[Settings] = None,
    reporter: Optional[ConsoleReporter] = None,
    timestamp: Optional[int] = None,
) -> Path:
    """Encode *data* and write it to the resolved output path, which is returned."""

    settings = settings or Settings()
    reporter = reporter or ConsoleReporter()

    request = build_request(options, data)
    output = resolve_output_path(getattr(options, "output", None), request.format, settings.export_dir, timestamp)
    ensure_directory(output.parent)

    show_terminal_preview(data, options, reporter)

    if request.format == VECTOR:
        reporter.processing("Generating SVG QR code...")
    elif request.embeds_logo:
        reporter.processing("Generating QR code with logo...")
    else:
        reporter.processing("Generating QR code...")

    write_qr_file(request, output)

    if request.format == VECTOR:
        reporter.success("SVG QR code generated successfully")
    elif request.embeds_logo:
        reporter.success("QR code with logo generated successfully")
    else:
        reporter.success("QR code generated successfully")
    reporter.saved(output)
    return output


def generate_data_url(data: str, options: Any) -> str:
    # Data URLs are always PNG; the logo follows the requested format.
    request = build_request(options, data)
    logo_path = request.logo_path if request.embeds_logo else None
    request = dataclasses.replace(request, format=RASTER, logo_path=logo_path)
    image = render_request(request)
    return to_data_url(image)


def _img_tag(data_url: str, size: int) -> str:
    return f'<img src="{data_url}" alt="QR Code" width="{size}" height="{size}">'


def generate_html_embed(data: str, options: Any) -> str:
    size = build_request(options, data).pixel_width
    return HTML_TEMPLATE.substitute(
        size=size,
        img=_img_tag(generate_data_url(data, options), size),
        data=html.escape(data, quote=True),
    )


def generate_img_tag(data: str, options: Any) -> str:
    size = build_request(options, data).pixel_width
    return _img_tag(generate_data_url(data, options), size)


def html_output_path(output: str) -> Path:
    """Return *output* with an ``.html`` suffix added when it is missing."""

    text = str(output)
    if not text.lower().endswith(".html"):
        text = f"{text}.html"
    return Path(text)
