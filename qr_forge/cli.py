"""Command line entry point for qr-forge."""
from __future__ import annotations

import argparse
import sys
from typing import List, NoReturn, Optional

from qr_forge.batch import process_batch
from qr_forge.config import (
    DEFAULT_MARGIN,
    DEFAULT_LOGO_SIZE_PERCENT,
    DEFAULT_WIDTH,
    VERSION,
    Settings,
)
from qr_forge.errors import QRForgeError, ValidationError
from qr_forge.generate import generate_html_embed, generate_img_tag, generate_qr, html_output_path
from qr_forge.options import LOGO_STYLES, get_output_format
from qr_forge.paths import ensure_directory
from qr_forge.reporter import ConsoleReporter, truncate
from qr_forge.validators import validate_options

USAGE_ERROR_EXIT = 1


class QRForgeArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with the same code as validation errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_ERROR_EXIT, f"{self.prog}: error: {message}\n")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = QRForgeArgumentParser(
        prog="qr-forge",
        description=(
            "Generate QR codes with custom colors, logo embedding, batch processing "
            "and multiple output formats"
        ),
    )
    parser.add_argument("data", nargs="?", help="Data to encode in the QR code (URL, text, etc.)")
    parser.add_argument("-v", "--version", action="version", version=VERSION, help="Display version number")

    parser.add_argument("-o", "--output", help="Output file path (default: ~/.qr-forge/exports/)")
    parser.add_argument(
        "-f",
        "--format",
        help="Output format: png, svg (default: inferred from --output, else png)",
    )

    parser.add_argument(
        "-s", "--size", default=str(DEFAULT_WIDTH), help=f"QR code size in pixels (default: {DEFAULT_WIDTH})"
    )
    parser.add_argument("-c", "--color", default="#000000", help="QR code color in hex format (default: #000000)")
    parser.add_argument(
        "-b", "--background", default="#FFFFFF", help="Background color in hex format (default: #FFFFFF)"
    )
    parser.add_argument(
        "-m", "--margin", default=str(DEFAULT_MARGIN), help=f"Quiet zone in modules (default: {DEFAULT_MARGIN})"
    )

    parser.add_argument("-l", "--logo", help="Path to a logo image to embed in the QR center")
    parser.add_argument(
        "--logo-size",
        dest="logo_size",
        default=str(DEFAULT_LOGO_SIZE_PERCENT),
        help=f"Logo size as percentage of the QR code (5-40, default: {DEFAULT_LOGO_SIZE_PERCENT})",
    )
    parser.add_argument(
        "--logo-style",
        dest="logo_style",
        choices=LOGO_STYLES,
        default="square",
        help="Shape of the white backing behind the logo (default: square)",
    )

    parser.add_argument("--batch", help="Path to a file with one data item per line")

    parser.add_argument("--html", action="store_true", help="Output an HTML page with the QR code embedded")
    parser.add_argument("--img", action="store_true", help="Output an IMG tag with a base64 data URL")
    return parser


def handle_batch_mode(options: argparse.Namespace, settings: Settings, reporter: ConsoleReporter) -> int:
    reporter.header("QR-Forge Batch Mode")
    result = process_batch(options.batch, options, settings, reporter)
    return result.exit_code


def handle_html_mode(data: str, options: argparse.Namespace, reporter: ConsoleReporter) -> int:
    reporter.processing("Generating HTML embed...")
    page = generate_html_embed(data, options)

    if options.output:
        output = html_output_path(options.output)
        ensure_directory(output.parent)
        output.write_text(page, encoding="utf-8")
        reporter.success("HTML file generated successfully")
        reporter.saved(output)
    else:
        reporter.divider()
        reporter.raw(page)
        reporter.divider()
        reporter.info("Use -o <path> to save to file")
    return 0


def handle_img_mode(data: str, options: argparse.Namespace, reporter: ConsoleReporter) -> int:
    reporter.processing("Generating IMG tag with base64...")
    tag = generate_img_tag(data, options)

    reporter.divider()
    reporter.raw(tag)
    reporter.divider()
    reporter.info("Copy the above IMG tag to use in your HTML")
    return 0


def handle_standard_mode(
    data: str,
    options: argparse.Namespace,
    settings: Settings,
    reporter: ConsoleReporter,
) -> int:
    reporter.header("QR-Forge")
    has_logo = "Yes" if options.logo else "No"
    reporter.info(f"Data: {truncate(data, 50)}")
    reporter.info(f"Format: {get_output_format(options).upper()} | Size: {options.size}px | Logo: {has_logo}")

    generate_qr(data, options, settings, reporter)
    return 0


def dispatch(options: argparse.Namespace, settings: Settings, reporter: ConsoleReporter) -> int:
    validation = validate_options(options, options.data)
    if not validation.valid:
        raise ValidationError(validation.errors)

    if options.batch:
        return handle_batch_mode(options, settings, reporter)
    if options.html:
        return handle_html_mode(options.data, options, reporter)
    if options.img:
        return handle_img_mode(options.data, options, reporter)
    return handle_standard_mode(options.data, options, settings, reporter)


def main(args: Optional[List[str]] = None, reporter: Optional[ConsoleReporter] = None) -> int:
    parser = build_argument_parser()
    argv = sys.argv[1:] if args is None else args
    if not argv:
        parser.print_help()
        return 1

    parsed = parser.parse_args(args=argv)
    settings = Settings()
    reporter = reporter or ConsoleReporter()

    try:
        return dispatch(parsed, settings, reporter)
    except ValidationError as exc:
        reporter.error("Validation failed:")
        for error in exc.errors:
            reporter.error(f"  {error}")
        return 1
    except (QRForgeError, OSError) as exc:
        reporter.error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
