import base64
import io

import pytest
from PIL import Image

from qr_forge.encoder import (
    create_qr_matrix,
    image_width,
    render_png,
    render_svg,
    render_terminal,
    to_data_url,
)
from qr_forge.errors import EncodingError
from qr_forge.options import TerminalOptions, build_request


def test_matrix_includes_quiet_zone():
    matrix = create_qr_matrix("hello", "M", margin=4)
    assert len(matrix) == 29
    assert all(len(row) == 29 for row in matrix)
    assert not any(matrix[0])
    assert matrix[4][4]


def test_matrix_without_margin():
    matrix = create_qr_matrix("hello", "M", margin=0)
    assert len(matrix) == 21
    assert matrix[0][0]


def test_matrix_is_deterministic():
    assert create_qr_matrix("same", "Q") == create_qr_matrix("same", "Q")


def test_unknown_level_is_rejected():
    with pytest.raises(EncodingError):
        create_qr_matrix("hello", "Z")


def test_empty_payload_is_rejected():
    with pytest.raises(EncodingError):
        create_qr_matrix("", "M")


def test_oversized_payload_is_rejected():
    with pytest.raises(EncodingError, match="too long"):
        create_qr_matrix("a" * 3000, "H")


@pytest.mark.parametrize("size", ["50", "300", "2000"])
def test_png_width_matches_request(make_options, size):
    request = build_request(make_options(size=size), "hello")
    image = render_png(request)
    assert image.size == (request.pixel_width, request.pixel_width)


def test_small_width_falls_back_to_module_scale():
    assert image_width(29, 300) == 300
    assert image_width(29, 29) == 29
    assert image_width(57, 50) == 228


def test_png_uses_requested_colors(make_options):
    request = build_request(make_options(size="290", color="#F00", background="#00FF0080"), "hello")
    image = render_png(request)

    assert image.mode == "RGBA"
    assert image.getpixel((0, 0)) == (0, 255, 0, 128)
    assert image.getpixel((45, 45)) == (255, 0, 0, 255)


def test_svg_markup(make_options):
    request = build_request(make_options(format="svg", color="#00000080"), "hello")
    svg = render_svg(request)

    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'width="300" height="300"' in svg
    assert 'viewBox="0 0 29 29"' in svg
    assert '<path fill="#FFFFFF" d="M0 0h29v29H0z"/>' in svg
    assert 'fill="#000000" fill-opacity="0.502"' in svg
    assert "M4 4h7v1h-7z" in svg
    assert svg.rstrip().endswith("</svg>")


def test_data_url_is_a_png(make_options):
    image = render_png(build_request(make_options(size="120"), "hello"))
    url = to_data_url(image)

    assert url.startswith("data:image/png;base64,")
    decoded = Image.open(io.BytesIO(base64.b64decode(url.split(",", 1)[1])))
    assert decoded.format == "PNG"
    assert decoded.size == (120, 120)


def test_terminal_rendering():
    compact = render_terminal("hello", TerminalOptions(margin=2, error_correction="M"))
    full = render_terminal("hello", TerminalOptions(margin=2, error_correction="M", small=False))

    assert compact.count("\n") == 13
    assert full.count("\n") == 25
    assert "█" in full


def test_unencodable_payload_is_rejected():
    with pytest.raises(EncodingError, match="UTF-8"):
        create_qr_matrix("bad\udcff", "M")


def test_oversized_payload_error_names_the_level():
    with pytest.raises(EncodingError, match="level M"):
        render_terminal("x" * 3000, TerminalOptions(margin=4, error_correction="M"))
