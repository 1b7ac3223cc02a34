import pytest
from PIL import Image

from qr_forge.errors import CompositingError
from qr_forge.logo import embed_logo, embed_logo_circular, load_logo, logo_box

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


@pytest.fixture
def dark_qr():
    return Image.new("RGBA", (300, 300), BLACK)


def test_logo_box_is_centered():
    assert logo_box((300, 300), 0.2) == (120, 120, 60, 60)
    assert logo_box((300, 300), 0.4) == (90, 90, 120, 120)
    assert logo_box((50, 50), 0.05) == (24, 24, 2, 2)


def test_logo_is_contain_fit_on_transparent_canvas(wide_logo_file):
    logo = load_logo(wide_logo_file, (60, 60))

    assert logo.size == (60, 60)
    assert logo.getpixel((30, 30)) == RED
    assert logo.getpixel((30, 5))[3] == 0


def test_square_backing(dark_qr, wide_logo_file):
    result = embed_logo(dark_qr, wide_logo_file, 0.2)

    assert result.size == (300, 300)
    assert result.getpixel((150, 150)) == RED
    # logo box is 60px at 120, backing adds 6px on each side
    assert result.getpixel((150, 125)) == WHITE
    assert result.getpixel((115, 115)) == WHITE
    assert result.getpixel((113, 113)) == BLACK
    assert result.getpixel((10, 10)) == BLACK


def test_circular_backing(dark_qr, logo_file):
    result = embed_logo_circular(dark_qr, logo_file, 0.2)

    assert result.getpixel((150, 150)) == RED
    # diameter 78 starting at 111
    assert result.getpixel((150, 113)) == WHITE
    assert result.getpixel((112, 112)) == BLACK
    assert result.getpixel((105, 150)) == BLACK


def test_input_image_is_not_modified(dark_qr, logo_file):
    embed_logo(dark_qr, logo_file, 0.2)
    assert dark_qr.getpixel((150, 150)) == BLACK


def test_missing_logo(dark_qr, tmp_path):
    with pytest.raises(CompositingError, match="not found"):
        embed_logo(dark_qr, tmp_path / "missing.png", 0.2)


def test_corrupt_logo(dark_qr, tmp_path):
    corrupt = tmp_path / "corrupt.png"
    corrupt.write_text("not an image")
    with pytest.raises(CompositingError, match="not a readable image"):
        embed_logo(dark_qr, corrupt, 0.2)


def test_decompression_bomb_logo(dark_qr, logo_file, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    with pytest.raises(CompositingError, match="too large"):
        embed_logo(dark_qr, logo_file, 0.2)
