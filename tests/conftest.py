import io
from argparse import Namespace
from pathlib import Path

import pytest
from PIL import Image

from qr_forge.config import Settings
from qr_forge.reporter import ConsoleReporter

CLI_DEFAULTS = {
    "data": None,
    "output": None,
    "format": None,
    "size": "300",
    "color": "#000000",
    "background": "#FFFFFF",
    "margin": "4",
    "logo": None,
    "logo_size": "20",
    "logo_style": "square",
    "batch": None,
    "html": False,
    "img": False,
}


def build_options(**overrides) -> Namespace:
    values = dict(CLI_DEFAULTS)
    values.update(overrides)
    return Namespace(**values)


@pytest.fixture
def make_options():
    return build_options


@pytest.fixture
def export_dir(tmp_path) -> Path:
    return tmp_path / "exports"


@pytest.fixture
def settings(export_dir) -> Settings:
    return Settings(env={"QR_FORGE_EXPORT_DIR": str(export_dir)})


@pytest.fixture
def reporter() -> ConsoleReporter:
    return ConsoleReporter(io.StringIO())


@pytest.fixture
def logo_file(tmp_path) -> Path:
    path = tmp_path / "logo.png"
    Image.new("RGBA", (32, 32), (255, 0, 0, 255)).save(path)
    return path


@pytest.fixture
def wide_logo_file(tmp_path) -> Path:
    path = tmp_path / "wide.png"
    Image.new("RGBA", (40, 20), (255, 0, 0, 255)).save(path)
    return path


@pytest.fixture
def batch_file(tmp_path):
    def _write(lines, name="links.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
