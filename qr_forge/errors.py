"""Exceptions raised while generating QR codes."""
from __future__ import annotations

from typing import Sequence


class QRForgeError(Exception):
    """Base class for errors reported to the user as a single line."""


class ValidationError(QRForgeError):
    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Validation failed")


class EncodingError(QRForgeError):
    """The payload could not be encoded into a QR symbol."""


class CompositingError(QRForgeError):
    """The logo could not be read or merged into the QR raster."""
