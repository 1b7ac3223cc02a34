"""Console feedback for interactive runs."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

TICK = "✔"
CROSS = "✖"
WARNING = "⚠"
INFO = "ℹ"
POINTER = "❯"
ARROW_RIGHT = "→"
STAR = "★"

DIVIDER_WIDTH = 50
BAR_CELLS = 20


def truncate(text: Optional[str], max_length: int = 40) -> str:
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


class ConsoleReporter:
    """Writes one styled line per event to *stream* (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def raw(self, message: str) -> None:
        print(message, file=self.stream)

    def success(self, message: str) -> None:
        self.raw(f"{TICK} {message}")

    def error(self, message: str) -> None:
        self.raw(f"{CROSS} {message}")

    def warn(self, message: str) -> None:
        self.raw(f"{WARNING} {message}")

    def info(self, message: str) -> None:
        self.raw(f"{INFO} {message}")

    def processing(self, message: str) -> None:
        self.raw(f"{POINTER} {message}")

    def saved(self, path: object) -> None:
        self.raw(f"{ARROW_RIGHT} Saved: {path}")

    def progress(self, current: int, total: int, item: str) -> None:
        percentage = round(current / total * 100) if total else 100
        filled = percentage * BAR_CELLS // 100
        bar = "█" * filled + "░" * (BAR_CELLS - filled)
        self.raw(f"[{bar}] {percentage}% - {item}")

    def qr(self, rendering: str) -> None:
        self.raw(rendering.rstrip("\n"))

    def divider(self) -> None:
        self.raw("─" * DIVIDER_WIDTH)

    def header(self, title: str) -> None:
        self.raw(f"\n{STAR} {title}")
        self.divider()
