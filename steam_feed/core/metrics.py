"""
Text measurement capability supplied by the rendering host.

Layout only needs two questions answered for a given font: how wide a
single word is, and how tall a block of text becomes when laid out at a
given width. Hosts bind these to their own font resources.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import math


class TextMetrics(ABC):
    """Abstract base class for font measurement.

    Fonts are referred to by identifier (e.g. ``"goldFont.fnt"``); the
    implementation decides how an identifier maps to glyph sizes.
    """

    @abstractmethod
    def measure_width(self, text: str, font: str) -> float:
        """Return the rendered width of ``text`` on a single line."""
        raise NotImplementedError

    @abstractmethod
    def measure_height(self, text: str, font: str, width: float) -> float:
        """Return the rendered height of ``text`` wrapped to ``width``."""
        raise NotImplementedError

    def word_measure(self, font: str):
        """Bind ``measure_width`` to one font for use with ``wrap_text``."""
        return lambda word: self.measure_width(word, font)


@dataclass
class FontSize:
    char_width: float
    line_height: float


@dataclass
class FixedWidthMetrics(TextMetrics):
    """Monospace approximation of bitmap fonts.

    Used by the CLI and tests where no real font atlas is loaded.
    """

    fonts: dict[str, FontSize] = field(
        default_factory=lambda: {
            "goldFont.fnt": FontSize(char_width=18.0, line_height=32.0),
            "chatFont.fnt": FontSize(char_width=9.0, line_height=20.0),
        }
    )
    fallback: FontSize = field(default_factory=lambda: FontSize(char_width=10.0, line_height=20.0))

    def _size(self, font: str) -> FontSize:
        return self.fonts.get(font, self.fallback)

    def measure_width(self, text: str, font: str) -> float:
        return len(text) * self._size(font).char_width

    def measure_height(self, text: str, font: str, width: float) -> float:
        size = self._size(font)
        if not text:
            return 0.0
        chars_per_line = max(1, int(width // size.char_width))
        lines = 0
        for paragraph in text.split("\n"):
            lines += max(1, math.ceil(len(paragraph) / chars_per_line))
        return lines * size.line_height
