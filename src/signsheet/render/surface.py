#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

"""Drawing surface used by the layout code.

All coordinates are millimetres from the bottom-left corner of the page with
y increasing upward. Layout functions subtract row heights from a running y.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from fpdf import FPDF
from PIL import Image

from .geometry import HEADER_RULE, Stroke

FONT_FAMILY = "Helvetica"


class DrawingSurface(Protocol):
    def draw_text(self, content: str, size: float, x: float, y: float, *, bold: bool = False) -> None:
        ...

    def text_width(self, content: str, size: float, *, bold: bool = False) -> float:
        ...

    def set_stroke(self, stroke: Stroke) -> None:
        ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        ...

    def draw_image(self, image: Image.Image, x: float, y: float, width: float) -> None:
        ...

    def new_page(self) -> int:
        ...

    def select_page(self, index: int) -> None:
        ...

    @property
    def page_count(self) -> int:
        ...


@dataclass(frozen=True)
class TextOp:
    content: str
    size: float
    x: float
    y: float
    bold: bool


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: Stroke


@dataclass(frozen=True)
class ImageOp:
    image: Image.Image
    x: float
    y: float
    width: float
    height: float


DrawOp = TextOp | LineOp | ImageOp


@dataclass
class RecordingSurface:
    """Collects draw operations per page for later replay or inspection."""

    pages: list[list[DrawOp]] = field(default_factory=lambda: [[]])
    current: int = 0
    stroke: Stroke = HEADER_RULE
    _metrics: FPDF = field(default_factory=lambda: FPDF(unit="mm"), repr=False, compare=False)

    def draw_text(self, content: str, size: float, x: float, y: float, *, bold: bool = False) -> None:
        self.pages[self.current].append(TextOp(content, float(size), x, y, bold))

    def text_width(self, content: str, size: float, *, bold: bool = False) -> float:
        self._metrics.set_font(FONT_FAMILY, style="B" if bold else "", size=size)
        return float(self._metrics.get_string_width(content))

    def set_stroke(self, stroke: Stroke) -> None:
        self.stroke = stroke

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.pages[self.current].append(LineOp(x1, y1, x2, y2, self.stroke))

    def draw_image(self, image: Image.Image, x: float, y: float, width: float) -> None:
        height = width * image.height / image.width
        self.pages[self.current].append(ImageOp(image, x, y, width, height))

    def new_page(self) -> int:
        self.pages.append([])
        self.current = len(self.pages) - 1
        return self.current

    def select_page(self, index: int) -> None:
        if not 0 <= index < len(self.pages):
            raise IndexError(f"page {index} does not exist")
        self.current = index

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def texts(self, page: int | None = None) -> list[TextOp]:
        return [op for op in self._ops(page) if isinstance(op, TextOp)]

    def lines(self, page: int | None = None) -> list[LineOp]:
        return [op for op in self._ops(page) if isinstance(op, LineOp)]

    def images(self, page: int | None = None) -> list[ImageOp]:
        return [op for op in self._ops(page) if isinstance(op, ImageOp)]

    def _ops(self, page: int | None) -> list[DrawOp]:
        if page is not None:
            return list(self.pages[page])
        return [op for ops in self.pages for op in ops]


__all__ = [
    "DrawOp",
    "DrawingSurface",
    "FONT_FAMILY",
    "ImageOp",
    "LineOp",
    "RecordingSurface",
    "TextOp",
]
