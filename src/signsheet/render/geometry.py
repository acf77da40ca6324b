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

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance for the column ratio sum
RATIO_EPSILON = 1e-6

Rgb = tuple[float, float, float]


@dataclass(frozen=True)
class Stroke:
    color: Rgb
    width_pt: float


HEADER_RULE = Stroke(color=(0.0, 0.0, 0.0), width_pt=0.5)
CHECKBOX_STROKE = Stroke(color=(0.0, 0.0, 0.0), width_pt=0.4)
FIELD_STROKE = Stroke(color=(0.0, 0.0, 0.0), width_pt=0.3)
ROW_SEPARATOR = Stroke(color=(0.8, 0.8, 0.8), width_pt=0.3)
SEAT_SEPARATOR = Stroke(color=(0.7, 0.7, 0.7), width_pt=0.3)


@dataclass(frozen=True)
class PageGeometry:
    """Physical layout constants in millimetres; font sizes in points."""

    page_w: float = 215.9
    page_h: float = 279.4
    margin: float = 15.0

    qr_size: float = 30.0
    qr_text_gap: float = 8.0
    header_gap: float = 8.0
    logo_max_w: float = 50.0

    max_row_height: float = 7.0
    seat_row_height: float = 12.0
    grid_header_height: float = 6.0
    grid_buffer: float = 5.0
    column_gap: float = 6.0
    walk_in_rows: int = 8
    seats_per_table: int = 4
    table_label_w: float = 22.0

    mailing_height: float = 47.0
    mailing_header_space: float = 10.0
    mailing_padding: float = 3.0

    title_size: float = 18.0
    header_size: float = 12.0
    normal_size: float = 10.0
    small_size: float = 8.0

    name_col_ratio: float = 0.60
    table_col_ratio: float = 0.15
    seat_col_ratio: float = 0.25

    def __post_init__(self) -> None:
        total = self.name_col_ratio + self.table_col_ratio + self.seat_col_ratio
        if not math.isclose(total, 1.0, abs_tol=RATIO_EPSILON):
            raise ValueError(f"column ratios must sum to 1.0 (got {total})")
        if self.content_width <= 0 or self.usable_height <= 0:
            raise ValueError("margins leave no usable page area")

    @property
    def content_width(self) -> float:
        return self.page_w - 2 * self.margin

    @property
    def usable_height(self) -> float:
        return self.page_h - 2 * self.margin

    @property
    def top(self) -> float:
        return self.page_h - self.margin

    @property
    def left(self) -> float:
        return self.margin

    @property
    def right(self) -> float:
        return self.margin + self.content_width

    @property
    def table_height(self) -> float:
        return self.seat_row_height * self.seats_per_table

    def mailing_reservation(self, enabled: bool) -> float:
        # Fixed regardless of the configured row count.
        return self.mailing_height if enabled else 0.0

    def grid_available(self, start_y: float, *, mailing_enabled: bool) -> float:
        """Height between start_y and the first-page floor above the mailing block."""
        return start_y - self.margin - self.mailing_reservation(mailing_enabled) - self.grid_buffer

    def column_bands(self, x: float, width: float) -> tuple[float, float, float]:
        """Return the x offsets of the name, table and seat columns inside a band."""
        table_x = x + width * self.name_col_ratio
        seat_x = table_x + width * self.table_col_ratio
        return x, table_x, seat_x


DEFAULT_GEOMETRY = PageGeometry()


def capped_row_height(available: float, rows: int, cap: float) -> float:
    """Share available height between rows, never exceeding cap or dropping below 0."""
    if rows <= 0:
        return cap
    return max(0.0, min(cap, available / rows))


def fit_within_box(
    width_px: int,
    height_px: int,
    max_w: float,
    max_h: float,
) -> tuple[float, float]:
    """Scale a width/height pair into a box, preserving aspect ratio.

    Equal aspect ratios resolve as width-constrained.
    """
    if width_px <= 0 or height_px <= 0:
        raise ValueError("image dimensions must be positive")
    aspect = width_px / height_px
    if max_w / max_h > aspect:
        return max_h * aspect, max_h
    return max_w, max_w / aspect


def pt_to_mm(value_pt: float) -> float:
    return float(value_pt) * 25.4 / 72.0


__all__ = [
    "CHECKBOX_STROKE",
    "DEFAULT_GEOMETRY",
    "FIELD_STROKE",
    "HEADER_RULE",
    "PageGeometry",
    "ROW_SEPARATOR",
    "SEAT_SEPARATOR",
    "Stroke",
    "capped_row_height",
    "fit_within_box",
    "pt_to_mm",
]
