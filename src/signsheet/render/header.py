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

from datetime import date

from PIL import Image

from ..core.models import DocumentConfig
from .compositor import prepare_logo
from .geometry import PageGeometry
from .surface import DrawingSurface

TITLE = "CLASS ATTENDANCE"

# Baseline offsets below the header top, in mm
_TITLE_OFFSET = 6.0
_CLASS_OFFSET = 14.0
_DATE_OFFSET = 20.0
_TEACHER_OFFSET = 26.0
_LOCATION_STEP = 5.0
_CAPTION_OFFSET = 2.0


def format_long_date(value: date) -> str:
    """Format as e.g. ``Thursday, December 25, 2025``."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def header_lines(config: DocumentConfig) -> list[tuple[str, str, float]]:
    """Return (text, role, offset) for the text block beside the QR code."""
    lines = [
        (TITLE, "title", _TITLE_OFFSET),
        (config.class_name, "class", _CLASS_OFFSET),
        (format_long_date(config.date), "body", _DATE_OFFSET),
        (f"Instructor: {config.teacher}", "body", _TEACHER_OFFSET),
    ]
    if config.location:
        lines.append((f"Location: {config.location}", "body", _TEACHER_OFFSET + _LOCATION_STEP))
    return lines


def draw_header(
    surface: DrawingSurface,
    config: DocumentConfig,
    qr_image: Image.Image,
    start_y: float,
    geometry: PageGeometry,
) -> float:
    """Draw the header band and return the y offset where the grid begins."""
    qr_size = geometry.qr_size
    surface.draw_image(qr_image, geometry.left, start_y - qr_size, qr_size)

    text_x = geometry.left + qr_size + geometry.qr_text_gap
    sizes = {
        "title": (geometry.title_size, True),
        "class": (geometry.header_size, True),
        "body": (geometry.normal_size, False),
    }
    for text, role, offset in header_lines(config):
        size, bold = sizes[role]
        surface.draw_text(text, size, text_x, start_y - offset, bold=bold)

    if config.logo is not None:
        placed = prepare_logo(config.logo, geometry.logo_max_w, qr_size)
        surface.draw_image(
            placed.image,
            geometry.right - placed.width_mm,
            start_y - placed.height_mm,
            placed.width_mm,
        )

    caption = f"ID: {config.event_id}"
    caption_w = surface.text_width(caption, geometry.small_size)
    surface.draw_text(
        caption,
        geometry.small_size,
        geometry.right - caption_w,
        start_y - qr_size - _CAPTION_OFFSET,
    )

    return start_y - qr_size - geometry.header_gap


__all__ = ["TITLE", "draw_header", "format_long_date", "header_lines"]
