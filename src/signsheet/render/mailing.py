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

from .geometry import FIELD_STROKE, HEADER_RULE, PageGeometry
from .surface import DrawingSurface

MAILING_TITLE = "JOIN MY MAILING LIST"

_TITLE_DROP = 6.0
_EMAIL_RATIO = 0.48
_NAME_LINE_END_RATIO = 0.45


def mailing_row_spacing(rows: int, geometry: PageGeometry) -> float:
    """Vertical pitch between signup rows inside the fixed-height section."""
    usable = geometry.mailing_height - geometry.mailing_header_space - geometry.mailing_padding
    return usable / rows


def draw_mailing_section(surface: DrawingSurface, rows: int, geometry: PageGeometry) -> float:
    """Draw the signup footer anchored to the bottom margin; return its top y."""
    x = geometry.left
    width = geometry.content_width
    top = geometry.margin + geometry.mailing_height

    surface.set_stroke(HEADER_RULE)
    surface.draw_line(x, top, x + width, top)

    title_w = surface.text_width(MAILING_TITLE, geometry.normal_size, bold=True)
    surface.draw_text(
        MAILING_TITLE,
        geometry.normal_size,
        x + (width - title_w) / 2,
        top - _TITLE_DROP,
        bold=True,
    )

    spacing = mailing_row_spacing(rows, geometry)
    email_x = x + width * _EMAIL_RATIO
    surface.set_stroke(FIELD_STROKE)
    y = top - geometry.mailing_header_space
    for _ in range(rows):
        surface.draw_text("Name:", geometry.small_size, x + 2.0, y)
        surface.draw_line(x + 15.0, y - 0.5, x + width * _NAME_LINE_END_RATIO, y - 0.5)
        surface.draw_text("Email:", geometry.small_size, email_x, y)
        surface.draw_line(email_x + 12.0, y - 0.5, x + width - 2.0, y - 0.5)
        y -= spacing
    return top


__all__ = ["MAILING_TITLE", "draw_mailing_section", "mailing_row_spacing"]
