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

from dataclasses import dataclass
from pathlib import Path

from ..core.models import DocumentConfig, PageCursor
from ..core.validation import require_positive_int
from ..encoding.qr_payloads import payload_raster
from ..qr.codec import QrConfig
from .geometry import DEFAULT_GEOMETRY, PageGeometry
from .grid import GridResult, draw_grid
from .header import draw_header
from .mailing import draw_mailing_section
from .pdf_render import PdfMetadata, write_pdf
from .surface import DrawingSurface, RecordingSurface


@dataclass(frozen=True)
class LayoutResult:
    page_count: int
    grid: GridResult
    grid_top: float
    mailing_top: float | None = None


def layout_document(
    config: DocumentConfig,
    surface: DrawingSurface,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    *,
    qr_config: QrConfig | None = None,
) -> LayoutResult:
    """Lay out header, grid and optional mailing footer onto ``surface``."""
    _validate_config(config)

    cursor = PageCursor(y=geometry.top)
    qr_image = payload_raster(config, qr_config=qr_config)
    grid_top = draw_header(surface, config, qr_image, cursor.y, geometry)
    cursor = cursor.moved_to(grid_top)

    grid = draw_grid(
        surface,
        config.grid_mode,
        cursor,
        geometry,
        mailing_enabled=config.mailing_list,
    )

    mailing_top = None
    if config.mailing_list:
        # the footer always belongs to the first page, even after the grid paginates
        surface.select_page(0)
        mailing_top = draw_mailing_section(surface, config.mailing_rows, geometry)

    return LayoutResult(
        page_count=surface.page_count,
        grid=grid,
        grid_top=grid_top,
        mailing_top=mailing_top,
    )


def pdf_metadata(config: DocumentConfig) -> PdfMetadata:
    return PdfMetadata(author=config.teacher, subject=config.class_name, created=config.date)


def render_attendance_pdf(
    config: DocumentConfig,
    output_path: str | Path,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    *,
    qr_config: QrConfig | None = None,
) -> LayoutResult:
    surface = RecordingSurface()
    result = layout_document(config, surface, geometry, qr_config=qr_config)
    write_pdf(surface, output_path, geometry, pdf_metadata(config))
    return result


def _validate_config(config: DocumentConfig) -> None:
    if config.roster is None:
        require_positive_int(config.blank_rows, label="rows")
    if config.mailing_list:
        require_positive_int(config.mailing_rows, label="mailing rows")


__all__ = ["LayoutResult", "layout_document", "pdf_metadata", "render_attendance_pdf"]
