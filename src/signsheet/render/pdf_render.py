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
from datetime import date, datetime, time, timezone
from pathlib import Path

from fpdf import FPDF
from fpdf.errors import FPDFException

from ..core.errors import OutputError
from .geometry import PageGeometry, Stroke, pt_to_mm
from .surface import FONT_FAMILY, ImageOp, LineOp, RecordingSurface, TextOp

DOCUMENT_TITLE = "Attendance Sheet"
CREATOR = "signsheet"


@dataclass(frozen=True)
class PdfMetadata:
    title: str = DOCUMENT_TITLE
    author: str = ""
    subject: str = ""
    created: date | None = None


def build_pdf(recording: RecordingSurface, geometry: PageGeometry, metadata: PdfMetadata) -> FPDF:
    """Replay recorded pages onto an FPDF document (top-left origin)."""
    pdf = FPDF(unit="mm", format=(geometry.page_w, geometry.page_h))
    pdf.set_auto_page_break(False)
    pdf.set_title(metadata.title)
    pdf.set_creator(CREATOR)
    if metadata.author:
        pdf.set_author(metadata.author)
    if metadata.subject:
        pdf.set_subject(metadata.subject)
    if metadata.created is not None:
        pdf.set_creation_date(datetime.combine(metadata.created, time(), tzinfo=timezone.utc))

    page_h = geometry.page_h
    for ops in recording.pages:
        pdf.add_page()
        active: Stroke | None = None
        for op in ops:
            if isinstance(op, TextOp):
                pdf.set_font(FONT_FAMILY, style="B" if op.bold else "", size=op.size)
                pdf.text(op.x, page_h - op.y, op.content)
            elif isinstance(op, LineOp):
                if op.stroke != active:
                    _apply_stroke(pdf, op.stroke)
                    active = op.stroke
                pdf.line(op.x1, page_h - op.y1, op.x2, page_h - op.y2)
            elif isinstance(op, ImageOp):
                pdf.image(op.image, x=op.x, y=page_h - op.y - op.height, w=op.width, h=op.height)
    return pdf


def write_pdf(
    recording: RecordingSurface,
    output_path: str | Path,
    geometry: PageGeometry,
    metadata: PdfMetadata,
) -> Path:
    path = Path(output_path)
    try:
        pdf = build_pdf(recording, geometry, metadata)
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        pdf.output(str(path))
    except FPDFException as exc:
        raise OutputError(f"failed to build PDF: {exc}") from exc
    except OSError as exc:
        raise OutputError(f"failed to write {path}: {exc}") from exc
    return path


def _apply_stroke(pdf: FPDF, stroke: Stroke) -> None:
    r, g, b = (round(channel * 255) for channel in stroke.color)
    pdf.set_draw_color(r, g, b)
    pdf.set_line_width(pt_to_mm(stroke.width_pt))


__all__ = ["DOCUMENT_TITLE", "PdfMetadata", "build_pdf", "write_pdf"]
