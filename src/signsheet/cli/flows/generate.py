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

from ...config import AppConfig, load_app_config
from ...core.models import DocumentConfig, RosterMode, generate_event_id
from ...core.validation import (
    normalize_event_id,
    parse_date,
    require_non_empty_str,
    require_positive_int,
)
from ...render.document import LayoutResult, layout_document, render_attendance_pdf
from ...render.surface import RecordingSurface
from ..core.log import _warn
from ..core.types import GenerateArgs, GenerateResult
from ..io.logo import load_logo
from ..io.outputs import resolve_output_path
from ..io.roster import load_roster


def build_document_config(args: GenerateArgs, app_config: AppConfig) -> DocumentConfig:
    """Merge command-line arguments over config defaults and load inputs."""
    defaults = app_config.defaults
    class_name = require_non_empty_str(args.name, label="class name")
    teacher = args.teacher if args.teacher is not None else defaults.teacher
    location = args.location if args.location is not None else defaults.location
    rows = require_positive_int(
        args.rows if args.rows is not None else defaults.rows,
        label="rows",
    )
    mailing_list = args.mailing_list if args.mailing_list is not None else defaults.mailing_list
    mailing_rows = require_positive_int(
        args.mailing_rows if args.mailing_rows is not None else defaults.mailing_rows,
        label="mailing rows",
    )
    event_id = normalize_event_id(args.event_id) if args.event_id else generate_event_id()
    on = parse_date(args.date)

    roster = None
    if args.roster:
        roster = load_roster(args.roster)
        if args.rows is not None:
            _warn("--rows is ignored when --roster is given", quiet=args.quiet)
    logo = load_logo(args.logo) if args.logo else None

    return DocumentConfig(
        class_name=class_name,
        teacher=teacher.strip(),
        date=on,
        location=location.strip(),
        event_id=event_id,
        roster=roster,
        blank_rows=rows,
        mailing_list=mailing_list,
        mailing_rows=mailing_rows,
        logo=logo,
    )


def run_generate(args: GenerateArgs, *, app_config: AppConfig | None = None) -> GenerateResult:
    app_config = app_config or load_app_config(args.config)
    config = build_document_config(args, app_config)

    if args.dry_run:
        output_path = None
        layout = layout_document(config, RecordingSurface(), qr_config=app_config.qr_config)
    else:
        output_path = resolve_output_path(
            args.output,
            class_name=config.class_name,
            on=config.date,
            output_dir=app_config.defaults.output_dir,
        )
        if output_path.exists():
            _warn(f"overwriting {output_path}", quiet=args.quiet)
        layout = render_attendance_pdf(config, output_path, qr_config=app_config.qr_config)

    return GenerateResult(
        output_path=output_path,
        class_name=config.class_name,
        date=config.date,
        event_id=config.event_id,
        mode="roster" if isinstance(config.grid_mode, RosterMode) else "blank",
        page_count=layout.page_count,
        row_count=_row_count(layout),
        row_height=layout.grid.row_height,
    )


def _row_count(layout: LayoutResult) -> int:
    grid = layout.grid
    if grid.columns:
        return sum(column.rows for column in grid.columns)
    return sum(len(table.seats) for table in grid.tables)


__all__ = ["build_document_config", "run_generate"]
