#!/usr/bin/env python3
from __future__ import annotations

from ...render.header import format_long_date
from ..core.types import GenerateResult
from . import build_kv_table, console, panel


def summary_rows(result: GenerateResult) -> list[tuple[str, str]]:
    rows = [
        ("Class", result.class_name),
        ("Date", format_long_date(result.date)),
        ("Event ID", result.event_id),
        ("Mode", result.mode),
        ("Pages", str(result.page_count)),
        ("Rows", f"{result.row_count} ({result.row_height:.1f} mm)"),
    ]
    if result.output_path is not None:
        rows.insert(0, ("Output", str(result.output_path)))
    return rows


def print_generate_summary(result: GenerateResult, *, quiet: bool) -> None:
    if quiet:
        return
    if result.output_path is None:
        title, style = "Dry run (nothing written)", "panel.dry_run"
    else:
        title, style = "Generated", "panel"
    console.print(panel(title, build_kv_table(summary_rows(result)), style=style))
