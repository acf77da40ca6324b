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

import typer

from ..core.common import _ctx_value, _run_cli
from ..core.types import GenerateArgs
from ..flows.generate import run_generate
from ..ui.summary import print_generate_summary

_GENERATE_HELP = (
    "Generate a printable attendance sheet (PDF).\n\n"
    "Without --roster the sheet has blank seating tables of four rows each;\n"
    "with --roster it lists the given names as a two-column checklist.\n\n"
    "Examples:\n"
    '  signsheet generate -n "Tuesday Duplicate"\n'
    '  signsheet generate -n "Beginners" --roster students.json --no-mailing-list\n'
    '  signsheet generate -n "Club Night" -d 2025-12-25 --logo https://example.org/logo.png\n'
)


def register(app: typer.Typer) -> None:
    app.command(help=_GENERATE_HELP)(generate)


def generate(
    ctx: typer.Context,
    name: str = typer.Option(
        ...,
        "--name",
        "-n",
        help="Class or event name.",
        rich_help_panel="Class",
    ),
    teacher: str | None = typer.Option(
        None,
        "--teacher",
        "-t",
        help="Instructor name (default from config).",
        rich_help_panel="Class",
    ),
    date: str | None = typer.Option(
        None,
        "--date",
        "-d",
        help="Class date as YYYY-MM-DD (default: today).",
        rich_help_panel="Class",
    ),
    location: str | None = typer.Option(
        None,
        "--location",
        "-l",
        help="Location line shown under the instructor.",
        rich_help_panel="Class",
    ),
    event_id: str | None = typer.Option(
        None,
        "--event-id",
        help="Reuse an existing 8-character event id instead of generating one.",
        rich_help_panel="Class",
    ),
    rows: int | None = typer.Option(
        None,
        "--rows",
        "-r",
        help="Number of blank sign-in rows (ignored with --roster).",
        rich_help_panel="Layout",
    ),
    mailing_list: bool | None = typer.Option(
        None,
        "--mailing-list/--no-mailing-list",
        help="Include the mailing list signup section (default from config).",
        show_default=False,
        rich_help_panel="Layout",
    ),
    mailing_rows: int | None = typer.Option(
        None,
        "--mailing-rows",
        help="Number of mailing list rows.",
        rich_help_panel="Layout",
    ),
    roster: str | None = typer.Option(
        None,
        "--roster",
        help='JSON roster file: an array of {"name": ...} records.',
        rich_help_panel="Inputs",
    ),
    logo: str | None = typer.Option(
        None,
        "--logo",
        help="Logo image path or http(s) URL.",
        rich_help_panel="Inputs",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (default: attendance-<date>-<name>.pdf).",
        rich_help_panel="Outputs",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Lay out the sheet and print the summary without writing a file.",
        rich_help_panel="Outputs",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))
    args = GenerateArgs(
        name=name,
        teacher=teacher,
        date=date,
        location=location,
        rows=rows,
        mailing_list=mailing_list,
        mailing_rows=mailing_rows,
        output=output,
        roster=roster,
        logo=logo,
        event_id=event_id,
        dry_run=dry_run,
        config=_ctx_value(ctx, "config"),
        quiet=quiet_value,
    )

    def _run() -> None:
        result = run_generate(args)
        print_generate_summary(result, quiet=quiet_value)

    _run_cli(_run, debug=debug_value)
