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
from datetime import date
from pathlib import Path


@dataclass
class GenerateArgs:
    """Typed container for generate command arguments."""

    name: str = ""
    teacher: str | None = None
    date: str | None = None
    location: str | None = None
    rows: int | None = None
    mailing_list: bool | None = None
    mailing_rows: int | None = None
    output: str | None = None
    roster: str | None = None
    logo: str | None = None
    event_id: str | None = None
    dry_run: bool = False
    config: str | None = None
    quiet: bool = False


@dataclass(frozen=True)
class GenerateResult:
    output_path: Path | None
    class_name: str
    date: date
    event_id: str
    mode: str
    page_count: int
    row_count: int
    row_height: float
