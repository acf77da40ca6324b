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

import re
from datetime import date
from pathlib import Path

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    return _SLUG_RE.sub("-", text.lower()).strip("-")


def default_output_name(class_name: str, on: date) -> str:
    slug = slugify(class_name)
    stem = f"attendance-{on.isoformat()}"
    if slug:
        stem = f"{stem}-{slug}"
    return f"{stem}.pdf"


def resolve_output_path(
    output: str | None,
    *,
    class_name: str,
    on: date,
    output_dir: str | None = None,
) -> Path:
    if output:
        return Path(output).expanduser()
    base = Path(output_dir).expanduser() if output_dir else Path.cwd()
    return base / default_output_name(class_name, on)


__all__ = ["default_output_name", "resolve_output_path", "slugify"]
