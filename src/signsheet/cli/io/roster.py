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

import json
from pathlib import Path

from ...core.errors import RosterError


def load_roster(path: str | Path) -> tuple[str, ...]:
    """Read a JSON array of ``{"name": ...}`` records, keeping file order.

    Names are used verbatim, so markers appended upstream (``"Ann Lee *"``)
    survive onto the sheet. Extra keys on a record are ignored.
    """
    source = Path(path).expanduser()
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RosterError(f"{source}: {exc}") from exc
    try:
        entries = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RosterError(f"invalid JSON in {source}: {exc}") from exc
    return parse_roster_entries(entries, source=str(source))


def parse_roster_entries(entries: object, *, source: str = "roster") -> tuple[str, ...]:
    if not isinstance(entries, list):
        raise RosterError(f"{source} must contain a JSON array of records")
    names: list[str] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise RosterError(f"{source}[{index}] must be an object with a name")
        name = entry.get("name")
        if not isinstance(name, str):
            raise RosterError(f"{source}[{index}].name must be a string")
        if not name.strip():
            raise RosterError(f"{source}[{index}].name must not be blank")
        names.append(name)
    return tuple(names)


__all__ = ["load_roster", "parse_roster_entries"]
