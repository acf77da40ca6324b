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

"""Attendance grid: roster checklist columns or paginated seating tables.

Roster mode fits on the first page. The name list is split into two columns
that share one row height, derived from the taller column and capped at
``PageGeometry.max_row_height``.

Blank mode uses a fixed row height and groups rows into four-seat tables.
A table never straddles a page boundary: page breaks are only taken between
tables, and continuation pages use the full usable height.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..core.models import BlankMode, GridMode, PageCursor, RosterMode
from .geometry import (
    CHECKBOX_STROKE,
    FIELD_STROKE,
    HEADER_RULE,
    ROW_SEPARATOR,
    SEAT_SEPARATOR,
    PageGeometry,
    capped_row_height,
)
from .surface import DrawingSurface

SEATS = ("North", "South", "East", "West")
SEAT_CHOICES = "N  S  E  W"
COLUMN_TITLES = ("NAME", "TABLE", "SEAT")

_TEXT_LIFT = 1.5
_CHECKBOX_SIZE = 3.0


@dataclass(frozen=True)
class RosterColumn:
    names: tuple[str, ...]
    x: float
    width: float
    row_height: float
    blank_rows: int

    @property
    def rows(self) -> int:
        return len(self.names) + self.blank_rows

    @property
    def height(self) -> float:
        return self.rows * self.row_height


@dataclass(frozen=True)
class TablePlacement:
    number: int
    page: int
    top: float
    seats: tuple[str, ...]


@dataclass(frozen=True)
class GridResult:
    cursor: PageCursor
    row_height: float
    columns: tuple[RosterColumn, ...] = ()
    tables: tuple[TablePlacement, ...] = ()


def split_roster(names: Sequence[str]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split names into left/right columns; the left column gets the extra name."""
    cut = math.ceil(len(names) / 2)
    return tuple(names[:cut]), tuple(names[cut:])


def plan_roster_columns(
    names: Sequence[str],
    start_y: float,
    geometry: PageGeometry,
    *,
    mailing_enabled: bool,
) -> tuple[RosterColumn, RosterColumn]:
    left_names, right_names = split_roster(names)
    walk_in = geometry.walk_in_rows
    tallest = max(len(left_names), len(right_names)) + walk_in
    available = (
        geometry.grid_available(start_y, mailing_enabled=mailing_enabled)
        - geometry.grid_header_height
    )
    row_height = capped_row_height(available, tallest, geometry.max_row_height)

    band = (geometry.content_width - geometry.column_gap) / 2
    left = RosterColumn(left_names, geometry.left, band, row_height, walk_in)
    right = RosterColumn(
        right_names,
        geometry.left + band + geometry.column_gap,
        band,
        row_height,
        walk_in,
    )
    return left, right


def plan_tables(
    rows: int,
    cursor: PageCursor,
    geometry: PageGeometry,
    *,
    mailing_enabled: bool,
) -> list[TablePlacement]:
    """Assign each four-seat table a page and top offset."""
    per_table = geometry.seats_per_table
    row_height = geometry.seat_row_height
    remaining = geometry.grid_available(cursor.y, mailing_enabled=mailing_enabled)
    y, page = cursor.y, cursor.page

    tables: list[TablePlacement] = []
    for number in range(1, math.ceil(rows / per_table) + 1):
        if remaining < geometry.table_height:
            page += 1
            y = geometry.top
            remaining = geometry.usable_height
        seat_count = min(per_table, rows - (number - 1) * per_table)
        tables.append(TablePlacement(number, page, y, SEATS[:seat_count]))
        y -= seat_count * row_height
        remaining -= seat_count * row_height
    return tables


def draw_grid(
    surface: DrawingSurface,
    mode: GridMode,
    cursor: PageCursor,
    geometry: PageGeometry,
    *,
    mailing_enabled: bool,
) -> GridResult:
    if isinstance(mode, RosterMode):
        return _draw_roster(surface, mode, cursor, geometry, mailing_enabled=mailing_enabled)
    if isinstance(mode, BlankMode):
        return _draw_blank(surface, mode, cursor, geometry, mailing_enabled=mailing_enabled)
    raise TypeError(f"unsupported grid mode: {type(mode).__name__}")


def _draw_roster(
    surface: DrawingSurface,
    mode: RosterMode,
    cursor: PageCursor,
    geometry: PageGeometry,
    *,
    mailing_enabled: bool,
) -> GridResult:
    columns = plan_roster_columns(
        mode.names,
        cursor.y,
        geometry,
        mailing_enabled=mailing_enabled,
    )
    for column in columns:
        y = cursor.y
        _draw_column_header(surface, y, column, geometry)
        y -= geometry.grid_header_height
        for name in column.names:
            _draw_name_row(surface, y, column, name, geometry)
            y -= column.row_height
        for _ in range(column.blank_rows):
            _draw_walk_in_row(surface, y, column, geometry)
            y -= column.row_height

    tallest = max(column.height for column in columns)
    end = cursor.down(geometry.grid_header_height + tallest)
    return GridResult(cursor=end, row_height=columns[0].row_height, columns=columns)


def _draw_blank(
    surface: DrawingSurface,
    mode: BlankMode,
    cursor: PageCursor,
    geometry: PageGeometry,
    *,
    mailing_enabled: bool,
) -> GridResult:
    row_height = geometry.seat_row_height
    tables = plan_tables(mode.rows, cursor, geometry, mailing_enabled=mailing_enabled)
    page = cursor.page
    end = cursor
    for table in tables:
        while page < table.page:
            page = surface.new_page()
        y = table.top
        last_index = geometry.seats_per_table - 1
        for index, seat in enumerate(table.seats):
            _draw_seat_row(
                surface,
                y,
                table.number,
                seat,
                geometry,
                first=index == 0,
                last=index == last_index,
            )
            y -= row_height
        end = PageCursor(y=y, page=page)
    return GridResult(cursor=end, row_height=row_height, tables=tuple(tables))


def _draw_column_header(
    surface: DrawingSurface,
    y: float,
    column: RosterColumn,
    geometry: PageGeometry,
) -> None:
    name_x, table_x, seat_x = geometry.column_bands(column.x, column.width)
    height = geometry.grid_header_height
    text_y = y - height + _TEXT_LIFT
    name_title, table_title, seat_title = COLUMN_TITLES
    surface.draw_text(name_title, geometry.normal_size, name_x + 2.0, text_y, bold=True)
    surface.draw_text(table_title, geometry.small_size, table_x + 2.0, text_y, bold=True)
    surface.draw_text(seat_title, geometry.small_size, seat_x + 2.0, text_y, bold=True)
    surface.set_stroke(HEADER_RULE)
    surface.draw_line(column.x, y - height, column.x + column.width, y - height)


def _draw_name_row(
    surface: DrawingSurface,
    y: float,
    column: RosterColumn,
    name: str,
    geometry: PageGeometry,
) -> None:
    name_x, table_x, seat_x = geometry.column_bands(column.x, column.width)
    table_w = column.width * geometry.table_col_ratio
    text_y = y - column.row_height + _TEXT_LIFT

    surface.set_stroke(CHECKBOX_STROKE)
    _draw_checkbox(surface, name_x + 1.0, text_y - 0.5, _CHECKBOX_SIZE)
    surface.draw_text(name, geometry.normal_size, name_x + _CHECKBOX_SIZE + 3.0, text_y)
    surface.set_stroke(FIELD_STROKE)
    surface.draw_line(table_x + 5.0, text_y - 0.5, table_x + table_w - 3.0, text_y - 0.5)
    surface.draw_text(SEAT_CHOICES, geometry.small_size, seat_x + 3.0, text_y)
    _draw_row_separator(surface, y - column.row_height, column)


def _draw_walk_in_row(
    surface: DrawingSurface,
    y: float,
    column: RosterColumn,
    geometry: PageGeometry,
) -> None:
    name_x, table_x, seat_x = geometry.column_bands(column.x, column.width)
    table_w = column.width * geometry.table_col_ratio
    text_y = y - column.row_height + _TEXT_LIFT

    surface.set_stroke(FIELD_STROKE)
    surface.draw_line(name_x + 2.0, text_y - 0.5, table_x - 2.0, text_y - 0.5)
    surface.draw_line(table_x + 5.0, text_y - 0.5, table_x + table_w - 3.0, text_y - 0.5)
    surface.draw_text(SEAT_CHOICES, geometry.small_size, seat_x + 3.0, text_y)
    _draw_row_separator(surface, y - column.row_height, column)


def _draw_row_separator(surface: DrawingSurface, y: float, column: RosterColumn) -> None:
    surface.set_stroke(ROW_SEPARATOR)
    surface.draw_line(column.x, y, column.x + column.width, y)


def _draw_seat_row(
    surface: DrawingSurface,
    y: float,
    table_number: int,
    seat: str,
    geometry: PageGeometry,
    *,
    first: bool,
    last: bool,
) -> None:
    row_height = geometry.seat_row_height
    text_y = y - row_height / 2 - _TEXT_LIFT
    seat_x = geometry.left + geometry.table_label_w

    if first:
        surface.draw_text(f"Table {table_number}", geometry.normal_size, geometry.left + 2.0, text_y)
    surface.draw_text(seat, geometry.normal_size, seat_x + 2.0, text_y)

    # West closes the table with a full-width rule
    surface.set_stroke(SEAT_SEPARATOR)
    line_start = geometry.left if last else seat_x
    surface.draw_line(line_start, y - row_height, geometry.right, y - row_height)


def _draw_checkbox(surface: DrawingSurface, x: float, y: float, size: float) -> None:
    surface.draw_line(x, y, x + size, y)
    surface.draw_line(x + size, y, x + size, y + size)
    surface.draw_line(x + size, y + size, x, y + size)
    surface.draw_line(x, y + size, x, y)


__all__ = [
    "COLUMN_TITLES",
    "GridResult",
    "RosterColumn",
    "SEATS",
    "SEAT_CHOICES",
    "TablePlacement",
    "draw_grid",
    "plan_roster_columns",
    "plan_tables",
    "split_roster",
]
