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

import math
import unittest

from signsheet.core.models import BlankMode, PageCursor, RosterMode
from signsheet.render.geometry import CHECKBOX_STROKE, DEFAULT_GEOMETRY, SEAT_SEPARATOR
from signsheet.render.grid import (
    SEATS,
    draw_grid,
    plan_roster_columns,
    plan_tables,
    split_roster,
)
from signsheet.render.surface import RecordingSurface
from tests.test_support import make_names

GRID_TOP = 226.4
FIRST_PAGE_FLOOR = 67.0  # margin + mailing block + buffer


class TestSplitRoster(unittest.TestCase):
    def test_thirty_seven_names(self) -> None:
        left, right = split_roster(make_names(37))
        self.assertEqual(len(left), 19)
        self.assertEqual(len(right), 18)
        self.assertEqual(left + right, make_names(37))

    def test_counts_for_all_sizes(self) -> None:
        for count in range(0, 80):
            with self.subTest(count=count):
                left, right = split_roster(make_names(count))
                self.assertEqual(len(left), math.ceil(count / 2))
                self.assertEqual(len(right), count // 2)


class TestPlanRosterColumns(unittest.TestCase):
    def test_columns_share_row_height(self) -> None:
        left, right = plan_roster_columns(
            make_names(37), GRID_TOP, DEFAULT_GEOMETRY, mailing_enabled=True
        )
        # 153.4 mm shared by 19 names + 8 walk-in rows
        self.assertAlmostEqual(left.row_height, 153.4 / 27)
        self.assertEqual(left.row_height, right.row_height)
        self.assertEqual(left.blank_rows, 8)
        self.assertEqual(right.blank_rows, 8)

    def test_columns_split_content_width(self) -> None:
        left, right = plan_roster_columns(
            make_names(10), GRID_TOP, DEFAULT_GEOMETRY, mailing_enabled=True
        )
        self.assertAlmostEqual(left.x, 15.0)
        self.assertAlmostEqual(left.width, right.width)
        self.assertAlmostEqual(right.x + right.width, DEFAULT_GEOMETRY.right)
        self.assertAlmostEqual(right.x - (left.x + left.width), DEFAULT_GEOMETRY.column_gap)

    def test_short_roster_capped_at_max_row_height(self) -> None:
        for names in ((), make_names(4)):
            with self.subTest(count=len(names)):
                left, _right = plan_roster_columns(
                    names, GRID_TOP, DEFAULT_GEOMETRY, mailing_enabled=False
                )
                self.assertEqual(left.row_height, DEFAULT_GEOMETRY.max_row_height)

    def test_row_height_never_exceeds_cap(self) -> None:
        for count in range(0, 120, 7):
            for mailing in (True, False):
                with self.subTest(count=count, mailing=mailing):
                    left, right = plan_roster_columns(
                        make_names(count), GRID_TOP, DEFAULT_GEOMETRY, mailing_enabled=mailing
                    )
                    self.assertLessEqual(left.row_height, DEFAULT_GEOMETRY.max_row_height)
                    self.assertEqual(left.row_height, right.row_height)


class TestPlanTables(unittest.TestCase):
    def test_thirty_two_rows_with_mailing(self) -> None:
        tables = plan_tables(32, PageCursor(GRID_TOP), DEFAULT_GEOMETRY, mailing_enabled=True)
        self.assertEqual(len(tables), 8)
        self.assertEqual([table.page for table in tables], [0, 0, 0, 1, 1, 1, 1, 1])
        self.assertAlmostEqual(tables[3].top, DEFAULT_GEOMETRY.top)

    def test_thirty_two_rows_without_mailing(self) -> None:
        tables = plan_tables(32, PageCursor(GRID_TOP), DEFAULT_GEOMETRY, mailing_enabled=False)
        self.assertEqual([table.page for table in tables], [0, 0, 0, 0, 1, 1, 1, 1])

    def test_partial_last_table(self) -> None:
        tables = plan_tables(10, PageCursor(GRID_TOP), DEFAULT_GEOMETRY, mailing_enabled=True)
        self.assertEqual([len(table.seats) for table in tables], [4, 4, 2])
        self.assertEqual(tables[-1].seats, ("North", "South"))
        self.assertEqual([table.number for table in tables], [1, 2, 3])

    def test_single_row(self) -> None:
        tables = plan_tables(1, PageCursor(GRID_TOP), DEFAULT_GEOMETRY, mailing_enabled=True)
        self.assertEqual(len(tables), 1)
        self.assertEqual(tables[0].seats, SEATS[:1])

    def test_tables_never_straddle_page_boundary(self) -> None:
        geometry = DEFAULT_GEOMETRY
        for rows in range(1, 130):
            for mailing in (True, False):
                tables = plan_tables(rows, PageCursor(GRID_TOP), geometry, mailing_enabled=mailing)
                first_floor = geometry.margin + geometry.mailing_reservation(mailing)
                first_floor += geometry.grid_buffer
                with self.subTest(rows=rows, mailing=mailing):
                    self.assertEqual(sum(len(table.seats) for table in tables), rows)
                    for table in tables:
                        bottom = table.top - len(table.seats) * geometry.seat_row_height
                        floor = first_floor if table.page == 0 else geometry.margin
                        self.assertGreaterEqual(bottom, floor - 1e-9)

    def test_pages_are_monotonic(self) -> None:
        tables = plan_tables(200, PageCursor(GRID_TOP), DEFAULT_GEOMETRY, mailing_enabled=True)
        pages = [table.page for table in tables]
        self.assertEqual(pages, sorted(pages))
        # 3 tables on page 1, then 5 per continuation page
        self.assertEqual(pages[-1], 10)


class TestDrawGrid(unittest.TestCase):
    def test_roster_mode_single_page(self) -> None:
        names = make_names(37)
        surface = RecordingSurface()
        result = draw_grid(
            surface,
            RosterMode(names=names),
            PageCursor(GRID_TOP),
            DEFAULT_GEOMETRY,
            mailing_enabled=True,
        )
        self.assertEqual(surface.page_count, 1)
        contents = {op.content for op in surface.texts()}
        self.assertTrue(set(names) <= contents)
        checkbox_edges = [op for op in surface.lines() if op.stroke == CHECKBOX_STROKE]
        self.assertEqual(len(checkbox_edges), 4 * len(names))
        self.assertEqual(len(result.columns), 2)
        self.assertAlmostEqual(result.cursor.y, FIRST_PAGE_FLOOR)

    def test_roster_mode_empty_list(self) -> None:
        surface = RecordingSurface()
        result = draw_grid(
            surface,
            RosterMode(names=()),
            PageCursor(GRID_TOP),
            DEFAULT_GEOMETRY,
            mailing_enabled=False,
        )
        self.assertEqual(surface.page_count, 1)
        self.assertEqual([column.rows for column in result.columns], [8, 8])
        headers = [op for op in surface.texts() if op.content == "NAME"]
        self.assertEqual(len(headers), 2)

    def test_roster_names_kept_verbatim(self) -> None:
        surface = RecordingSurface()
        draw_grid(
            surface,
            RosterMode(names=("Ann Lee *", "Bo Park")),
            PageCursor(GRID_TOP),
            DEFAULT_GEOMETRY,
            mailing_enabled=True,
        )
        self.assertIn("Ann Lee *", [op.content for op in surface.texts()])

    def test_blank_mode_paginates(self) -> None:
        surface = RecordingSurface()
        result = draw_grid(
            surface,
            BlankMode(rows=32),
            PageCursor(GRID_TOP),
            DEFAULT_GEOMETRY,
            mailing_enabled=True,
        )
        self.assertEqual(surface.page_count, 2)
        self.assertEqual(result.cursor.page, 1)
        first_page = [op.content for op in surface.texts(0)]
        second_page = [op.content for op in surface.texts(1)]
        self.assertEqual([c for c in first_page if c.startswith("Table")], ["Table 1", "Table 2", "Table 3"])
        self.assertIn("Table 4", second_page)
        self.assertEqual(first_page.count("North"), 3)

    def test_seat_separators_mark_table_boundaries(self) -> None:
        surface = RecordingSurface()
        draw_grid(
            surface,
            BlankMode(rows=6),
            PageCursor(GRID_TOP),
            DEFAULT_GEOMETRY,
            mailing_enabled=True,
        )
        separators = [op for op in surface.lines(0) if op.stroke == SEAT_SEPARATOR]
        seat_x = DEFAULT_GEOMETRY.left + DEFAULT_GEOMETRY.table_label_w
        left = DEFAULT_GEOMETRY.left
        # West closes table 1 at full width; the partial table 2 has no closing rule
        self.assertEqual(
            [op.x1 for op in separators],
            [seat_x, seat_x, seat_x, left, seat_x, seat_x],
        )
        for op in separators:
            self.assertEqual(op.x2, DEFAULT_GEOMETRY.right)
            self.assertEqual(op.y1, op.y2)

    def test_blank_mode_many_rows(self) -> None:
        surface = RecordingSurface()
        draw_grid(
            surface,
            BlankMode(rows=200),
            PageCursor(GRID_TOP),
            DEFAULT_GEOMETRY,
            mailing_enabled=True,
        )
        self.assertEqual(surface.page_count, 11)

    def test_identical_inputs_give_identical_geometry(self) -> None:
        runs = []
        for _ in range(2):
            surface = RecordingSurface()
            draw_grid(
                surface,
                BlankMode(rows=27),
                PageCursor(GRID_TOP),
                DEFAULT_GEOMETRY,
                mailing_enabled=True,
            )
            runs.append(surface.pages)
        self.assertEqual(runs[0], runs[1])

    def test_unsupported_mode(self) -> None:
        with self.assertRaises(TypeError):
            draw_grid(
                RecordingSurface(),
                "bogus",  # type: ignore[arg-type]
                PageCursor(GRID_TOP),
                DEFAULT_GEOMETRY,
                mailing_enabled=True,
            )


if __name__ == "__main__":
    unittest.main()
