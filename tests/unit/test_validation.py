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

import unittest
from datetime import date

from signsheet.core.errors import ConfigurationError
from signsheet.core.models import (
    BlankMode,
    PageCursor,
    RosterMode,
    generate_event_id,
    is_valid_event_id,
)
from signsheet.core.validation import (
    normalize_event_id,
    parse_date,
    require_non_empty_str,
    require_positive_int,
)
from tests.test_support import make_config


class TestEventId(unittest.TestCase):
    def test_generated_ids_are_valid(self) -> None:
        for _ in range(50):
            event_id = generate_event_id()
            self.assertEqual(len(event_id), 8)
            self.assertTrue(is_valid_event_id(event_id))

    def test_validation(self) -> None:
        cases = {
            "A1B2C3D4": True,
            "a1b2c3d4": False,
            "A1B2C3D": False,
            "A1B2C3D4E": False,
            "A1B2C3D4\n": False,
            "G1B2C3D4": False,
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(is_valid_event_id(value), expected)

    def test_normalize_uppercases_and_strips(self) -> None:
        self.assertEqual(normalize_event_id(" a1b2c3d4 "), "A1B2C3D4")
        with self.assertRaises(ConfigurationError):
            normalize_event_id("nope")


class TestDocumentConfig(unittest.TestCase):
    def test_grid_mode_follows_roster_presence(self) -> None:
        self.assertEqual(make_config(blank_rows=12).grid_mode, BlankMode(rows=12))
        self.assertEqual(make_config(roster=("A", "B")).grid_mode, RosterMode(names=("A", "B")))
        self.assertEqual(make_config(roster=()).grid_mode, RosterMode(names=()))


class TestPageCursor(unittest.TestCase):
    def test_moves_are_non_mutating(self) -> None:
        cursor = PageCursor(y=100.0)
        lower = cursor.down(12.0)
        self.assertEqual(cursor.y, 100.0)
        self.assertEqual(lower, PageCursor(y=88.0, page=0))
        self.assertEqual(lower.moved_to(50.0), PageCursor(y=50.0, page=0))


class TestValidation(unittest.TestCase):
    def test_parse_date(self) -> None:
        self.assertEqual(parse_date("2025-12-25"), date(2025, 12, 25))
        self.assertEqual(parse_date(" 2025-12-25 "), date(2025, 12, 25))
        self.assertEqual(parse_date(None, today=date(2024, 1, 2)), date(2024, 1, 2))

    def test_parse_date_rejects_other_formats(self) -> None:
        for value in ("12/25/2025", "2025-13-01", "tomorrow", ""):
            with self.subTest(value=value):
                with self.assertRaisesRegex(ConfigurationError, "expected YYYY-MM-DD"):
                    parse_date(value)

    def test_require_positive_int(self) -> None:
        self.assertEqual(require_positive_int(3, label="rows"), 3)
        for value in (0, -1, True, 2.5, "4"):
            with self.subTest(value=value):
                with self.assertRaisesRegex(ConfigurationError, "rows must be a positive integer"):
                    require_positive_int(value, label="rows")

    def test_require_non_empty_str(self) -> None:
        self.assertEqual(require_non_empty_str("  Club ", label="name"), "Club")
        with self.assertRaises(ConfigurationError):
            require_non_empty_str("   ", label="name")


if __name__ == "__main__":
    unittest.main()
