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
from pathlib import Path
from unittest import mock

import typer

from signsheet.cli.core import common
from signsheet.cli.core.types import GenerateResult
from signsheet.cli.ui import THEME
from signsheet.cli.ui.summary import print_generate_summary, summary_rows
from signsheet.core.errors import (
    ConfigurationError,
    EncodingError,
    LogoError,
    OutputError,
    RosterError,
)


def _result(output_path: Path | None) -> GenerateResult:
    return GenerateResult(
        output_path=output_path,
        class_name="Club",
        date=date(2025, 12, 25),
        event_id="A1B2C3D4",
        mode="roster",
        page_count=1,
        row_count=53,
        row_height=5.68,
    )


class TestRunCli(unittest.TestCase):
    def test_errors_map_to_category_labels(self) -> None:
        cases = (
            (ConfigurationError("bad date"), "Configuration error"),
            (RosterError("bad roster"), "Roster error"),
            (LogoError("bad logo"), "Logo error"),
            (EncodingError("too long"), "QR encoding error"),
            (OutputError("disk full"), "Output error"),
            (ValueError("plain"), "Error"),
        )
        for exc, label in cases:
            with self.subTest(label=label):
                with mock.patch.object(common.console_err, "print") as print_mock:
                    with self.assertRaises(typer.Exit) as ctx:
                        common._run_cli(mock.Mock(side_effect=exc), debug=False)
                self.assertEqual(ctx.exception.exit_code, 2)
                message = print_mock.call_args.args[0]
                self.assertTrue(message.startswith(f"[red]{label}:[/red]"))

    def test_debug_reraises(self) -> None:
        with mock.patch.object(common, "install_rich_traceback") as install:
            with self.assertRaises(RosterError):
                common._run_cli(mock.Mock(side_effect=RosterError("x")), debug=True)
        install.assert_called_once_with(show_locals=True)

    def test_nonzero_int_result_exits(self) -> None:
        with self.assertRaises(typer.Exit) as ctx:
            common._run_cli(lambda: 3, debug=False)
        self.assertEqual(ctx.exception.exit_code, 3)
        self.assertEqual(common._run_cli(lambda: "ok", debug=False), "ok")

    def test_ctx_value(self) -> None:
        self.assertIsNone(common._ctx_value(mock.Mock(obj=None), "quiet"))
        self.assertTrue(common._ctx_value(mock.Mock(obj={"quiet": True}), "quiet"))


class TestGenerateSummary(unittest.TestCase):
    def test_rows(self) -> None:
        rows = dict(summary_rows(_result(Path("sheet.pdf"))))
        self.assertEqual(rows["Output"], "sheet.pdf")
        self.assertEqual(rows["Date"], "Thursday, December 25, 2025")
        self.assertEqual(rows["Event ID"], "A1B2C3D4")
        self.assertEqual(rows["Pages"], "1")
        self.assertEqual(rows["Rows"], "53 (5.7 mm)")

    def test_dry_run_has_no_output_row(self) -> None:
        self.assertNotIn("Output", dict(summary_rows(_result(None))))

    def test_quiet_prints_nothing(self) -> None:
        with mock.patch("signsheet.cli.ui.summary.console.print") as print_mock:
            print_generate_summary(_result(None), quiet=True)
            print_mock.assert_not_called()
            print_generate_summary(_result(None), quiet=False)
            print_mock.assert_called_once()

    def test_panel_style_marks_dry_run(self) -> None:
        cases = ((None, "panel.dry_run"), (Path("sheet.pdf"), "panel"))
        for output_path, style in cases:
            with self.subTest(output_path=output_path):
                with mock.patch("signsheet.cli.ui.summary.console.print") as print_mock:
                    print_generate_summary(_result(output_path), quiet=False)
                rendered = print_mock.call_args.args[0]
                self.assertEqual(rendered.border_style, style)
                self.assertIn(style, THEME.styles)


if __name__ == "__main__":
    unittest.main()
