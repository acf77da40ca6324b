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

from ...config import init_user_config, resolve_config_path
from ..core.common import _ctx_value, _run_cli
from ..core.log import _note
from ..ui import console

_CONFIG_HELP = (
    "Show the active TOML config path.\n\n"
    "Lookup order: --config, $SIGNSHEET_CONFIG, the user config file,\n"
    "then the packaged defaults.\n\n"
    "Examples:\n"
    "  signsheet config\n"
    "  signsheet config --init\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    init: bool = typer.Option(
        False,
        "--init",
        help="Copy the packaged defaults into the user config directory.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value = _ctx_value(ctx, "config")
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        if init:
            path = init_user_config()
            _note(f"User config ready at {path}", quiet=quiet_value)
            return
        console.print(str(resolve_config_path(config_value)), soft_wrap=True)

    _run_cli(_run, debug=debug_value)
