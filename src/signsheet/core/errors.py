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

"""Error taxonomy for a single sheet generation.

Every error is terminal for the run. Each class maps to one user-facing label
so the CLI can report the category without inspecting the message.
"""

from __future__ import annotations


class SignsheetError(Exception):
    label = "Error"


class ConfigurationError(SignsheetError, ValueError):
    label = "Configuration error"


class RosterError(SignsheetError, ValueError):
    label = "Roster error"


class LogoError(SignsheetError, RuntimeError):
    label = "Logo error"


class EncodingError(SignsheetError, ValueError):
    label = "QR encoding error"


class OutputError(SignsheetError, OSError):
    label = "Output error"


__all__ = [
    "ConfigurationError",
    "EncodingError",
    "LogoError",
    "OutputError",
    "RosterError",
    "SignsheetError",
]
