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

from datetime import date, datetime

from .errors import ConfigurationError
from .models import is_valid_event_id


def require_positive_int(value: object, *, label: str) -> int:
    """Validate that value is a positive integer (> 0)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{label} must be a positive integer")
    return value


def require_non_empty_str(value: object, *, label: str) -> str:
    """Validate that value is a string with visible characters."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{label} must be a non-empty string")
    return value.strip()


def parse_date(value: str | None, *, today: date | None = None) -> date:
    """Parse a YYYY-MM-DD date, defaulting to the current local date."""
    if value is None:
        return today or date.today()
    text = value.strip()
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ConfigurationError(f"invalid date (expected YYYY-MM-DD): {value}") from exc


def normalize_event_id(value: str) -> str:
    normalized = value.strip().upper()
    if not is_valid_event_id(normalized):
        raise ConfigurationError(f"event id must be 8 hexadecimal characters: {value}")
    return normalized
