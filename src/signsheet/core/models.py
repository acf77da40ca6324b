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
import uuid
from dataclasses import dataclass, replace
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PIL import Image

APP_ID = "bridge-attendance"
EVENT_ID_LEN = 8
_EVENT_ID_RE = re.compile(r"[0-9A-F]{8}")


@dataclass(frozen=True)
class RosterMode:
    names: tuple[str, ...]


@dataclass(frozen=True)
class BlankMode:
    rows: int


GridMode = RosterMode | BlankMode


@dataclass(frozen=True)
class DocumentConfig:
    class_name: str
    teacher: str
    date: date
    location: str
    event_id: str
    roster: tuple[str, ...] | None = None
    blank_rows: int = 32
    mailing_list: bool = True
    mailing_rows: int = 4
    logo: "Image.Image | None" = None

    @property
    def grid_mode(self) -> GridMode:
        if self.roster is None:
            return BlankMode(rows=self.blank_rows)
        return RosterMode(names=self.roster)


@dataclass(frozen=True)
class PageCursor:
    """Vertical offset (mm, bottom-left origin) and zero-based page index."""

    y: float
    page: int = 0

    def moved_to(self, y: float) -> "PageCursor":
        return replace(self, y=y)

    def down(self, height: float) -> "PageCursor":
        return replace(self, y=self.y - height)


@dataclass(frozen=True)
class QrPayload:
    app: str
    event_id: str
    name: str
    date: str
    teacher: str

    @classmethod
    def from_config(cls, config: DocumentConfig, *, app: str = APP_ID) -> "QrPayload":
        return cls(
            app=app,
            event_id=config.event_id,
            name=config.class_name,
            date=config.date.isoformat(),
            teacher=config.teacher,
        )


def generate_event_id() -> str:
    """Return an 8-character uppercase hex id taken from a random UUID4."""
    return uuid.uuid4().hex[:EVENT_ID_LEN].upper()


def is_valid_event_id(value: str) -> bool:
    return bool(_EVENT_ID_RE.fullmatch(value))


__all__ = [
    "APP_ID",
    "BlankMode",
    "DocumentConfig",
    "EVENT_ID_LEN",
    "GridMode",
    "PageCursor",
    "QrPayload",
    "RosterMode",
    "generate_event_id",
    "is_valid_event_id",
]
