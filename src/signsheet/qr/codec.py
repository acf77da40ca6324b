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

import io
from dataclasses import dataclass
from typing import Any

import segno
from PIL import Image

from ..core.errors import EncodingError

_ALLOWED_ERROR_LEVELS = frozenset({"L", "M", "Q", "H"})


@dataclass(frozen=True)
class QrConfig:
    error: str = "M"
    scale: int = 4
    border: int = 4
    boost_error: bool = True


def make_qr(
    data: bytes | str,
    *,
    error: str = "M",
    boost_error: bool = True,
) -> Any:
    level = error.strip().upper()
    if level not in _ALLOWED_ERROR_LEVELS:
        raise ValueError(f"unsupported QR error level: {error}")
    try:
        return segno.make(
            data,
            error=level,
            micro=False,
            boost_error=boost_error,
        )
    except segno.DataOverflowError as exc:
        raise EncodingError(f"payload does not fit in a QR symbol: {exc}") from exc


def qr_bytes(data: bytes | str, *, config: QrConfig | None = None) -> bytes:
    """Render data as PNG bytes."""
    config = config or QrConfig()
    qr = make_qr(data, error=config.error, boost_error=config.boost_error)
    buf = io.BytesIO()
    qr.save(buf, kind="png", scale=config.scale, border=config.border)
    return buf.getvalue()


def qr_raster(data: bytes | str, *, config: QrConfig | None = None) -> Image.Image:
    """Render data as a 1-bit raster, dark modules black on white."""
    with Image.open(io.BytesIO(qr_bytes(data, config=config))) as image:
        return image.convert("1")


__all__ = ["QrConfig", "make_qr", "qr_bytes", "qr_raster"]
