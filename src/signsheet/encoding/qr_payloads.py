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

"""Compact JSON text carried by the sheet's identifying QR code.

Keys are always written in ``PAYLOAD_FIELDS`` order with no whitespace, so a
given configuration serializes to byte-identical text on every run.
"""

from __future__ import annotations

import json
from datetime import date

from PIL import Image

from ..core.errors import EncodingError
from ..core.models import DocumentConfig, QrPayload
from ..qr.codec import QrConfig, qr_raster

PAYLOAD_FIELDS = ("app", "event_id", "name", "date", "teacher")


def encode_qr_payload(payload: QrPayload) -> str:
    record = {field: getattr(payload, field) for field in PAYLOAD_FIELDS}
    return json.dumps(record, separators=(",", ":"), ensure_ascii=False)


def decode_qr_payload(text: bytes | str) -> QrPayload:
    """Parse payload text read back from a scanned sheet."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError("QR payload is not valid UTF-8") from exc
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EncodingError(f"QR payload is not valid JSON: {exc.msg}") from exc
    if not isinstance(record, dict):
        raise EncodingError("QR payload must be a JSON object")
    values: dict[str, str] = {}
    for field in PAYLOAD_FIELDS:
        value = record.get(field)
        if not isinstance(value, str):
            raise EncodingError(f"QR payload {field} must be a string")
        values[field] = value
    try:
        date.fromisoformat(values["date"])
    except ValueError as exc:
        raise EncodingError(f"QR payload date is not ISO-8601: {values['date']}") from exc
    return QrPayload(**values)


def payload_raster(config: DocumentConfig, *, qr_config: QrConfig | None = None) -> Image.Image:
    text = encode_qr_payload(QrPayload.from_config(config))
    return qr_raster(text.encode("utf-8"), config=qr_config)


__all__ = [
    "PAYLOAD_FIELDS",
    "decode_qr_payload",
    "encode_qr_payload",
    "payload_raster",
]
