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
import ssl
import urllib.error
import urllib.request
from pathlib import Path

import certifi
from PIL import Image, UnidentifiedImageError

from ...core.errors import LogoError

FETCH_TIMEOUT_SECONDS = 30
_URL_PREFIXES = ("http://", "https://")


def is_url(source: str) -> bool:
    return source.startswith(_URL_PREFIXES)


def load_logo(source: str) -> Image.Image:
    """Load a logo from a local path or an http(s) URL and decode it."""
    data = fetch_logo_bytes(source) if is_url(source) else read_logo_file(source)
    return decode_logo(data, source=source)


def read_logo_file(path: str | Path) -> bytes:
    target = Path(path).expanduser()
    try:
        return target.read_bytes()
    except OSError as exc:
        raise LogoError(f"{target}: {exc}") from exc


def fetch_logo_bytes(url: str) -> bytes:
    request = urllib.request.Request(url, headers={"User-Agent": "signsheet"})
    context = ssl.create_default_context(cafile=certifi.where())
    try:
        with urllib.request.urlopen(request, timeout=FETCH_TIMEOUT_SECONDS, context=context) as resp:
            return resp.read()
    except urllib.error.HTTPError as exc:
        raise LogoError(f"failed to fetch {url}: HTTP {exc.code} {exc.reason}") from exc
    except urllib.error.URLError as exc:
        raise LogoError(f"failed to fetch {url}: {exc.reason}") from exc
    except OSError as exc:
        raise LogoError(f"failed to read response from {url}: {exc}") from exc


def decode_logo(data: bytes, *, source: str = "logo") -> Image.Image:
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            return image.copy()
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise LogoError(f"failed to decode image {source}: {exc}") from exc


__all__ = ["decode_logo", "fetch_logo_bytes", "is_url", "load_logo", "read_logo_file"]
