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

from dataclasses import dataclass

from PIL import Image

from .geometry import fit_within_box


@dataclass(frozen=True)
class PlacedImage:
    image: Image.Image
    width_mm: float
    height_mm: float


def flatten_alpha(image: Image.Image) -> Image.Image:
    """Composite an image onto solid white and drop its alpha channel."""
    if image.mode == "RGB":
        return image.copy()
    rgba = image.convert("RGBA")
    flat = Image.new("RGB", rgba.size, "white")
    flat.paste(rgba, mask=rgba.getchannel("A"))
    return flat


def prepare_logo(image: Image.Image, max_w: float, max_h: float) -> PlacedImage:
    width_mm, height_mm = fit_within_box(image.width, image.height, max_w, max_h)
    return PlacedImage(image=flatten_alpha(image), width_mm=width_mm, height_mm=height_mm)


__all__ = ["PlacedImage", "flatten_alpha", "prepare_logo"]
