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

from PIL import Image

from signsheet.render.compositor import flatten_alpha, prepare_logo
from tests.test_support import make_image


class TestFlattenAlpha(unittest.TestCase):
    def test_half_transparent_pixel_blends_toward_white(self) -> None:
        flat = flatten_alpha(make_image(2, 2, color=(200, 30, 30, 128)))
        self.assertEqual(flat.mode, "RGB")
        # out = fg*a + 255*(1-a) with a = 128/255
        for got, want in zip(flat.getpixel((0, 0)), (227.4, 142.1, 142.1)):
            self.assertAlmostEqual(got, want, delta=1.0)

    def test_fully_transparent_becomes_white(self) -> None:
        flat = flatten_alpha(make_image(3, 1, color=(10, 20, 30, 0)))
        self.assertEqual(flat.getpixel((2, 0)), (255, 255, 255))

    def test_opaque_pixels_unchanged(self) -> None:
        flat = flatten_alpha(make_image(1, 1, color=(12, 34, 56, 255)))
        self.assertEqual(flat.getpixel((0, 0)), (12, 34, 56))

    def test_rgb_input_is_copied(self) -> None:
        source = make_image(4, 4, mode="RGB", color=(1, 2, 3, 255))
        flat = flatten_alpha(source)
        self.assertIsNot(flat, source)
        self.assertEqual(flat.tobytes(), source.tobytes())

    def test_palette_and_grayscale_modes(self) -> None:
        for mode in ("P", "L", "LA"):
            with self.subTest(mode=mode):
                source = Image.new(mode, (2, 2))
                flat = flatten_alpha(source)
                self.assertEqual(flat.mode, "RGB")
                self.assertEqual(flat.size, (2, 2))


class TestPrepareLogo(unittest.TestCase):
    def test_three_to_one_logo_fits_box(self) -> None:
        placed = prepare_logo(make_image(300, 100), 50.0, 30.0)
        self.assertAlmostEqual(placed.width_mm, 50.0)
        self.assertAlmostEqual(placed.height_mm, 16.6667, places=3)
        self.assertEqual(placed.image.mode, "RGB")
        self.assertEqual(placed.image.size, (300, 100))


if __name__ == "__main__":
    unittest.main()
