import unittest

import numpy as np

from iptcolor import codec
from iptcolor.palette import PALETTE
from iptcolor.swatches import BACKGROUND_BGR, render_ordering, render_swatches


class RenderSwatchesTest(unittest.TestCase):
    def test_grid_shape(self):
        img = render_swatches(PALETTE.names_alphabetical(), columns=16, cell=10)
        rows = -(-PALETTE.color_count() // 16)
        self.assertEqual(img.shape, (rows * 10, 160, 3))
        self.assertEqual(img.dtype, np.uint8)

    def test_cells_and_background(self):
        img = render_swatches(["Red", "Transparent"], columns=3, cell=10)
        self.assertEqual(img.shape, (10, 30, 3))
        red = codec.packed_to_bgr(PALETTE.get("Red", None))
        self.assertEqual(tuple(int(c) for c in img[5, 5]), red)
        # transparent and empty cells show the background
        self.assertEqual(tuple(int(c) for c in img[5, 15]), BACKGROUND_BGR)
        self.assertEqual(tuple(int(c) for c in img[5, 25]), BACKGROUND_BGR)

    def test_unknown_name_draws_background(self):
        img = render_swatches(["No Such Color"], columns=1, cell=8)
        self.assertEqual(tuple(int(c) for c in img[4, 4]), BACKGROUND_BGR)

    def test_labels(self):
        plain = render_swatches(["White", "Black"], columns=2, cell=40)
        labeled = render_swatches(["White", "Black"], columns=2, cell=40, labels=True)
        self.assertEqual(plain.shape, labeled.shape)
        self.assertFalse(np.array_equal(plain, labeled))


class RenderOrderingTest(unittest.TestCase):
    def test_orderings(self):
        for order in ("alphabetical", "hue", "lightness"):
            img = render_ordering(order, columns=8, cell=4)
            self.assertEqual(img.shape[1], 32)

    def test_lightness_starts_dark(self):
        img = render_ordering("lightness", columns=16, cell=4)
        first = PALETTE.names_by_lightness()[0]
        expected = codec.packed_to_bgr(PALETTE.get(first, None))
        if codec.alpha(PALETTE.get(first, None)) < 1.0:
            expected = BACKGROUND_BGR
        self.assertEqual(tuple(int(c) for c in img[1, 1]), expected)

    def test_unknown_ordering(self):
        with self.assertRaises(ValueError):
            render_ordering("saturation")


if __name__ == "__main__":
    unittest.main()
