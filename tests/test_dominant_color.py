import unittest

import numpy as np

from iptcolor.dominant_color import (
    UNKNOWN,
    detect_color_name_from_crop,
    dominant_bgr_kmeans,
    nearest_color_name,
)
from iptcolor.palette import PALETTE, TRANSPARENT, PackedColorPalette


def solid(bgr, h=48, w=64):
    img = np.empty((h, w, 3), dtype=np.uint8)
    img[:] = bgr
    return img


class DominantColorTest(unittest.TestCase):
    def test_uniform_image(self):
        self.assertEqual(dominant_bgr_kmeans(solid((10, 200, 30))), (10, 200, 30))

    def test_majority_wins(self):
        img = solid((255, 0, 0), h=100, w=100)
        img[:20] = (0, 0, 255)
        b, g, r = dominant_bgr_kmeans(img)
        self.assertGreater(b, 200)
        self.assertLess(r, 60)

    def test_empty_image(self):
        self.assertEqual(dominant_bgr_kmeans(np.zeros((0, 0, 3), dtype=np.uint8)), (0, 0, 0))
        self.assertEqual(dominant_bgr_kmeans(None), (0, 0, 0))


class ColorNameTest(unittest.TestCase):
    def test_uniform_red_crop(self):
        name, dom_bgr, dist = detect_color_name_from_crop(solid((0, 0, 255)))
        self.assertEqual(name, "Red")
        self.assertEqual(dom_bgr, (0, 0, 255))
        self.assertEqual(dist, 0.0)

    def test_uniform_white_crop(self):
        name, _, dist = detect_color_name_from_crop(solid((255, 255, 255)))
        self.assertEqual(name, "White")
        self.assertEqual(dist, 0.0)

    def test_empty_crop_is_unknown(self):
        self.assertEqual(
            detect_color_name_from_crop(np.zeros((0, 5, 3), dtype=np.uint8)),
            (UNKNOWN, (0, 0, 0), 999.0),
        )

    def test_far_color_is_unknown(self):
        palette = PackedColorPalette.from_bits([("Black", 0xFE7F7F00)])
        name, dom_bgr, dist = detect_color_name_from_crop(
            solid((255, 255, 255)), unknown_dist_threshold=0.2, palette=palette
        )
        self.assertEqual(name, UNKNOWN)
        self.assertEqual(dom_bgr, (255, 255, 255))
        self.assertGreater(dist, 0.2)

    def test_nearest_color_name_ignores_transparent(self):
        name, _ = nearest_color_name(TRANSPARENT, PALETTE)
        self.assertNotEqual(name, "Transparent")


if __name__ == "__main__":
    unittest.main()
