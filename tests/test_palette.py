import unittest

from iptcolor import codec
from iptcolor.palette import PALETTE, TRANSPARENT, PackedColorPalette

OCEAN_BLUE = float.fromhex("-0x1.590c3ep125")


class LookupTest(unittest.TestCase):
    def test_miss_returns_default_untouched(self):
        marker = object()
        self.assertIs(PALETTE.get("Missing", marker), marker)
        self.assertIsNone(PALETTE.get("missing color", None))
        self.assertEqual(PALETTE.get("", -1.5), -1.5)

    def test_lookup_is_case_sensitive(self):
        self.assertIn("Red", PALETTE)
        self.assertIsNone(PALETTE.get("red", None))

    def test_ocean_blue(self):
        packed = PALETTE.get("Ocean Blue", 0.0)
        self.assertEqual(packed, OCEAN_BLUE)
        self.assertAlmostEqual(codec.intensity(packed), 0.12156863, places=7)
        self.assertAlmostEqual(codec.protan(packed), 0.5254902, places=7)

    def test_transparent_sentinel(self):
        self.assertEqual(TRANSPARENT, 0.0)
        self.assertEqual(
            PALETTE.get("Missing", TRANSPARENT), PALETTE.get("Transparent", TRANSPARENT)
        )
        self.assertIn("Transparent", PALETTE)
        self.assertNotIn("Missing", PALETTE)

    def test_known_entries(self):
        self.assertEqual(codec.float_to_int_bits(PALETTE.get("White", None)), 0xFE7F7FFF)
        self.assertEqual(codec.float_to_int_bits(PALETTE.get("Red", None)), 0xFEA4D430)
        self.assertEqual(codec.float_to_int_bits(PALETTE.get("Black", None)), 0xFE7F7F00)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            PALETTE.named["Red"] = 0.0


class OrderingTest(unittest.TestCase):
    def test_orderings_are_permutations(self):
        names = set(PALETTE.named)
        count = PALETTE.color_count()
        self.assertEqual(count, len(PALETTE))
        for ordering in (
            PALETTE.names_alphabetical(),
            PALETTE.names_by_hue(),
            PALETTE.names_by_lightness(),
        ):
            self.assertEqual(len(ordering), count)
            self.assertEqual(set(ordering), names)

    def test_alphabetical(self):
        names = PALETTE.names_alphabetical()
        self.assertEqual(list(names), sorted(names))

    def test_alphabetical_is_codepoint_order(self):
        palette = PackedColorPalette.from_bits(
            [("Black", 0xFE7F7F00), ("Blue", 0xFE07883B), ("Apricot", 0xFE8D93C4)]
        )
        self.assertEqual(palette.names_alphabetical(), ("Apricot", "Black", "Blue"))

    def test_by_hue_is_sorted(self):
        hues = [codec.hue(PALETTE.get(n, None)) for n in PALETTE.names_by_hue()]
        self.assertEqual(hues, sorted(hues))

    def test_by_lightness_is_sorted(self):
        levels = [codec.intensity(PALETTE.get(n, None)) for n in PALETTE.names_by_lightness()]
        self.assertEqual(levels, sorted(levels))
        self.assertEqual(PALETTE.names_by_lightness()[-1], "White")

    def test_ties_stay_alphabetical(self):
        palette = PackedColorPalette.from_bits(
            [("Zinc", 0xFE7F7F80), ("Moss", 0xFE8D93C4), ("Ash", 0xFE7F7F80)]
        )
        for ordering in (palette.names_by_hue(), palette.names_by_lightness()):
            self.assertLess(ordering.index("Ash"), ordering.index("Zinc"))

    def test_orderings_are_stable_across_calls(self):
        self.assertEqual(PALETTE.names_by_hue(), PALETTE.names_by_hue())
        self.assertEqual(PALETTE.names_by_lightness(), PALETTE.names_by_lightness())


class ConstructionTest(unittest.TestCase):
    def test_duplicate_name_keeps_later_value(self):
        with self.assertLogs("iptcolor.palette", level="WARNING"):
            palette = PackedColorPalette.from_bits(
                [("Red", 0xFEA4D430), ("Blue", 0xFE07883B), ("Red", 0xFE7F7F00)]
            )
        self.assertEqual(palette.color_count(), 2)
        self.assertEqual(codec.float_to_int_bits(palette.get("Red", None)), 0xFE7F7F00)
        self.assertEqual(list(palette), ["Red", "Blue"])

    def test_empty_palette(self):
        palette = PackedColorPalette([])
        self.assertEqual(palette.color_count(), 0)
        self.assertEqual(palette.names_by_hue(), ())
        self.assertEqual(palette.nearest(TRANSPARENT), ("unknown", float("inf")))

    def test_repr(self):
        self.assertIn(str(PALETTE.color_count()), repr(PALETTE))


class NearestTest(unittest.TestCase):
    def test_exact_entry_is_its_own_nearest(self):
        for name in ("Red", "Blue", "White", "Ocean Blue"):
            self.assertEqual(PALETTE.nearest(PALETTE.get(name, None)), (name, 0.0))

    def test_transparent_is_skipped(self):
        name, dist = PALETTE.nearest(TRANSPARENT)
        self.assertNotEqual(name, "Transparent")
        self.assertGreater(dist, 0.0)
        self.assertEqual(PALETTE.nearest(TRANSPARENT, opaque_only=False), ("Transparent", 0.0))

    def test_no_opaque_candidates(self):
        palette = PackedColorPalette.from_bits([("Clear", 0x00000000)])
        self.assertEqual(palette.nearest(TRANSPARENT), ("unknown", float("inf")))


class AliasTest(unittest.TestCase):
    def test_alias_resolves(self):
        self.assertEqual(PALETTE.get("Grey", None), PALETTE.get("Gray", None))
        self.assertEqual(PALETTE.get("Ocean", None), PALETTE.get("Teal", None))
        self.assertIn("Grey", PALETTE)
        self.assertEqual(PALETTE.aliases["Puce"], PALETTE.get("Mauve", None))

    def test_alias_stays_out_of_orderings(self):
        self.assertEqual(PALETTE.color_count(), 256)
        for ordering in (
            PALETTE.names_alphabetical(),
            PALETTE.names_by_hue(),
            PALETTE.names_by_lightness(),
        ):
            self.assertNotIn("Grey", ordering)
        self.assertNotIn("Grey", PALETTE.named)

    def test_alias_cannot_shadow_a_color(self):
        with self.assertLogs("iptcolor.palette", level="WARNING"):
            palette = PackedColorPalette.from_bits(
                [("Red", 0xFEA4D430), ("Blue", 0xFE07883B)], aliases=[("Blue", "Red")]
            )
        self.assertEqual(codec.float_to_int_bits(palette.get("Blue", None)), 0xFE07883B)

    def test_alias_to_unknown_color(self):
        with self.assertRaises(ValueError):
            PackedColorPalette.from_bits([("Red", 0xFEA4D430)], aliases=[("Rouge", "Rot")])

    def test_colors_by_hue(self):
        expected = tuple(PALETTE.get(n, None) for n in PALETTE.names_by_hue())
        self.assertEqual(PALETTE.colors_by_hue(), expected)


class DescriptionTest(unittest.TestCase):
    def setUp(self):
        self.red = PALETTE.get("Red", None)

    def test_single_color_word(self):
        self.assertEqual(PALETTE.parse_description("red"), codec.limit_to_gamut(self.red))
        self.assertEqual(PALETTE.parse_description("Red"), PALETTE.parse_description("red"))
        gray = PALETTE.get("Gray", None)
        self.assertEqual(PALETTE.parse_description("grey"), gray)

    def test_darkest_red(self):
        dark = PALETTE.parse_description("darkest red")
        self.assertLess(codec.intensity(dark), codec.intensity(self.red))
        self.assertGreater(codec.protan(dark), 0.5)
        self.assertGreater(codec.tritan(dark), 0.5)
        self.assertEqual(codec.alpha(dark), 1.0)

    def test_lighter_is_lighter_than_light(self):
        light = PALETTE.parse_description("light red")
        lighter = PALETTE.parse_description("lighter red")
        self.assertGreater(codec.intensity(light), codec.intensity(self.red))
        self.assertGreater(codec.intensity(lighter), codec.intensity(light))

    def test_multi_word_names_are_joined(self):
        expected = codec.limit_to_gamut(PALETTE.get("Dark Blue", None))
        self.assertEqual(PALETTE.parse_description("darkblue"), expected)

    def test_mixing(self):
        blue = PALETTE.get("Blue", None)
        self.assertEqual(
            PALETTE.parse_description("red-blue"),
            codec.limit_to_gamut(codec.mix(self.red, blue)),
        )

    def test_unknown_word_mixes_transparent(self):
        self.assertEqual(
            PALETTE.parse_description("red zzz"),
            codec.limit_to_gamut(codec.mix(self.red, TRANSPARENT)),
        )

    def test_no_color_words(self):
        self.assertEqual(PALETTE.parse_description(""), TRANSPARENT)
        self.assertEqual(PALETTE.parse_description("dark richer"), TRANSPARENT)

    def test_describe_round_trip(self):
        for name in ("Red", "Gray", "Teal"):
            packed = PALETTE.get(name, None)
            description = PALETTE.describe(packed)
            back = PALETTE.parse_description(description)
            diff = codec.unpack_channels([back])[0, :3] - codec.unpack_channels([packed])[0, :3]
            self.assertLess(float((diff ** 2).sum()) ** 0.5, 0.03, description)


if __name__ == "__main__":
    unittest.main()
