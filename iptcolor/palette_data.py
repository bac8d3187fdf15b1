# iptcolor/palette_data.py
# Generated from RGBA8888 source colors with iptcolor.codec.from_rgba8888; do not edit by hand.
# Each row is (name, packed bits); the trailing comment is the RGBA8888 source code.
# "Transparent" is the all-zero sentinel and "Ocean Blue" keeps its historical bits,
# which lie outside the RGB gamut (its comment is the clipped RGBA8888 decode).

NAMED_COLORS = (
    ("Transparent", 0x00000000),  # 00000000
    ("Black", 0xFE7F7F00),  # 000000FF
    ("Gray", 0xFE7F7F80),  # 808080FF
    ("Silver", 0xFE7F7FB6),  # B6B6B6FF
    ("White", 0xFE7F7FFF),  # FFFFFFFF
    ("Red", 0xFEA4D430),  # FF0000FF
    ("Orange", 0xFECDA67A),  # FF7F00FF
    ("Yellow", 0xFEF776C4),  # FFFF00FF
    ("Green", 0xFED32193),  # 00FF00FF
    ("Blue", 0xFE07883B),  # 0000FFFF
    ("Indigo", 0xFE269D4C),  # 520FE0FF
    ("Violet", 0xFE38A078),  # 9040EFFF
    ("Purple", 0xFE22C860),  # C000FFFF
    ("Brown", 0xFE94915B),  # 8F573BFF
    ("Pink", 0xFE6EA1C1),  # FFA0E0FF
    ("Magenta", 0xFE2FD968),  # F500F5FF
    ("Brick", 0xFE96AB69),  # D5524AFF
    ("Ember", 0xFEA8B26E),  # F55A32FF
    ("Salmon", 0xFE95B480),  # FF6262FF
    ("Chocolate", 0xFE958E3A),  # 683818FF
    ("Tan", 0xFE9688B0),  # D2B48CFF
    ("Bronze", 0xFEB49184),  # CE8E31FF
    ("Cinnamon", 0xFEB2A06B),  # D2691DFF
    ("Apricot", 0xFEC8989B),  # FFA828FF
    ("Peach", 0xFEA592BD),  # FFBF81FF
    ("Pear", 0xFED174B6),  # D3E330FF
    ("Saffron", 0xFEE286AF),  # FFD510FF
    ("Butter", 0xFEB380DC),  # FFF288FF
    ("Chartreuse", 0xFED166C8),  # C8FF41FF
    ("Cactus", 0xFEBA5465),  # 30A000FF
    ("Lime", 0xFED96296),  # 93D300FF
    ("Olive", 0xFEBB7B62),  # 818000FF
    ("Fern", 0xFE936F64),  # 4E7942FF
    ("Moss", 0xFE977030),  # 204608FF
    ("Celery", 0xFEAE4FC6),  # 7DFF73FF
    ("Sage", 0xFE856BD1),  # ABE3C5FF
    ("Jade", 0xFEA95089),  # 3FBF3FFF
    ("Cyan", 0xFE5A2ACF),  # 00FFFFFF
    ("Mint", 0xFE8153DD),  # 7FFFD4FF
    ("Teal", 0xFE6D5567),  # 007F7FFF
    ("Turquoise", 0xFE6D46B3),  # 2ED6C9FF
    ("Sky", 0xFE5745A6),  # 10C0E0FF
    ("Cobalt", 0xFE456B50),  # 0046ABFF
    ("Denim", 0xFE5C6382),  # 3088B8FF
    ("Navy", 0xFE43831E),  # 000080FF
    ("Lavender", 0xFE5190B2),  # B991FFFF
    ("Plum", 0xFE41C15A),  # BE0DC6FF
    ("Mauve", 0xFE6D948B),  # AB73ABFF
    ("Rose", 0xFE71C559),  # E61E78FF
    ("Raspberry", 0xFE80AA34),  # 911437FF
    ("Alice Blue", 0xFE7B7DF8),  # F0F8FFFF
    ("Antique White", 0xFE8B83E9),  # FAEBD7FF
    ("Aqua", 0xFE5B2ACE),  # 00FEFEFF
    ("Aquamarine", 0xFE8353DC),  # 7FFFD0FF
    ("Azure", 0xFE7D7AFC),  # F0FFFFFF
    ("Beige", 0xFE8B7EEF),  # F5F5DCFF
    ("Bisque", 0xFE9287E2),  # FFE4C4FF
    ("Blue Violet", 0xFE36A568),  # 8A2BE2FF
    ("Burlywood", 0xFE9C8AB4),  # DEB887FF
    ("Cadet Blue", 0xFE756A93),  # 5F9EA0FF
    ("Coral", 0xFEA7A88C),  # FF7F50FF
    ("Cornflower Blue", 0xFE4F72A0),  # 6495EDFF
    ("Crimson", 0xFE89C343),  # DC143CFF
    ("Dark Blue", 0xFE3E8420),  # 00008BFF
    ("Dark Cyan", 0xFE6B5071),  # 008B8BFF
    ("Dark Goldenrod", 0xFEC08C73),  # B8860BFF
    ("Dark Gray", 0xFE7F7FA9),  # A9A9A9FF
    ("Dark Green", 0xFEA05A3A),  # 006400FF
    ("Dark Khaki", 0xFEA47EA6),  # BDB76BFF
    ("Dark Magenta", 0xFE51B23B),  # 8B008BFF
    ("Dark Olive Green", 0xFE987659),  # 556B2FFF
    ("Dark Orange", 0xFED1A181),  # FF8C00FF
    ("Dark Orchid", 0xFE45A769),  # 9932CCFF
    ("Dark Red", 0xFE93AE1A),  # 8B0000FF
    ("Dark Salmon", 0xFE989A9F),  # E9967AFF
    ("Dark Sea Green", 0xFE8E6EA9),  # 8FBC8FFF
    ("Dark Slate Blue", 0xFE5C8551),  # 483D8BFF
    ("Dark Slate Gray", 0xFE7A7449),  # 2F4F4FFF
    ("Dark Turquoise", 0xFE603AA8),  # 00CED1FF
    ("Dark Violet", 0xFE31B84D),  # 9400D3FF
    ("Deep Pink", 0xFE65D25E),  # FF1493FF
    ("Deep Sky Blue", 0xFE4541AA),  # 00BFFFFF
    ("Dim Gray", 0xFE7F7F69),  # 696969FF
    ("Dodger Blue", 0xFE3A5D94),  # 1E90FFFF
    ("Firebrick", 0xFE94AF3D),  # B22222FF
    ("Forest Green", 0xFEA1585F),  # 228B22FF
    ("Fuchsia", 0xFE2BDD6C),  # FF00FFFF
    ("Gainsboro", 0xFE7F7FDC),  # DCDCDCFF
    ("Gold", 0xFEEA85AC),  # FFD700FF
    ("Goldenrod", 0xFEC58C90),  # DAA520FF
    ("Green Yellow", 0xFED55DBF),  # ADFF2FFF
    ("Honeydew", 0xFE847AF9),  # F0FFF0FF
    ("Hot Pink", 0xFE71B497),  # FF69B4FF
    ("Indian Red", 0xFE8FA571),  # CD5C5CFF
    ("Ivory", 0xFE867FFB),  # FFFFF0FF
    ("Khaki", 0xFEAB7FD3),  # F0E68CFF
    ("Lawn Green", 0xFEE34CA9),  # 7CFC00FF
    ("Light Blue", 0xFE7271D3),  # ADD8E6FF
    ("Light Coral", 0xFE8FA595),  # F08080FF
    ("Light Cyan", 0xFE7B75F9),  # E0FFFFFF
    ("Light Gray", 0xFE7F7FD3),  # D3D3D3FF
    ("Light Green", 0xFE9E5CC6),  # 90EE90FF
    ("Light Pink", 0xFE8498C6),  # FFB6C1FF
    ("Light Salmon", 0xFE9E9EA9),  # FFA07AFF
    ("Light Sea Green", 0xFE6E4E94),  # 20B2AAFF
    ("Light Sky Blue", 0xFE6069CB),  # 87CEFAFF
    ("Light Slate Gray", 0xFE757A89),  # 778899FF
    ("Light Steel Blue", 0xFE7079C6),  # B0C4DEFF
    ("Light Yellow", 0xFE8E7EF8),  # FFFFE0FF
    ("Lime Green", 0xFEB2468B),  # 32CD32FF
    ("Linen", 0xFE8582F0),  # FAF0E6FF
    ("Maroon", 0xFE91AA18),  # 800000FF
    ("Medium Blue", 0xFE1E8630),  # 0000CDFF
    ("Medium Orchid", 0xFE52A586),  # BA55D3FF
    ("Medium Purple", 0xFE528E90),  # 9370DBFF
    ("Medium Sea Green", 0xFE8D558D),  # 3CB371FF
    ("Medium Slate Blue", 0xFE438A8B),  # 7B68EEFF
    ("Medium Turquoise", 0xFE6E51B6),  # 48D1CCFF
    ("Medium Violet Red", 0xFE64BE51),  # C71585FF
    ("Midnight Blue", 0xFE56822D),  # 191970FF
    ("Moccasin", 0xFE9986DE),  # FFE4B5FF
    ("Olive Drab", 0xFEAC706E),  # 6B8E23FF
    ("Orange Red", 0xFEBABB58),  # FF4500FF
    ("Orchid", 0xFE5EA69C),  # DA70D6FF
    ("Pale Goldenrod", 0xFE9D7FDB),  # EEE8AAFF
    ("Pale Green", 0xFE9F5BD1),  # 98FB98FF
    ("Pale Turquoise", 0xFE766AE2),  # AFEEEEFF
    ("Pale Violet Red", 0xFE7EA48C),  # DB7093FF
    ("Peach Puff", 0xFE948AD9),  # FFDAB9FF
    ("Peru", 0xFEAA9582),  # CD853FFF
    ("Powder Blue", 0xFE756FD8),  # B0E0E6FF
    ("Rosy Brown", 0xFE858E98),  # BC8F8FFF
    ("Royal Blue", 0xFE41767D),  # 4169E1FF
    ("Saddle Brown", 0xFEA19547),  # 8B4513FF
    ("Sandy Brown", 0xFEAA98A3),  # F4A460FF
    ("Sea Green", 0xFE8A5E6D),  # 2E8B57FF
    ("Sienna", 0xFE9C9858),  # A0522DFF
    ("Sky Blue", 0xFE6768C7),  # 87CEEBFF
    ("Slate Blue", 0xFE4B8878),  # 6A5ACDFF
    ("Slate Gray", 0xFE757A81),  # 708090FF
    ("Snow", 0xFE8081FB),  # FFFAFAFF
    ("Spring Green", 0xFE9725B1),  # 00FF7FFF
    ("Steel Blue", 0xFE5F6D82),  # 4682B4FF
    ("Thistle", 0xFE7788CA),  # D8BFD8FF
    ("Tomato", 0xFEA3B27A),  # FF6347FF
    ("Wheat", 0xFE9785D8),  # F5DEB3FF
    ("White Smoke", 0xFE7F7FF5),  # F5F5F5FF
    ("Yellow Green", 0xFEC1699F),  # 9ACD32FF
    ("Amber", 0xFEE28E9F),  # FFBF00FF
    ("Amethyst", 0xFE569487),  # 9966CCFF
    ("Apple Green", 0xFECF6B84),  # 8DB600FF
    ("Ash", 0xFE827BBA),  # B2BEB5FF
    ("Auburn", 0xFE90A33B),  # 922724FF
    ("Avocado", 0xFEB46C5C),  # 568203FF
    ("Banana", 0xFED483BF),  # FFE135FF
    ("Barn Red", 0xFE93A51E),  # 7C0A02FF
    ("Berry", 0xFE77AF37),  # 990F4BFF
    ("Blood", 0xFE92AC1D),  # 8A0303FF
    ("Blush", 0xFE80AC7E),  # DE5D83FF
    ("Bone", 0xFE8881D8),  # E3DAC9FF
    ("Bottle Green", 0xFE7D5B4F),  # 006A4EFF
    ("Brass", 0xFEB08192),  # B5A642FF
    ("Burgundy", 0xFE82AB20),  # 800020FF
    ("Burnt Orange", 0xFEB8A458),  # CC5500FF
    ("Burnt Sienna", 0xFEA0A582),  # E97451FF
    ("Butterscotch", 0xFEB39690),  # E3963EFF
    ("Camel", 0xFE9B8A96),  # C19A6BFF
    ("Canary", 0xFEAF7CE7),  # FFFF99FF
    ("Caramel", 0xFE989473),  # AF6E4DFF
    ("Carmine", 0xFE89B222),  # 960018FF
    ("Carrot", 0xFEC19A88),  # ED9121FF
    ("Celadon", 0xFE8F6CCB),  # ACE1AFFF
    ("Cerulean", 0xFE59576E),  # 007BA7FF
    ("Charcoal", 0xFE787A44),  # 36454FFF
    ("Cherry", 0xFE80BB5D),  # DE3163FF
    ("Chestnut", 0xFE929950),  # 954535FF
    ("Clay", 0xFE969872),  # B66A50FF
    ("Cloud", 0xFE8280C3),  # C7C4BFFF
    ("Cocoa", 0xFE928B60),  # 875F42FF
    ("Coffee", 0xFE8F894F),  # 6F4E37FF
    ("Copper", 0xFEA79471),  # B87333FF
    ("Cream", 0xFE947EF3),  # FFFDD0FF
    ("Dandelion", 0xFED47EBB),  # F0E130FF
    ("Dusk", 0xFE697F5D),  # 4E5481FF
    ("Dusty Grape", 0xFE748663),  # 6B5876FF
    ("Dusty Rose", 0xFE879983),  # C0737AFF
    ("Eggplant", 0xFE7C8B4A),  # 614051FF
    ("Eggshell", 0xFE8980E6),  # F0EAD6FF
    ("Emerald", 0xFE93549F),  # 50C878FF
    ("Espresso", 0xFE858936),  # 4E312DFF
    ("Flamingo", 0xFE81A5AA),  # FC8EACFF
    ("Flax", 0xFEAC82CA),  # EEDC82FF
    ("Ginger", 0xFEB9955C),  # B06500FF
    ("Glacier", 0xFE706FAD),  # 80B3C4FF
    ("Grape", 0xFE4F9956),  # 6F2DA8FF
    ("Graphite", 0xFE7F7F38),  # 383838FF
    ("Gunmetal", 0xFE7B7C33),  # 2A3439FF
    ("Harvest Gold", 0xFECE937D),  # DA9100FF
    ("Heather", 0xFE7485B2),  # B7A9C4FF
    ("Honey", 0xFECF9784),  # EB9605FF
    ("Ink", 0xFE7A7F28),  # 252530FF
    ("Iris", 0xFE44876F),  # 5A4FCFFF
    ("Ivy", 0xFE8B734E),  # 3D5C3AFF
    ("Jungle", 0xFE7D528A),  # 29AB87FF
    ("Kelly Green", 0xFEBC5480),  # 4CBB17FF
    ("Lagoon", 0xFE706490),  # 4C9EA5FF
    ("Lemon", 0xFECE7DD0),  # FFF44FFF
    ("Lichen", 0xFE8B73A0),  # 8FAE8BFF
    ("Lilac", 0xFE738DB2),  # C8A2C8FF
    ("Mahogany", 0xFEAFA849),  # C04000FF
    ("Malachite", 0xFEA23593),  # 0BDA51FF
    ("Mango", 0xFEAFA78B),  # FF8243FF
    ("Marigold", 0xFEC69392),  # EAA221FF
    ("Midnight", 0xFE747A3F),  # 2C3E50FF
    ("Mulberry", 0xFE72AA71),  # C54B8CFF
    ("Mustard", 0xFEC287C3),  # FFDB58FF
    ("Nutmeg", 0xFE90904F),  # 7E4A35FF
    ("Ocean Blue", 0xFE2C861F),  # 0000A7FF
    ("Ochre", 0xFEB39973),  # CC7722FF
    ("Onyx", 0xFE7E7E38),  # 353839FF
    ("Oxblood", 0xFE8A980E),  # 4A0000FF
    ("Pastel Blue", 0xFE7777C4),  # AEC6CFFF
    ("Pastel Green", 0xFEA059B2),  # 77DD77FF
    ("Pea Green", 0xFEC37082),  # 8EAB12FF
    ("Pewter", 0xFE7F7F8E),  # 8E8E8EFF
    ("Pine", 0xFE735760),  # 01796FFF
    ("Pistachio", 0xFE9F6BA8),  # 93C572FF
    ("Pumpkin", 0xFEBFAA79),  # FF7518FF
    ("Rust", 0xFEA8A54B),  # B7410EFF
    ("Sand", 0xFE9983A9),  # C2B280FF
    ("Sapphire", 0xFE446C5E),  # 0F52BAFF
    ("Scarlet", 0xFEAFC745),  # FF2400FF
    ("Seafoam", 0xFE8753CA),  # 71EEB8FF
    ("Seawater", 0xFE75627E),  # 3A8F8AFF
    ("Sepia", 0xFE9B8D40),  # 704214FF
    ("Shadow", 0xFE8F8476),  # 8A795DFF
    ("Skin Dark", 0xFE9E9054),  # 8D5524FF
    ("Skin Deep", 0xFE908A3B),  # 5C3A21FF
    ("Skin Light", 0xFEA68CBB),  # F1C27DFF
    ("Skin Medium", 0xFEA89282),  # C68642FF
    ("Skin Pale", 0xFE9A89D7),  # FFDBACFF
    ("Slate", 0xFE787B67),  # 5A6672FF
    ("Smoke", 0xFE827A7C),  # 738276FF
    ("Soot", 0xFE7F7F1C),  # 1C1C1CFF
    ("Straw", 0xFEB27FC2),  # E4D96FFF
    ("Sunflower", 0xFEDC8CA6),  # FFC512FF
    ("Sunset", 0xFE9B89D1),  # FAD6A5FF
    ("Tangerine", 0xFECD9F7B),  # F28500FF
    ("Taupe", 0xFE85833C),  # 483C32FF
    ("Terracotta", 0xFE9AA482),  # E2725BFF
    ("Topaz", 0xFEAB8FC1),  # FFC87CFF
    ("Umber", 0xFE868552),  # 635147FF
    ("Vermilion", 0xFE9DB45D),  # E34234FF
    ("Walnut", 0xFE989141),  # 773F1AFF
    ("Wine", 0xFE85963E),  # 722F37FF
    ("Wisteria", 0xFE698FB6),  # C9A0DCFF
)

# Extra spellings resolved by lookup but left out of the name orderings.
ALIASES = (
    ("Grey", "Gray"),
    ("Puce", "Mauve"),
    ("Skin", "Peach"),
    ("Ocean", "Teal"),
)
