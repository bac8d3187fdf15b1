from .palette import PALETTE, TRANSPARENT, PackedColorPalette
from .dominant_color import detect_color_name_from_crop, dominant_bgr_kmeans, nearest_color_name
from .swatches import render_ordering, render_swatches

__all__ = [
    "PALETTE",
    "TRANSPARENT",
    "PackedColorPalette",
    "detect_color_name_from_crop",
    "dominant_bgr_kmeans",
    "nearest_color_name",
    "render_ordering",
    "render_swatches",
]
