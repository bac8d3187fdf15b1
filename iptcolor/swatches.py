# iptcolor/swatches.py
"""
Raster previews of a palette: one filled cell per color, in a given order.
"""

import math

import cv2
import numpy as np

from . import codec
from .palette import PALETTE, TRANSPARENT, PackedColorPalette

# swatches are alpha-blended over this gray (BGR)
BACKGROUND_BGR = (136, 136, 136)
_BACKGROUND = codec.bgr_to_packed(BACKGROUND_BGR)

ORDERINGS = ("alphabetical", "hue", "lightness")


def _blend(bgr: tuple[int, int, int], alpha: float) -> tuple[int, int, int]:
    return tuple(
        int(round(c * alpha + bg * (1.0 - alpha))) for c, bg in zip(bgr, BACKGROUND_BGR)
    )


def render_swatches(
    names,
    palette: PackedColorPalette = PALETTE,
    columns: int = 16,
    cell: int = 40,
    labels: bool = False,
) -> np.ndarray:
    names = list(names)
    rows = max(1, math.ceil(len(names) / columns))
    img = np.empty((rows * cell, columns * cell, 3), dtype=np.uint8)
    img[:] = BACKGROUND_BGR

    for idx, name in enumerate(names):
        packed = palette.get(name, TRANSPARENT)
        x0 = (idx % columns) * cell
        y0 = (idx // columns) * cell
        color = _blend(codec.packed_to_bgr(packed), codec.alpha(packed))
        cv2.rectangle(img, (x0, y0), (x0 + cell - 1, y0 + cell - 1), color, thickness=-1)

        if labels:
            behind = codec.blot(packed, 1.0) if codec.alpha(packed) >= 0.5 else _BACKGROUND
            text_bgr = codec.packed_to_bgr(codec.inverse_intensity(behind, behind))
            cv2.putText(img, name[:6], (x0 + 2, y0 + cell // 2 + 4),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.3, text_bgr, 1, cv2.LINE_AA)

    return img


def render_ordering(order: str, palette: PackedColorPalette = PALETTE, **kwargs) -> np.ndarray:
    if order == "alphabetical":
        names = palette.names_alphabetical()
    elif order == "hue":
        names = palette.names_by_hue()
    elif order == "lightness":
        names = palette.names_by_lightness()
    else:
        raise ValueError(f"unknown ordering {order!r}; expected one of {', '.join(ORDERINGS)}")
    return render_swatches(names, palette, **kwargs)
