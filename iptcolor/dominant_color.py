# iptcolor/dominant_color.py

import logging

import cv2
import numpy as np

from . import codec
from .palette import PALETTE, PackedColorPalette

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


def dominant_bgr_kmeans(
    bgr_img: np.ndarray,
    k: int = 3,
    sample: int = 6000,
    resize: int = 160,
    seed: int = 0,
) -> tuple[int, int, int]:
    """
    Dominant color (BGR) of an image by k-means over its pixels.
    The center of the most populated cluster wins.
    """
    if bgr_img is None or bgr_img.size == 0:
        return (0, 0, 0)

    img = cv2.resize(bgr_img, (resize, resize), interpolation=cv2.INTER_AREA)
    pixels = img.reshape(-1, 3)

    if len(pixels) > sample:
        rng = np.random.default_rng(seed)
        pixels = pixels[rng.choice(len(pixels), sample, replace=False)]

    # cv2.kmeans needs at least as many distinct samples as clusters
    k = max(1, min(k, len(np.unique(pixels, axis=0))))

    Z = np.float32(pixels)
    criteria = (cv2.TERM_CRITERIA_EPS + cv2.TERM_CRITERIA_MAX_ITER, 20, 1.0)
    cv2.setRNGSeed(seed)
    _, labels, centers = cv2.kmeans(
        Z, k, None, criteria, 3, cv2.KMEANS_PP_CENTERS
    )

    counts = np.bincount(labels.flatten(), minlength=k)
    dom = centers[int(np.argmax(counts))]
    return (int(round(dom[0])), int(round(dom[1])), int(round(dom[2])))


def nearest_color_name(
    packed: float,
    palette: PackedColorPalette = PALETTE,
) -> tuple[str, float]:
    """
    Closest opaque palette color to `packed`, with its IPT distance.
    """
    return palette.nearest(packed, opaque_only=True)


def detect_color_name_from_crop(
    crop_bgr: np.ndarray,
    unknown_dist_threshold: float = 0.2,
    palette: PackedColorPalette = PALETTE,
) -> tuple[str, tuple[int, int, int], float]:
    """
    Name the dominant color of a BGR crop.

    Returns (name, dominant_bgr, distance). The name is "unknown" when the
    crop is empty or no palette color lies within unknown_dist_threshold.
    """
    if crop_bgr is None or crop_bgr.size == 0:
        return (UNKNOWN, (0, 0, 0), 999.0)

    dom_bgr = dominant_bgr_kmeans(crop_bgr)
    name, dist = nearest_color_name(codec.bgr_to_packed(dom_bgr), palette)
    logger.debug("dominant %s -> %s (%.4f)", dom_bgr, name, dist)

    if dist > unknown_dist_threshold:
        return (UNKNOWN, dom_bgr, dist)

    return (name, dom_bgr, dist)
