# iptcolor/cli.py
import argparse
import logging

import cv2

from . import PALETTE, detect_color_name_from_crop, render_ordering
from .swatches import ORDERINGS

logger = logging.getLogger(__name__)

CAMERA_INDEX = 0
FRAME_WIDTH = 1280
FRAME_HEIGHT = 720

ROI_RATIO = 0.34
CENTER_RATIO = 0.6
UNKNOWN_DIST_THRESHOLD = 0.2

SWATCH_COLUMNS = 16
SWATCH_CELL = 40

KEY_ESC = 27


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def center_crop(img, ratio=CENTER_RATIO):
    h, w = img.shape[:2]
    nh, nw = clamp(int(h * ratio), 1, h), clamp(int(w * ratio), 1, w)
    y1 = (h - nh) // 2
    x1 = (w - nw) // 2
    return img[y1:y1+nh, x1:x1+nw].copy()


def describe_image(path):
    """
    Name the dominant color in the center of the image at `path`.
    Returns None if the image cannot be read.
    """
    img = cv2.imread(path)
    if img is None:
        return None
    return detect_color_name_from_crop(
        center_crop(img), unknown_dist_threshold=UNKNOWN_DIST_THRESHOLD
    )


def show_swatches(order, save=None, labels=False):
    grid = render_ordering(
        order, PALETTE, columns=SWATCH_COLUMNS, cell=SWATCH_CELL, labels=labels
    )
    if save:
        try:
            written = cv2.imwrite(save, grid)
        except cv2.error as exc:
            # unsupported extensions raise instead of returning False
            logger.error("could not write %s: %s", save, exc)
            return 1
        if not written:
            logger.error("could not write %s", save)
            return 1
        logger.info("wrote %d swatches (%s) to %s", PALETTE.color_count(), order, save)
        return 0

    cv2.imshow(f"Palette by {order}", grid)
    while True:
        key = cv2.waitKey(50) & 0xFF
        if key in (ord("q"), KEY_ESC):
            break
    cv2.destroyAllWindows()
    return 0


def run_camera(index):
    cap = cv2.VideoCapture(index)
    if not cap.isOpened():
        logger.error("could not open camera %d", index)
        return 1
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, FRAME_WIDTH)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, FRAME_HEIGHT)

    while True:
        ret, frame = cap.read()
        if not ret:
            break

        h, w = frame.shape[:2]

        # ROI square
        side = int(min(w, h) * ROI_RATIO)
        cx, cy = w // 2, h // 2
        rx1, ry1 = cx - side // 2, cy - side // 2
        rx2, ry2 = cx + side // 2, cy + side // 2

        crop = center_crop(frame[ry1:ry2, rx1:rx2])
        color_name, dom_bgr, dist = detect_color_name_from_crop(
            crop, unknown_dist_threshold=UNKNOWN_DIST_THRESHOLD
        )

        cv2.rectangle(frame, (rx1, ry1), (rx2, ry2), (255, 255, 255), 2)
        cv2.putText(frame, "Put object in square (press q to quit)",
                    (rx1, ry1 - 10),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
        cv2.rectangle(frame, (rx1, ry2 + 8), (rx1 + 30, ry2 + 38), dom_bgr, -1)
        cv2.putText(frame, f"Color: {color_name} ({dist:.3f})",
                    (rx1 + 40, ry2 + 32),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, (0, 255, 0), 2)

        cv2.imshow("Camera -> Color Name", frame)
        if cv2.waitKey(1) & 0xFF in (ord("q"), KEY_ESC):
            break

    cap.release()
    cv2.destroyAllWindows()
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Browse the named IPT palette and name colors in images."
    )
    parser.add_argument("--order", choices=ORDERINGS, default="hue",
                        help="swatch order (default: hue)")
    parser.add_argument("--save", metavar="PATH",
                        help="write the swatch grid to PATH instead of showing it")
    parser.add_argument("--labels", action="store_true",
                        help="print color names on the swatches")
    parser.add_argument("--image", metavar="PATH",
                        help="name the dominant color in the center of an image")
    parser.add_argument("--camera", type=int, metavar="INDEX", nargs="?", const=CAMERA_INDEX,
                        help="name colors live from a camera (default index: %(const)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.image:
        result = describe_image(args.image)
        if result is None:
            logger.error("could not read image %s", args.image)
            return 1
        name, dom_bgr, dist = result
        print(f"{name}\tbgr={dom_bgr}\tdist={dist:.4f}")
        return 0

    if args.camera is not None:
        return run_camera(args.camera)

    return show_swatches(args.order, save=args.save, labels=args.labels)
