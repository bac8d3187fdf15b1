# iptcolor/codec.py
"""
Packed IPT colors.

A packed color is a float32 bit pattern holding four 8-bit channels, low byte
first: intensity, protan, tritan, alpha. Alpha keeps only its top 7 bits, so
the float exponent is never all ones and a packed color is never NaN.

Packed values are handed around as plain Python floats; the float32 -> float64
widening is exact, so the bits survive any number of round trips.
"""

import numpy as np

_ALPHA_MASK = 0xFE000000
_PACKED_MASK = 0xFEFFFFFF


def float_to_int_bits(packed: float) -> int:
    return int(np.array([packed], dtype=np.float32).view(np.uint32)[0])


def int_bits_to_float(bits: int) -> float:
    """
    Reinterpret 32 bits as a packed color. The alpha LSB is cleared first.
    """
    return float(np.array([bits & _PACKED_MASK], dtype=np.uint32).view(np.float32)[0])


def _byte(value: float) -> int:
    return int(min(max(value, 0.0), 1.0) * 255.0 + 0.5)


def ipt(intens: float, protan: float, tritan: float, alpha: float) -> float:
    """
    Pack four channels, each 0.0 to 1.0, into one float.

    Channels outside [0, 1] are clamped. Protan and tritan are 0.5 for neutral
    colors; high protan leans red/magenta, high tritan leans yellow/green.
    """
    return int_bits_to_float(
        (_byte(alpha) << 24 & _ALPHA_MASK)
        | _byte(tritan) << 16
        | _byte(protan) << 8
        | _byte(intens)
    )


def intensity(packed: float) -> float:
    return (float_to_int_bits(packed) & 0xFF) / 255.0


def protan(packed: float) -> float:
    return (float_to_int_bits(packed) >> 8 & 0xFF) / 255.0


def tritan(packed: float) -> float:
    return (float_to_int_bits(packed) >> 16 & 0xFF) / 255.0


def alpha(packed: float) -> float:
    return (float_to_int_bits(packed) >> 24 & 0xFE) / 254.0


def alpha_int(packed: float) -> int:
    return float_to_int_bits(packed) >> 24 & 0xFE


def unpack_channels(packed_values) -> np.ndarray:
    """
    Decode many packed colors at once.

    Returns an (n, 4) float64 array with columns intensity, protan, tritan,
    alpha, using the same scaling as the scalar accessors.
    """
    bits = np.asarray(packed_values, dtype=np.float32).reshape(-1).view(np.uint32)
    out = np.empty((bits.shape[0], 4), dtype=np.float64)
    out[:, 0] = (bits & 0xFF) / 255.0
    out[:, 1] = ((bits >> 8) & 0xFF) / 255.0
    out[:, 2] = ((bits >> 16) & 0xFF) / 255.0
    out[:, 3] = ((bits >> 24) & 0xFE) / 254.0
    return out


# ===== RGB <-> IPT =====

def _ipt_to_rgb(i: float, p: float, t: float) -> tuple[float, float, float]:
    # p and t centered on 0, in [-1, 1]
    return (
        0.999779 * i + 1.0709400 * p + 0.324891 * t,
        1.000150 * i - 0.3777440 * p + 0.220439 * t,
        0.999769 * i + 0.0629496 * p - 0.809638 * t,
    )


def _centered(packed: float) -> tuple[float, float, float]:
    bits = float_to_int_bits(packed)
    return (
        (bits & 0xFF) / 255.0,
        ((bits >> 8 & 0xFF) - 127.5) / 127.5,
        ((bits >> 16 & 0xFF) - 127.5) / 127.5,
    )


def _rgb_unclamped(packed: float) -> tuple[float, float, float]:
    return _ipt_to_rgb(*_centered(packed))


def _rgb(packed: float) -> tuple[float, float, float]:
    r, g, b = _rgb_unclamped(packed)
    return min(max(r, 0.0), 1.0), min(max(g, 0.0), 1.0), min(max(b, 0.0), 1.0)


def from_rgba(r: float, g: float, b: float, a: float) -> float:
    """
    Convert RGBA components, each 0.0 to 1.0, to a packed IPT color.
    """
    i = min(max(int((0.189786 * r + 0.576951 * g + 0.233221 * b) * 255.0 + 0.5), 0), 255)
    p = min(max(int((0.669665 * r - 0.73741 * g + 0.0681367 * b) * 127.5 + 127.5), 0), 255)
    t = min(max(int((0.286498 * r + 0.655205 * g - 0.941748 * b) * 127.5 + 127.5), 0), 255)
    return int_bits_to_float((int(a * 255.0) << 24 & _ALPHA_MASK) | t << 16 | p << 8 | i)


def from_rgba8888(rgba: int) -> float:
    """
    Convert an RGBA8888 int (red in the most significant byte) to a packed IPT color.
    """
    r = (rgba >> 24 & 0xFF) / 255.0
    g = (rgba >> 16 & 0xFF) / 255.0
    b = (rgba >> 8 & 0xFF) / 255.0
    i = min(max(int((0.189786 * r + 0.576951 * g + 0.233221 * b) * 255.0 + 0.5), 0), 255)
    p = min(max(int((0.669665 * r - 0.73741 * g + 0.0681367 * b) * 127.5 + 127.5), 0), 255)
    t = min(max(int((0.286498 * r + 0.655205 * g - 0.941748 * b) * 127.5 + 127.5), 0), 255)
    return int_bits_to_float((rgba & 0xFE) << 24 | t << 16 | p << 8 | i)


def to_rgba8888(packed: float) -> int:
    bits = float_to_int_bits(packed)
    r, g, b = _rgb_unclamped(packed)
    r = min(max(int(r * 256.0), 0), 255)
    g = min(max(int(g * 256.0), 0), 255)
    b = min(max(int(b * 256.0), 0), 255)
    return r << 24 | g << 16 | b << 8 | (bits & _ALPHA_MASK) >> 24 | bits >> 31


def red(packed: float) -> float:
    return _rgb(packed)[0]


def green(packed: float) -> float:
    return _rgb(packed)[1]


def blue(packed: float) -> float:
    return _rgb(packed)[2]


def bgr_to_packed(bgr: tuple[int, int, int], alpha: int = 255) -> float:
    b, g, r = (int(c) for c in bgr)
    return from_rgba8888(r << 24 | g << 16 | b << 8 | alpha)


def packed_to_bgr(packed: float) -> tuple[int, int, int]:
    rgba = to_rgba8888(packed)
    return (rgba >> 8 & 0xFF, rgba >> 16 & 0xFF, rgba >> 24 & 0xFF)


def in_gamut(packed: float) -> bool:
    """
    True if the color decodes to RGB without (noticeable) clipping.
    """
    return all(-0.006 <= c <= 1.003 for c in _rgb_unclamped(packed))


def limit_to_gamut(packed: float) -> float:
    """
    Pull an out-of-gamut color toward 50% gray, in 32 steps, until it decodes
    to RGB inside [0, 1]. Alpha is kept.
    """
    i, p, t = _into_gamut(*_centered(packed))
    return ipt(i, p * 0.5 + 0.5, t * 0.5 + 0.5, alpha(packed))


def _into_gamut(i: float, p: float, t: float) -> tuple[float, float, float]:
    i2, p2, t2 = i, p, t
    for attempt in range(31, -1, -1):
        r, g, b = _ipt_to_rgb(i2, p2, t2)
        if 0.0 <= r <= 1.0 and 0.0 <= g <= 1.0 and 0.0 <= b <= 1.0:
            break
        progress = attempt / 32.0
        i2 = 0.5 + (i - 0.5) * progress
        p2 = p * progress
        t2 = t * progress
    return i2, p2, t2


# ===== HUE / SATURATION / LIGHTNESS =====

def _rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    if g < b:
        x, y, z, w = b, g, -1.0, 2.0 / 3.0
    else:
        x, y, z, w = g, b, 0.0, -1.0 / 3.0
    if r < x:
        z, w = w, r
    else:
        w, x = x, r
    d = x - min(w, y)
    light = x * (1.0 - 0.5 * d / (x + 1e-10))
    h = abs(z + (w - y) / (6.0 * d + 1e-10))
    s = (x - light) / (min(light, 1.0 - light) + 1e-10)
    return h, s, light


def _hsl_to_rgb(h: float, s: float, light: float) -> tuple[float, float, float]:
    y = h + 2.0 / 3.0
    z = h + 1.0 / 3.0
    y -= int(y)
    z -= int(z)
    x = min(max(abs(h * 6.0 - 3.0) - 1.0, 0.0), 1.0)
    y = min(max(abs(y * 6.0 - 3.0) - 1.0, 0.0), 1.0)
    z = min(max(abs(z * 6.0 - 3.0) - 1.0, 0.0), 1.0)
    v = light + s * min(light, 1.0 - light)
    d = 2.0 * (1.0 - light / (v + 1e-10))
    return v * (1.0 + (x - 1.0) * d), v * (1.0 + (y - 1.0) * d), v * (1.0 + (z - 1.0) * d)


def hue(packed: float) -> float:
    """
    Hue from 0.0 (red, inclusive) through orange, yellow, green, blue and
    purple, approaching red again at 1.0 (exclusive).
    """
    return _rgb_to_hsl(*_rgb(packed))[0]


def saturation(packed: float) -> float:
    """
    0.0 for grays, up to 1.0 for the most vivid colors. Near-black and
    near-white colors always report 0.0.
    """
    if abs(intensity(packed) - 0.5) > 0.495:
        return 0.0
    r, g, b = _rgb(packed)
    return max(r, g, b) - min(r, g, b)


def lightness(packed: float) -> float:
    return _rgb_to_hsl(*_rgb(packed))[2]


def float_get_hsl(hue: float, saturation: float, lightness: float, opacity: float) -> float:
    """
    Packed color from HSL components, each 0.0 to 1.0. A lightness of 0.001
    or less is always black.
    """
    opacity = min(max(opacity, 0.0), 1.0)
    if lightness <= 0.001:
        return int_bits_to_float((int(opacity * 255.0) << 24 & _ALPHA_MASK) | 0x7F7F00)
    r, g, b = _hsl_to_rgb(hue, saturation, lightness)
    return from_rgba(r, g, b, opacity)


def to_edited_float(basis: float, hue: float, saturation: float, value: float, opacity: float) -> float:
    """
    Shift basis in HSL terms. Each change is additive and may be -1.0 to 1.0;
    saturation, value (intensity) and opacity are clamped, hue wraps around.
    """
    bits = float_to_int_bits(basis)
    i = min(max(value + (bits & 0xFF) / 255.0, 0.0), 1.0)
    opacity = min(max(opacity + (bits >> 24 & 0xFE) / 254.0, 0.0), 1.0)
    if i <= 0.001:
        return int_bits_to_float((int(opacity * 255.0) << 24 & _ALPHA_MASK) | 0x808000)
    _, p, t = _centered(basis)
    r, g, b = (min(max(c, 0.0), 1.0) for c in _ipt_to_rgb(i, p, t))
    h, s, light = _rgb_to_hsl(r, g, b)
    h += hue + 1.0
    h -= int(h)
    s = min(max(saturation + s, 0.0), 1.0)
    return from_rgba(*_hsl_to_rgb(h, s, light), opacity)


# ===== EDITING =====
# Each helper changes one aspect and leaves the other channels' bits as they were.

def _replace_byte(packed: float, shift: int, value: int) -> float:
    bits = float_to_int_bits(packed)
    return int_bits_to_float(bits & ~(0xFF << shift) | (value & 0xFF) << shift)


def lighten(start: float, change: float) -> float:
    i = float_to_int_bits(start) & 0xFF
    return _replace_byte(start, 0, int(i + (0xFF - i) * change))


def darken(start: float, change: float) -> float:
    i = float_to_int_bits(start) & 0xFF
    return _replace_byte(start, 0, int(i * (1.0 - change)))


def protan_up(start: float, change: float) -> float:
    p = float_to_int_bits(start) >> 8 & 0xFF
    return _replace_byte(start, 8, int(p + (0xFF - p) * change))


def protan_down(start: float, change: float) -> float:
    p = float_to_int_bits(start) >> 8 & 0xFF
    return _replace_byte(start, 8, int(p * (1.0 - change)))


def tritan_up(start: float, change: float) -> float:
    t = float_to_int_bits(start) >> 16 & 0xFF
    return _replace_byte(start, 16, int(t + (0xFF - t) * change))


def tritan_down(start: float, change: float) -> float:
    t = float_to_int_bits(start) >> 16 & 0xFF
    return _replace_byte(start, 16, int(t * (1.0 - change)))


def blot(start: float, change: float) -> float:
    """Move alpha toward fully opaque."""
    a = float_to_int_bits(start) >> 24 & 0xFE
    return _replace_byte(start, 24, int(a + (0xFE - a) * change) & 0xFE)


def fade(start: float, change: float) -> float:
    """Move alpha toward fully transparent."""
    a = float_to_int_bits(start) >> 24 & 0xFE
    return _replace_byte(start, 24, int(a * (1.0 - change)) & 0xFE)


def dullen(start: float, change: float) -> float:
    """Pull both chroma channels toward neutral by `change` (0.0 to 1.0)."""
    return ipt(
        intensity(start),
        (protan(start) - 0.5) * (1.0 - change) + 0.5,
        (tritan(start) - 0.5) * (1.0 - change) + 0.5,
        alpha(start),
    )


def enrich(start: float, change: float) -> float:
    """
    Push both chroma channels away from neutral by `change` (0.0 to 1.0).
    Results that leave the gamut are pulled back toward gray, which can move
    intensity too; alpha never changes.
    """
    i, p, t = _into_gamut(
        intensity(start),
        min(max((protan(start) - 0.5) * (1.0 + change) * 2.0, -1.0), 1.0),
        min(max((tritan(start) - 0.5) * (1.0 + change) * 2.0, -1.0), 1.0),
    )
    return ipt(i, p * 0.5 + 0.5, t * 0.5 + 0.5, alpha(start))


def lerp_colors(start: float, end: float, change: float) -> float:
    """Move every channel of start toward end, alpha included."""
    s = float_to_int_bits(start)
    e = float_to_int_bits(end)
    out = 0
    for shift, mask in ((0, 0xFF), (8, 0xFF), (16, 0xFF), (24, 0xFE)):
        a, b = s >> shift & mask, e >> shift & mask
        out |= (int(a + change * (b - a)) & mask) << shift
    return int_bits_to_float(out)


def mix(*colors: float) -> float:
    """
    Even mix of all colors; 0.0 (transparent) when there are none.
    """
    if not colors:
        return 0.0
    result = colors[0]
    for n, color in enumerate(colors[1:], start=2):
        result = lerp_colors(result, color, 1.0 / n)
    return result


def inverse_intensity(main_color: float, contrasting_color: float) -> float:
    """
    Keep main_color's chroma and alpha but push its intensity away from
    contrasting_color's, so it reads well drawn on top of it. Colors whose
    chroma already differs strongly are returned unchanged.
    """
    bits = float_to_int_bits(main_color)
    contrast_bits = float_to_int_bits(contrasting_color)
    i, p, t = bits & 0xFF, bits >> 8 & 0xFF, bits >> 16 & 0xFF
    ci, cp, ct = contrast_bits & 0xFF, contrast_bits >> 8 & 0xFF, contrast_bits >> 16 & 0xFF
    if (p - cp) ** 2 + (t - ct) ** 2 >= 0x10000:
        return main_color
    if ci < 128:
        new_i = i * (0.45 / 255.0) + 0.55
    else:
        new_i = 0.5 - i * (0.45 / 255.0)
    return ipt(new_i, p / 255.0, t / 255.0, alpha(main_color))


def lessen_change(color: float, fraction: float) -> float:
    """
    Blend color toward neutral opaque gray; fraction 1.0 keeps color as-is,
    0.0 gives the gray.
    """
    e = float_to_int_bits(color)
    ie, pe, te, ae = e & 0xFF, e >> 8 & 0xFF, e >> 16 & 0xFF, e >> 24 & 0xFE
    return int_bits_to_float(
        (int(0x80 + fraction * (ie - 0x80)) & 0xFF)
        | (int(0x80 + fraction * (pe - 0x80)) & 0xFF) << 8
        | (int(0x80 + fraction * (te - 0x80)) & 0xFF) << 16
        | (int(0xFE + fraction * (ae - 0xFE)) & 0xFE) << 24
    )
