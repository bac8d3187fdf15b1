# iptcolor/palette.py
import itertools
import logging
import re
from types import MappingProxyType

import numpy as np

from . import codec
from .palette_data import ALIASES, NAMED_COLORS

logger = logging.getLogger(__name__)

# ipt(0, 0, 0, 0); no RGBA input encodes to it, so it doubles as the "not found" default
TRANSPARENT = codec.int_bits_to_float(0x00000000)

# (prefix, axis, step): axis 0 is intensity, 1 is chroma
_ADJECTIVES = (
    ("light", 0, 0.125),
    ("dark", 0, -0.15),
    ("rich", 1, 0.2),
    ("dull", 1, -0.2),
)
# "light" x1, "lighter" x2, "lightest" x3, "lightmost" x4
_SUFFIX_LEVELS = {0: 1, 2: 2, 3: 3, 4: 4}

_LIGHT_WORDS = ("darkmost ", "darkest ", "darker ", "dark ", "",
                "light ", "lighter ", "lightest ", "lightmost ")
_RICH_WORDS = ("dullmost ", "dullest ", "duller ", "dull ", "",
               "rich ", "richer ", "richest ", "richmost ")


def _word(name: str) -> str:
    return name.replace(" ", "").lower()


def _adjust(packed: float, light: float, rich: float) -> float:
    light = min(max(light, -1.0), 1.0)
    rich = min(max(rich, -1.0), 1.0)
    if light > 0:
        packed = codec.lighten(packed, light)
    elif light < 0:
        packed = codec.darken(packed, -light)
    if rich > 0:
        return codec.enrich(packed, rich)
    if rich < 0:
        return codec.limit_to_gamut(codec.dullen(packed, -rich))
    return codec.limit_to_gamut(packed)


class PackedColorPalette:
    """
    Read-only table of named packed IPT colors.

    Lookups go through get(name, default). The names are also available in
    three fixed orders: alphabetical, by hue (red -> yellow -> green -> blue ->
    purple), and by intensity (darkest first). Hue and intensity orders are
    stable sorts of the alphabetical order, so ties stay alphabetical.

    Aliases are extra spellings for registered colors. get() and `in` accept
    them, but they are not counted and never appear in the orderings.
    """

    def __init__(self, entries, aliases=()):
        named = {}
        for name, packed in entries:
            if name in named:
                logger.warning("Color %r registered twice; keeping the later value", name)
            named[name] = packed

        alias_map = {}
        for alias, target in aliases:
            if alias in named:
                logger.warning("Alias %r shadows a registered color; ignoring it", alias)
                continue
            if target not in named:
                raise ValueError(f"alias {alias!r} points at unknown color {target!r}")
            alias_map[alias] = named[target]

        self._named = MappingProxyType(named)
        self._aliases = MappingProxyType(alias_map)
        self._registered = tuple(named)

        alphabetical = sorted(named)
        values = [named[name] for name in alphabetical]
        hues = np.array([codec.hue(v) for v in values], dtype=np.float64)
        intensities = codec.unpack_channels(values)[:, 0]

        self._alphabetical = tuple(alphabetical)
        self._by_hue = tuple(alphabetical[i] for i in np.argsort(hues, kind="stable"))
        self._by_lightness = tuple(alphabetical[i] for i in np.argsort(intensities, kind="stable"))

        # cached for nearest(): rows follow registration order
        self._channels = codec.unpack_channels([named[name] for name in self._registered])

        # parse_description() words: lower case, spaces dropped ("Ocean Blue" -> "oceanblue")
        self._words = {_word(name): packed for name, packed in named.items()}
        for alias, packed in alias_map.items():
            self._words.setdefault(_word(alias), packed)

    @classmethod
    def from_bits(cls, rows, aliases=()) -> "PackedColorPalette":
        return cls(((name, codec.int_bits_to_float(bits)) for name, bits in rows), aliases)

    def get(self, name: str, default):
        """
        Packed color registered as `name` (exact match, aliases included),
        else `default` returned untouched.
        """
        if name in self._named:
            return self._named[name]
        return self._aliases.get(name, default)

    def names_alphabetical(self) -> tuple[str, ...]:
        return self._alphabetical

    def names_by_hue(self) -> tuple[str, ...]:
        return self._by_hue

    def names_by_lightness(self) -> tuple[str, ...]:
        return self._by_lightness

    def colors_by_hue(self) -> tuple[float, ...]:
        return tuple(self._named[name] for name in self._by_hue)

    def color_count(self) -> int:
        return len(self._named)

    @property
    def named(self):
        return self._named

    @property
    def aliases(self):
        return self._aliases

    def colors(self) -> tuple[float, ...]:
        """Packed values in registration order."""
        return tuple(self._named[name] for name in self._registered)

    def nearest(self, packed: float, *, opaque_only: bool = True) -> tuple[str, float]:
        """
        Closest registered color by Euclidean distance over intensity,
        protan and tritan. Returns ("unknown", inf) if nothing qualifies.
        """
        rows = self._channels
        candidates = np.arange(rows.shape[0])
        if opaque_only:
            candidates = candidates[rows[:, 3] >= 0.5]
        if candidates.size == 0:
            return "unknown", float("inf")

        target = codec.unpack_channels([packed])[0, :3]
        dists = np.linalg.norm(rows[candidates, :3] - target, axis=1)
        best = int(np.argmin(dists))
        return self._registered[int(candidates[best])], float(dists[best])

    def parse_description(self, description: str) -> float:
        """
        Color described by words such as "light rich red" or "dark teal-olive".

        Words are split on anything that is not a letter and compared case
        insensitively; multi-word names are written without spaces
        ("oceanblue"). Every color word is mixed in evenly. "light"/"dark"
        change intensity and "rich"/"dull" change chroma; adding two, three
        or four letters ("lighter", "lightest", "lightmost") doubles, triples
        or quadruples the effect. Unknown words mix in transparent. Returns
        TRANSPARENT when no color word is given.
        """
        mixing = []
        shift = [0.0, 0.0]
        for term in re.split(r"[^a-zA-Z]+", description.lower()):
            if not term:
                continue
            packed = self._words.get(term)
            if packed is not None:
                mixing.append(packed)
                continue
            for prefix, axis, step in _ADJECTIVES:
                level = _SUFFIX_LEVELS.get(len(term) - len(prefix))
                if term.startswith(prefix) and level is not None:
                    shift[axis] += step * level
                    break
            else:
                logger.debug("unknown color word %r in %r", term, description)
                mixing.append(TRANSPARENT)

        result = codec.mix(*mixing)
        if codec.float_to_int_bits(result) == 0:
            return result
        return _adjust(result, shift[0], shift[1])

    def describe(self, packed: float, mix_count: int = 1) -> str:
        """
        Closest description parse_description() can turn back into a color:
        up to four levels of light/dark and rich/dull plus `mix_count` color
        words. The search is exhaustive, so keep mix_count at 1 to 3.
        """
        mix_count = max(1, mix_count)
        names = [n for n in self._by_hue if codec.alpha(self._named[n]) >= 0.5]
        if not names:
            return ""
        combos = list(itertools.product(range(len(names)), repeat=mix_count))
        mixes = [codec.mix(*(self._named[names[i]] for i in combo)) for combo in combos]
        target = codec.unpack_channels([packed])[0, :3]

        best, best_dist = (0, 0, combos[0]), float("inf")
        for rich_idx in range(-4, 5):
            for light_idx in range(-4, 5):
                light = 0.125 * light_idx if light_idx > 0 else 0.15 * light_idx
                rows = codec.unpack_channels(
                    [_adjust(m, light, 0.2 * rich_idx) for m in mixes]
                )[:, :3]
                dists = np.sum((rows - target) ** 2, axis=1)
                i = int(np.argmin(dists))
                if dists[i] < best_dist:
                    best, best_dist = (light_idx, rich_idx, combos[i]), float(dists[i])

        light_idx, rich_idx, combo = best
        words = " ".join(_word(names[i]) for i in combo)
        return _LIGHT_WORDS[light_idx + 4] + _RICH_WORDS[rich_idx + 4] + words

    def __len__(self) -> int:
        return len(self._named)

    def __contains__(self, name) -> bool:
        return name in self._named or name in self._aliases

    def __iter__(self):
        return iter(self._registered)

    def __repr__(self) -> str:
        return f"<PackedColorPalette with {len(self)} colors>"


PALETTE = PackedColorPalette.from_bits(NAMED_COLORS, ALIASES)
