#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Symbol sizing for stars and deep sky objects.

Object symbols grow with brightness (flux interpolated between
a faint and a bright magnitude) and with apparent size. Each
object kind has its own glyph, see GLYPHS.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from StarChart.sky_types import ObjectKind, PlanePoint

# (x, y, width, height)
Box = Tuple[float, float, float, float]

# r_mag curve: radius range and the magnitudes it spans
R_MIN = 4.0
R_MAX = 18.0
MAG_BRIGHT = -1.0
MAG_FAINT = 10.0

# r_size curve
SIZE_K = 1.2
SIZE_ALPHA = 0.5
SIZE_CAP = 16.0


def r_mag(
    mag: float,
    r_min: float = R_MIN,
    r_max: float = R_MAX,
    mag_bright: float = MAG_BRIGHT,
    mag_faint: float = MAG_FAINT,
) -> float:
    m = min(max(mag, mag_bright), mag_faint)
    f = 10.0 ** (-0.4 * m)
    f_bright = 10.0 ** (-0.4 * mag_bright)
    f_faint = 10.0 ** (-0.4 * mag_faint)
    t = (f - f_faint) / (f_bright - f_faint)
    return r_min + (r_max - r_min) * t


def r_size(
    arcmin: float, k: float = SIZE_K, alpha: float = SIZE_ALPHA, cap: float = SIZE_CAP
) -> float:
    if arcmin <= 0.0:
        return 0.0
    return min(k * arcmin**alpha, cap)


def radius(
    mag: float, arcmin: Optional[float], w_mag: float, w_size: float, floor: float
) -> float:
    """Weighted mix of the magnitude and size radii"""
    by_mag = r_mag(mag)
    by_size = r_size(arcmin if arcmin is not None else 0.0)
    return max(w_mag * by_mag + w_size * by_size, floor)


def star_radius(mag: float, scale: float = 1.0) -> float:
    return max(4.0 - 0.6 * mag, 0.5) * scale


class Glyph(Enum):
    CIRCLE = "circle"
    CROSSHAIR_CIRCLE = "crosshair-circle"
    SQUARE = "square"
    ELLIPSE = "ellipse"
    CIRCLED_CROSS = "circled-cross"
    CROSS = "cross"


@dataclass(frozen=True)
class GlyphSpec:
    glyph: Glyph
    # True: radius() mix of magnitude and size, False: r_mag only
    uses_size: bool
    w_mag: float = 1.0
    w_size: float = 0.3
    floor: float = 6.0

    def base_size(self, mag: float, major_arcmin: float, scale: float) -> float:
        if self.uses_size:
            r = radius(mag, major_arcmin, self.w_mag, self.w_size, self.floor)
            return r * scale
        return r_mag(mag) * scale


GLYPHS: Dict[ObjectKind, GlyphSpec] = {
    ObjectKind.OPEN_CLUSTER: GlyphSpec(Glyph.CIRCLE, uses_size=True),
    ObjectKind.GLOBULAR_CLUSTER: GlyphSpec(Glyph.CROSSHAIR_CIRCLE, uses_size=True),
    ObjectKind.BRIGHT_NEBULA: GlyphSpec(Glyph.SQUARE, uses_size=True),
    ObjectKind.GALAXY: GlyphSpec(Glyph.ELLIPSE, uses_size=False),
    ObjectKind.PLANETARY_NEBULA: GlyphSpec(Glyph.CIRCLED_CROSS, uses_size=True),
}
DEFAULT_GLYPH = GlyphSpec(Glyph.CROSS, uses_size=False)


def glyph_for(kind: ObjectKind) -> GlyphSpec:
    return GLYPHS.get(kind, DEFAULT_GLYPH)


# Label avoidance boxes. These approximate symbol footprints
# from the magnitude alone so the labels layer does not depend
# on what the symbol layers drew.
def star_symbol_box(p: PlanePoint, mag: float, pad: float) -> Box:
    r = star_radius(mag) + pad
    return (p.x - r, p.y - r, 2.0 * r, 2.0 * r)


def object_symbol_box(kind: ObjectKind, mag: float, p: PlanePoint, pad: float) -> Box:
    size = max(10.0 - mag, 4.0)
    if kind is ObjectKind.PLANETARY_NEBULA:
        half = size + pad
    elif kind is ObjectKind.GALAXY:
        half = max(size, size / 2.0) + pad
    else:
        # clusters, bright nebulae and everything else
        half = size / 2.0 + pad
    return (p.x - half, p.y - half, 2.0 * half, 2.0 * half)
