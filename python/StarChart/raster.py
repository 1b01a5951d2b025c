#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Raster sink: draws a ChartDocument into a PIL image.

Colors come from a theme keyed by style class. For every
primitive the first class token found in the theme wins,
looking at the primitive itself first and then at its
enclosing groups from the innermost outwards.
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from StarChart.canvas import Circle, Ellipse, Group, Line, Path, Rect, Text
from StarChart.chart import ChartDocument

logger = logging.getLogger("StarChart.Raster")

Color = Tuple[int, int, int]

DEFAULT_THEME: Dict[str, Color] = {
    "background": (255, 255, 255),
    "ecliptic": (200, 160, 60),
    "graticule": (190, 200, 215),
    "constellation": (120, 150, 200),
    "constellation-label": (90, 110, 160),
    "star": (0, 0, 0),
    "galaxy": (200, 40, 40),
    "open-cluster": (200, 160, 0),
    "globular-cluster": (200, 160, 0),
    "bright-nebula": (40, 150, 60),
    "planetary-nebula": (40, 150, 60),
    "object": (120, 120, 120),
    "star-label": (30, 30, 30),
    "object-label": (60, 60, 60),
    "zenith": (220, 0, 0),
    "border": (0, 0, 0),
    "tick": (0, 0, 0),
    "tick-label": (0, 0, 0),
}

ELLIPSE_SEGMENTS = 48


class RasterCanvas:
    def __init__(self, theme: Optional[Dict[str, Color]] = None, font=None):
        self.theme = dict(DEFAULT_THEME)
        if theme:
            self.theme.update(theme)
        self.font = font if font is not None else ImageFont.load_default()

    def color_for(self, css_class: str, ancestors: Sequence[Group]) -> Color:
        chain = [css_class] + [g.css_class for g in reversed(ancestors)]
        for classes in chain:
            for token in classes.split():
                if token in self.theme:
                    return self.theme[token]
        return self.theme.get("default", (0, 0, 0))

    @staticmethod
    def _rotation(ancestors: Sequence[Group]):
        for g in reversed(ancestors):
            if g.rotation is not None:
                return g.rotation
        return None

    @staticmethod
    def _rotate(xs, ys, rotation):
        """svg style rotate(deg, cx, cy) in pixel space"""
        if rotation is None:
            return xs, ys
        deg, cx, cy = rotation
        theta = np.deg2rad(deg)
        dx, dy = np.asarray(xs) - cx, np.asarray(ys) - cy
        return (
            cx + dx * np.cos(theta) - dy * np.sin(theta),
            cy + dx * np.sin(theta) + dy * np.cos(theta),
        )

    def draw_group(self, idraw: ImageDraw.ImageDraw, group: Group):
        for prim, ancestors in group.walk():
            if isinstance(prim, Group):
                continue
            color = self.color_for(prim.css_class, ancestors)
            rotation = self._rotation(ancestors)

            if isinstance(prim, Circle):
                r = prim.r
                idraw.ellipse(
                    [prim.cx - r, prim.cy - r, prim.cx + r, prim.cy + r],
                    fill=color if "star" in prim.css_class.split() else None,
                    outline=color,
                )
            elif isinstance(prim, Ellipse):
                t = np.linspace(0.0, 2.0 * np.pi, ELLIPSE_SEGMENTS, endpoint=False)
                xs, ys = self._rotate(
                    prim.cx + prim.rx * np.cos(t),
                    prim.cy + prim.ry * np.sin(t),
                    rotation,
                )
                idraw.polygon(list(zip(xs.tolist(), ys.tolist())), outline=color)
            elif isinstance(prim, Line):
                xs, ys = self._rotate([prim.x1, prim.x2], [prim.y1, prim.y2], rotation)
                idraw.line(
                    [float(xs[0]), float(ys[0]), float(xs[1]), float(ys[1])],
                    fill=color,
                    width=int(prim.stroke_width or 1),
                )
            elif isinstance(prim, Rect):
                idraw.rectangle(
                    [prim.x, prim.y, prim.x + prim.width, prim.y + prim.height],
                    outline=color,
                )
            elif isinstance(prim, Path):
                if len(prim.points) >= 2:
                    idraw.line([(p.x, p.y) for p in prim.points], fill=color, width=1)
            elif isinstance(prim, Text):
                self.draw_text(idraw, prim, color)

    def draw_text(self, idraw: ImageDraw.ImageDraw, prim: Text, color: Color):
        left, top, right, bottom = idraw.textbbox((0, 0), prim.content, font=self.font)
        w, h = right - left, bottom - top
        x = prim.x
        if prim.anchor == "middle":
            x -= w / 2.0
        elif prim.anchor == "end":
            x -= w
        # y is the baseline, or the vertical middle
        y = prim.y - h / 2.0 if prim.baseline == "middle" else prim.y - h
        idraw.text((x - left, y - top), prim.content, font=self.font, fill=color)

    def render(self, document: ChartDocument) -> Image.Image:
        size = (document.width, document.height)
        ret_image = Image.new("RGB", size, self.theme["background"])

        # clipped layers go on their own transparent image
        # and only the plot rectangle of it is pasted over
        clipped_image = Image.new("RGBA", size, (0, 0, 0, 0))
        self.draw_group(ImageDraw.Draw(clipped_image), document.clipped)
        rect = document.plot_rect
        box = (
            int(round(rect.x)),
            int(round(rect.y)),
            int(round(rect.x + rect.width)),
            int(round(rect.y + rect.height)),
        )
        plot = clipped_image.crop(box)
        ret_image.paste(plot, box[:2], plot)

        idraw = ImageDraw.Draw(ret_image)
        for group in document.unclipped:
            self.draw_group(idraw, group)

        logger.debug("Rasterized %dx%d chart", *size)
        return ret_image


def render_image(
    document: ChartDocument, theme: Optional[Dict[str, Color]] = None
) -> Image.Image:
    return RasterCanvas(theme).render(document)
