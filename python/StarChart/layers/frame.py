#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Chart border with RA/Dec ticks and labels.

Ticks sit where the graticule lines, sampled at a finer step
than the grid itself, cross the plot border. Crossings on the
major grid step get a longer tick and a label.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Sequence, Set, Tuple

from StarChart.canvas import Group, Line, Rect, group_with_class
from StarChart.context import ChartContext
from StarChart.layers.base import Layer, text
from StarChart.sampling import sample_dec_parallel, sample_ra_meridian, split_segments
from StarChart.sky_types import PlanePoint

EDGE_TOLERANCE = 1e-6
MAJOR_TOLERANCE = 1e-8


class Side(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Mark:
    x: float
    y: float
    side: Side
    label: str = ""


def _round_half_away(v: float) -> int:
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def dedup_marks(marks: Iterable[Mark]) -> List[Mark]:
    """
    Collapses marks on the same side, within 0.1px and with the
    same label. First occurrence wins.
    """
    out = []
    seen: Set[Tuple[Side, int, int, str]] = set()
    for m in marks:
        key = (
            m.side,
            _round_half_away(m.x * 10.0),
            _round_half_away(m.y * 10.0),
            m.label,
        )
        if key not in seen:
            seen.add(key)
            out.append(m)
    return out


def edge_hits(
    poly: Sequence[PlanePoint],
    want: Sequence[Side],
    top: float,
    bottom: float,
    left: float,
    right: float,
) -> List[Mark]:
    """
    Points where the polyline crosses the wanted sides of
    the rectangle, in polyline order
    """
    hits = []
    for a, b in zip(poly, poly[1:]):
        x1, y1, x2, y2 = a.x, a.y, b.x, b.y
        dx, dy = x2 - x1, y2 - y1

        for side, edge in ((Side.TOP, top), (Side.BOTTOM, bottom)):
            if side not in want or dy == 0.0 or (y1 - edge) * (y2 - edge) > 0.0:
                continue
            t = (edge - y1) / dy
            if 0.0 <= t <= 1.0:
                x = x1 + t * dx
                if left - EDGE_TOLERANCE <= x <= right + EDGE_TOLERANCE:
                    hits.append(Mark(x, edge, side))

        for side, edge in ((Side.LEFT, left), (Side.RIGHT, right)):
            if side not in want or dx == 0.0 or (x1 - edge) * (x2 - edge) > 0.0:
                continue
            t = (edge - x1) / dx
            if 0.0 <= t <= 1.0:
                y = y1 + t * dy
                if top - EDGE_TOLERANCE <= y <= bottom + EDGE_TOLERANCE:
                    hits.append(Mark(edge, y, side))
    return hits


class FrameLayer(Layer):
    name = "frame"

    fine_step_ra_deg = 3.75
    fine_step_dec_deg = 2
    first_dec_deg = -80

    def is_major_ra(self, ra_deg: float, step_ra_deg: float) -> bool:
        k = math.floor(ra_deg / step_ra_deg + 0.5)
        return abs(ra_deg - k * step_ra_deg) < MAJOR_TOLERANCE

    def is_major_dec(self, dec_deg: int, step_dec_deg: int) -> bool:
        return dec_deg % step_dec_deg == 0

    def ra_marks(self, context: ChartContext) -> List[Mark]:
        layout = context.layout
        marks = []
        ra_step_h = self.fine_step_ra_deg / 15.0
        for i in range(int(math.floor(24.0 / ra_step_h))):
            h = i * ra_step_h
            ra_deg = h * 15.0
            major = self.is_major_ra(ra_deg, float(context.cfg.step_ra_deg))
            pts = sample_ra_meridian(context, ra_deg)
            for seg in split_segments(pts, layout.split_threshold):
                for m in edge_hits(
                    seg,
                    (Side.TOP, Side.BOTTOM),
                    layout.top,
                    layout.bottom,
                    layout.left,
                    layout.right,
                ):
                    if major:
                        marks.append(replace(m, label=f"{math.floor(h + 0.5)}h"))
                    marks.append(m)
        return dedup_marks(marks)

    def dec_marks(self, context: ChartContext) -> List[Mark]:
        layout = context.layout
        marks = []
        for d in range(self.first_dec_deg, 91, self.fine_step_dec_deg):
            major = self.is_major_dec(d, context.cfg.step_dec_deg)
            pts = sample_dec_parallel(context, float(d))
            for seg in split_segments(pts, layout.split_threshold):
                for m in edge_hits(
                    seg,
                    (Side.LEFT, Side.RIGHT),
                    layout.top,
                    layout.bottom,
                    layout.left,
                    layout.right,
                ):
                    if major:
                        marks.append(replace(m, label=f"{d}°"))
                    marks.append(m)
        return dedup_marks(marks)

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("frame")
        layout = context.layout
        top, bottom, left, right = layout.top, layout.bottom, layout.left, layout.right

        g.add(
            Rect(
                layout.plot_x,
                layout.plot_y,
                layout.plot_w,
                layout.plot_h,
                css_class="border",
                filled=False,
            )
        )

        for m in self.ra_marks(context):
            if m.side is Side.TOP:
                length = 6.0 if m.label else 3.0
                g.add(Line(m.x, top, m.x, top - length, css_class="tick"))
                if m.label:
                    g.add(text("tick-label", m.x, top - 10.0, "middle", m.label))
            elif m.side is Side.BOTTOM:
                g.add(Line(m.x, bottom, m.x, bottom + 6.0, css_class="tick"))
                if m.label:
                    g.add(text("tick-label", m.x, bottom + 20.0, "middle", m.label))

        for m in self.dec_marks(context):
            length = 6.0 if m.label else 3.0
            if m.side is Side.LEFT:
                g.add(Line(left, m.y, left - length, m.y, css_class="tick"))
                if m.label:
                    g.add(text("tick-label", left - 10.0, m.y + 4.0, "end", m.label))
            elif m.side is Side.RIGHT:
                g.add(Line(right, m.y, right + length, m.y, css_class="tick"))
                if m.label:
                    g.add(text("tick-label", right + 10.0, m.y + 4.0, "start", m.label))

        return g
