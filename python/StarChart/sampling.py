#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Sampling of graticule lines and the ecliptic into pixel
space polylines, and splitting those polylines where the
projection jumps (wraparound, culled stretches)
"""

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from StarChart.projection import ecliptic_to_equatorial
from StarChart.sky_types import EquatorialPoint, PlanePoint

if TYPE_CHECKING:
    from StarChart.context import ChartContext

logger = logging.getLogger("StarChart.Sampling")

Polyline = List[PlanePoint]


def adaptive_step_deg(fov_deg: float) -> int:
    """
    Sampling step for curved lines, coarser for wider fields.
    Always an integer between 1 and 4 degrees
    """
    if fov_deg <= 30.0:
        target = 240.0
    elif fov_deg <= 60.0:
        target = 180.0
    else:
        target = 120.0
    clamped = min(max(fov_deg / target, 0.5), 4.0)
    # round half up
    return max(int(math.floor(clamped + 0.5)), 1)


def _project_all(
    context: "ChartContext", coords: Sequence[EquatorialPoint]
) -> Polyline:
    out = []
    for eq in coords:
        p = context.project_to_pixels(eq)
        if p is not None:
            out.append(p)
    if len(out) < len(coords):
        logger.debug("Culled %d of %d samples", len(coords) - len(out), len(coords))
    return out


def sample_ra_meridian(
    context: "ChartContext", ra_deg: float, step: Optional[int] = None
) -> Polyline:
    """
    Meridian at ra_deg from dec -90 to +90 (inclusive when
    reachable with step), culled samples dropped
    """
    if step is None:
        step = context.adaptive_step_deg()
    ra = ra_deg % 360.0
    decs = np.arange(-90, 91, step)
    return _project_all(context, [EquatorialPoint(ra, float(d)) for d in decs])


def sample_dec_parallel(
    context: "ChartContext", dec_deg: float, step: Optional[int] = None
) -> Polyline:
    """
    Parallel at dec_deg over RA 0 <= ra < 360, culled samples dropped
    """
    if step is None:
        step = context.adaptive_step_deg()
    ras = np.arange(0, 360, step)
    return _project_all(context, [EquatorialPoint(float(r), dec_deg) for r in ras])


def sample_ecliptic(context: "ChartContext", step: int = 2) -> Polyline:
    """
    Ecliptic from longitude 0 to 360 inclusive
    """
    lons = np.arange(0, 361, step)
    return _project_all(context, [ecliptic_to_equatorial(float(lon)) for lon in lons])


def split_segments(points: Sequence[PlanePoint], threshold: float) -> List[Polyline]:
    """
    Splits points into runs where neither the x nor the y
    distance between neighbours exceeds threshold.

    Empty input gives no segments, a single point one
    single point segment.
    """
    if len(points) == 0:
        return []

    xs = np.fromiter((p.x for p in points), dtype=float, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=float, count=len(points))
    jumps = (np.abs(np.diff(xs)) > threshold) | (np.abs(np.diff(ys)) > threshold)
    # index of the first point of every new run
    starts = [0] + (np.flatnonzero(jumps) + 1).tolist() + [len(points)]

    return [list(points[a:b]) for a, b in zip(starts[:-1], starts[1:])]


def drawable_segments(points: Sequence[PlanePoint], threshold: float) -> List[Polyline]:
    """Segments with enough points to draw a line"""
    return [seg for seg in split_segments(points, threshold) if len(seg) >= 2]
