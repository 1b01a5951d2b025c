#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module maps equatorial coordinates onto the
tangent plane of a chart and from there to pixels
"""

import math
from typing import Optional

from StarChart.sky_types import EquatorialPoint, PlanePoint, Projection

HALF_PI = math.pi / 2.0
# tan(zenith) is unbounded at the horizon, gnomonic stops just short of it
GNOMONIC_MIN_COS = 1e-12
# J2000 mean obliquity of the ecliptic
OBLIQUITY_DEG = 23.43928


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _cos_zenith(ra, dec, cra, cdec) -> float:
    # spherical law of cosines, clamped for acos
    return _clamp(
        math.sin(cdec) * math.sin(dec)
        + math.cos(cdec) * math.cos(dec) * math.cos(ra - cra),
        -1.0,
        1.0,
    )


def angular_separation_deg(a: EquatorialPoint, b: EquatorialPoint) -> float:
    """Great circle angle between two sky points, in degrees"""
    cos_z = _cos_zenith(
        math.radians(a.ra_deg),
        math.radians(a.dec_deg),
        math.radians(b.ra_deg),
        math.radians(b.dec_deg),
    )
    return math.degrees(math.acos(cos_z))


def project(
    coords: EquatorialPoint,
    center: EquatorialPoint,
    projection: Projection,
    position_angle_deg: float,
) -> Optional[PlanePoint]:
    """
    Projects coords onto the tangent plane at center.

    PA=0 puts north on +y, a positive PA rotates the chart
    counterclockwise. Returns None for points that can not be
    shown: anything on the far hemisphere (except for stereographic,
    which covers the whole sphere) and the gnomonic horizon itself.
    """
    if coords == center:
        # acos() near 1 is too coarse to land exactly on the origin
        return PlanePoint(0.0, 0.0)

    ra = math.radians(coords.ra_deg)
    dec = math.radians(coords.dec_deg)
    cra = math.radians(center.ra_deg)
    cdec = math.radians(center.dec_deg)

    # Only sin/cos of the difference are used, so RA wraparound
    # at 0/360 needs no normalizing
    d_ra = ra - cra

    cos_z = _cos_zenith(ra, dec, cra, cdec)
    zenith = math.acos(cos_z)

    if projection is not Projection.STEREOGRAPHIC and zenith > HALF_PI:
        return None
    if projection is Projection.GNOMONIC and cos_z < GNOMONIC_MIN_COS:
        return None

    y = math.sin(d_ra) * math.cos(dec)
    x = math.cos(cdec) * math.sin(dec) - math.sin(cdec) * math.cos(dec) * math.cos(
        d_ra
    )
    azimuth = math.atan2(y, x) - math.radians(position_angle_deg)

    if projection is Projection.GNOMONIC:
        r = math.tan(zenith)
    elif projection is Projection.STEREOGRAPHIC:
        r = math.tan(zenith / 2.0)
    elif projection is Projection.SPHERICAL:
        r = math.sin(zenith)
    else:
        r = zenith / HALF_PI

    tp_x = -r * math.sin(azimuth)
    tp_y = r * math.cos(azimuth)
    if not (math.isfinite(tp_x) and math.isfinite(tp_y)):
        return None
    return PlanePoint(tp_x, tp_y)


def to_pixels(tp: PlanePoint, center_px: PlanePoint, scale: float) -> PlanePoint:
    """Tangent plane to pixels, pixel y grows downwards"""
    return PlanePoint(center_px.x + tp.x * scale, center_px.y - tp.y * scale)


def ecliptic_to_equatorial(lon_deg: float) -> EquatorialPoint:
    """
    Equatorial position of a point on the ecliptic (latitude 0)
    """
    eps = math.radians(OBLIQUITY_DEG)
    lon = math.radians(lon_deg)
    dec = math.asin(math.sin(lon) * math.sin(eps))
    ra = math.atan2(math.sin(lon) * math.cos(eps), math.cos(lon))
    return EquatorialPoint(math.degrees(ra) % 360.0, math.degrees(dec))
