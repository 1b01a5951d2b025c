#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Deep sky object symbols, one glyph per object kind
"""

import logging

from StarChart.canvas import Circle, Ellipse, Group, Line, Primitive, Rect
from StarChart.canvas import group_with_class
from StarChart.context import ChartContext
from StarChart.layers.base import Layer
from StarChart.sizing import Glyph, glyph_for
from StarChart.sky_types import CelestialObject, ObjectKind, PlanePoint

logger = logging.getLogger("StarChart.Objects")


def _cross(p: PlanePoint, half: float):
    return [
        Line(p.x - half, p.y, p.x + half, p.y),
        Line(p.x, p.y - half, p.x, p.y + half),
    ]


def object_symbol(obj: CelestialObject, p: PlanePoint, scale: float) -> Primitive:
    """
    Symbol for obj centered on pixel p
    """
    spec = glyph_for(obj.kind)
    size = spec.base_size(obj.magnitude, obj.size.major, scale)
    ident = obj.identifier

    if spec.glyph is Glyph.CIRCLE:
        return Circle(p.x, p.y, size * 0.5, f"{obj.kind.value} object", ident)

    if spec.glyph is Glyph.CROSSHAIR_CIRCLE:
        r = size * 0.5
        g = Group(css_class=f"{obj.kind.value} object", element_id=ident)
        g.add(Circle(p.x, p.y, r))
        return g.extend(_cross(p, r))

    if spec.glyph is Glyph.SQUARE:
        half = size * 0.5
        return Rect(
            p.x - half,
            p.y - half,
            2.0 * half,
            2.0 * half,
            f"{obj.kind.value} object",
            ident,
        )

    if spec.glyph is Glyph.ELLIPSE:
        g = Group(
            css_class=f"{obj.kind.value} object",
            element_id=ident,
            rotation=(round(obj.position_angle, 2), round(p.x, 2), round(p.y, 2)),
        )
        return g.add(Ellipse(p.x, p.y, size * 0.7, size * 0.35))

    if spec.glyph is Glyph.CIRCLED_CROSS:
        g = Group(css_class=f"{obj.kind.value} object", element_id=ident)
        g.add(Circle(p.x, p.y, size / 4.0))
        return g.extend(_cross(p, size / 2.0))

    # anything without its own glyph
    g = Group(css_class="object", element_id=ident)
    return g.extend(_cross(p, size * 0.5))


class ObjectsLayer(Layer):
    name = "objects"

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("objects")
        scale = context.cfg.object_scale

        # storage order: faint objects first, bright ones end up on top
        for obj in context.data.objects:
            if obj.magnitude > context.cfg.limit_object_mag:
                continue
            p = context.project_to_pixels(obj.coords)
            if p is None:
                continue
            if obj.kind is ObjectKind.NOT_USED:
                logger.debug("Object %s has no known kind", obj.label_text)
            g.add(object_symbol(obj, p, scale))
        return g
