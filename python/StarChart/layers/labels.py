#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Greedy label placement for stars and deep sky objects.

Symbol footprints of everything drawn are put in the occupied
list first. Candidates are then placed brightest first, each
at the first of a few offsets around its symbol where the text
box stays inside the plot and hits nothing placed before it.
Candidates without such a spot get no label.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from StarChart.canvas import Group, group_with_class
from StarChart.context import ChartContext
from StarChart.layers.base import Layer, text
from StarChart.sizing import Box, object_symbol_box, star_symbol_box
from StarChart.sky_types import CelestialObject, PlanePoint

logger = logging.getLogger("StarChart.Labels")

LABEL_HEIGHT = 12.0
CHAR_WIDTH = 7.0
MIN_LABEL_WIDTH = 16.0


def boxes_overlap(a: Box, b: Box) -> bool:
    """Strict intersection, touching edges do not overlap"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (ax + aw <= bx or ax >= bx + bw or ay + ah <= by or ay >= by + bh)


def label_box_centered(x: float, y_baseline: float, content: str) -> Box:
    """Box of content centered on x, sitting on the baseline"""
    w = max(len(content) * CHAR_WIDTH, MIN_LABEL_WIDTH)
    return (x - w / 2.0, y_baseline - LABEL_HEIGHT, w, LABEL_HEIGHT)


@dataclass
class LabelCandidate:
    magnitude: float
    is_star: bool
    content: str
    p: PlanePoint

    @property
    def css_class(self) -> str:
        return "star-label" if self.is_star else "object-label"


@dataclass
class PlacementState:
    """Scratch space of one labels render"""

    placed: List[Box] = field(default_factory=list)
    labelled: int = 0
    skipped: int = 0

    def is_free(self, box: Box) -> bool:
        return not any(boxes_overlap(box, other) for other in self.placed)

    def occupy(self, box: Box) -> None:
        self.placed.append(box)


class LabelsLayer(Layer):
    name = "labels"

    limit_star_label_mag = 1.0
    limit_object_label_mag = 8.0
    symbol_pad = 1.0
    offsets: Tuple[Tuple[float, float], ...] = (
        (0.0, -10.0),
        (0.0, 10.0),
        (0.0, -16.0),
        (0.0, 16.0),
        (0.0, -20.0),
        (0.0, 20.0),
    )

    def should_label(self, obj: CelestialObject) -> bool:
        if obj.kind.is_star:
            return obj.magnitude <= self.limit_star_label_mag
        return obj.magnitude <= self.limit_object_label_mag

    def seed_symbol_boxes(self, context: ChartContext) -> List[Box]:
        """
        Footprints of every symbol the star and object
        layers draw, labelled or not
        """
        boxes = []
        for star in context.data.stars:
            if star.magnitude > context.cfg.limit_star_mag:
                continue
            p = context.project_to_pixels(star.coords)
            if p is not None:
                boxes.append(star_symbol_box(p, star.magnitude, self.symbol_pad))
        for obj in context.data.objects:
            if obj.magnitude > context.cfg.limit_object_mag:
                continue
            p = context.project_to_pixels(obj.coords)
            if p is not None:
                boxes.append(
                    object_symbol_box(obj.kind, obj.magnitude, p, self.symbol_pad)
                )
        return boxes

    def candidates(self, context: ChartContext) -> List[LabelCandidate]:
        """
        Label candidates, brightest first. Equal magnitudes
        keep their catalog order.
        """
        cands = []
        for star in context.data.stars:
            if not self.should_label(star):
                continue
            p = context.project_to_pixels(star.coords)
            if p is not None:
                cands.append(LabelCandidate(star.magnitude, True, star.label_text, p))
        for obj in context.data.objects:
            # Messier objects are always labelled if there is room
            if not obj.is_messier and not self.should_label(obj):
                continue
            p = context.project_to_pixels(obj.coords)
            if p is not None:
                cands.append(LabelCandidate(obj.magnitude, False, obj.label_text, p))
        return sorted(cands, key=lambda c: c.magnitude)

    def place(
        self, context: ChartContext, cand: LabelCandidate, state: PlacementState
    ) -> Optional[Tuple[float, float, Box]]:
        """
        First free spot for cand as (x, y, box), None if there is none
        """
        layout = context.layout
        for dx, dy in self.offsets:
            ax = cand.p.x + dx
            ay = cand.p.y + dy
            box = label_box_centered(ax, ay, cand.content)
            bx, by, bw, bh = box
            if (
                bx < layout.left
                or bx + bw > layout.right
                or by < layout.top
                or by + bh > layout.bottom
            ):
                continue
            if not state.is_free(box):
                continue
            return ax, ay, box
        return None

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("labels")
        state = PlacementState(placed=self.seed_symbol_boxes(context))

        for cand in self.candidates(context):
            spot = self.place(context, cand, state)
            if spot is None:
                state.skipped += 1
                continue
            ax, _, box = spot
            state.occupy(box)
            state.labelled += 1
            bx, by, bw, bh = box
            g.add(text(cand.css_class, ax, by + bh, "middle", cand.content))

        logger.debug(
            "Placed %d labels, skipped %d for lack of room",
            state.labelled,
            state.skipped,
        )
        return g
