#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module composes the layers into a chart document
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from StarChart.canvas import Group, Rect
from StarChart.config import ChartConfig
from StarChart.context import ChartContext, Datasets
from StarChart.layers import CLIPPED_LAYERS, UNCLIPPED_LAYERS, Layer
from StarChart.utils import Timer

logger = logging.getLogger("StarChart.Chart")


@dataclass
class ChartDocument:
    """
    Finished drawing tree handed to a sink.
    The clipped group holds everything inside the plot
    rectangle, the unclipped groups (frame) go on top.
    """

    width: int
    height: int
    plot_rect: Rect
    clipped: Group
    unclipped: List[Group] = field(default_factory=list)

    @property
    def groups(self) -> List[Group]:
        """Top level groups, back to front"""
        return [self.clipped] + list(self.unclipped)

    def layer(self, css_class: str) -> Group:
        for g in self.clipped.children + self.unclipped:
            if isinstance(g, Group) and g.css_class == css_class:
                return g
        raise KeyError(css_class)


class Chart:
    """
    Renders one chart for a config and a set of catalogs

    Usage:
        chart = Chart(Datasets(stars, objects, constellations), cfg)
        document = chart.draw_document()
    """

    def __init__(
        self,
        data: Datasets,
        cfg: ChartConfig,
        clipped_layers: Sequence[Layer] = CLIPPED_LAYERS,
        unclipped_layers: Sequence[Layer] = UNCLIPPED_LAYERS,
    ):
        self.context = ChartContext(data, cfg)
        self.clipped_layers = clipped_layers
        self.unclipped_layers = unclipped_layers

    def _render_layer(self, layer: Layer) -> Group:
        with Timer(f"{layer.name} layer", "StarChart.Chart"):
            return layer.render(self.context)

    def draw_document(self) -> ChartDocument:
        cfg = self.context.cfg
        layout = self.context.layout
        logger.info(
            "Drawing %dx%d %s chart at RA=%.4f Dec=%.4f, fov %.1f",
            cfg.width,
            cfg.height,
            cfg.projection.value,
            cfg.center.ra_deg,
            cfg.center.dec_deg,
            cfg.fov_deg,
        )

        plot_rect = Rect(
            layout.plot_x,
            layout.plot_y,
            layout.plot_w,
            layout.plot_h,
            css_class="clip-chart",
        )

        clipped = Group(element_id="clip-chart", clip=plot_rect)
        for layer in self.clipped_layers:
            clipped.add(self._render_layer(layer))

        unclipped = [self._render_layer(layer) for layer in self.unclipped_layers]

        return ChartDocument(
            width=cfg.width,
            height=cfg.height,
            plot_rect=plot_rect,
            clipped=clipped,
            unclipped=unclipped,
        )
