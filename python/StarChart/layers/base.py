#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Abstract base class for chart layers
"""

from abc import ABC, abstractmethod

from StarChart.canvas import Group, Text
from StarChart.context import ChartContext


class Layer(ABC):
    """
    One independent slice of the chart (grid, stars, labels...)

    Layers hold no render state, everything they need comes
    from the context, so the same instance can render any chart.
    """

    name = "base"

    @abstractmethod
    def render(self, context: ChartContext) -> Group:
        """
        Produce the drawing group for this layer

        Args:
            context: Config, layout and datasets of the chart

        Returns:
            Group with the layer's primitives
        """
        pass


def text(css_class: str, x: float, y: float, anchor: str, content: str) -> Text:
    return Text(x=x, y=y, content=content, css_class=css_class, anchor=anchor)
