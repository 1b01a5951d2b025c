from StarChart.canvas import Group, Line, group_with_class
from StarChart.context import ChartContext
from StarChart.layers.base import Layer


class ZenithLayer(Layer):
    """Cross marking the chart center"""

    name = "zenith"

    size = 10.0

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("zenith")
        p = context.project_to_pixels(context.cfg.center)
        if p is None:
            return g

        half = self.size / 2.0
        g.add(Line(p.x - half, p.y, p.x + half, p.y, stroke_width=2))
        g.add(Line(p.x, p.y - half, p.x, p.y + half, stroke_width=2))
        return g
