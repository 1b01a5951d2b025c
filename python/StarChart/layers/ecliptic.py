from StarChart.canvas import Group, group_with_class, polyline
from StarChart.context import ChartContext
from StarChart.layers.base import Layer
from StarChart.sampling import drawable_segments, sample_ecliptic


class EclipticLayer(Layer):
    name = "ecliptic"

    # degrees of ecliptic longitude between samples
    step_deg = 2

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("ecliptic")
        pts = sample_ecliptic(context, self.step_deg)
        for seg in drawable_segments(pts, context.layout.split_threshold):
            g.add(polyline(seg, "ecliptic"))
        return g
