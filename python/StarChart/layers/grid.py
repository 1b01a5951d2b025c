import math

from StarChart.canvas import Group, group_with_class, polyline
from StarChart.context import ChartContext
from StarChart.layers.base import Layer
from StarChart.sampling import (
    drawable_segments,
    sample_dec_parallel,
    sample_ra_meridian,
)

# southernmost parallel drawn
FIRST_PARALLEL_DEG = -80


class GridLayer(Layer):
    """RA meridians and Dec parallels"""

    name = "grid"

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("lines")
        threshold = context.layout.split_threshold

        # meridians on whole hours
        ra_step_h = max(int(math.floor(context.cfg.step_ra_deg / 15.0 + 0.5)), 1)
        for h in range(0, 24, ra_step_h):
            pts = sample_ra_meridian(context, h * 15.0)
            for seg in drawable_segments(pts, threshold):
                g.add(polyline(seg, "graticule ra"))

        for dec in range(FIRST_PARALLEL_DEG, 91, context.cfg.step_dec_deg):
            pts = sample_dec_parallel(context, float(dec))
            for seg in drawable_segments(pts, threshold):
                g.add(polyline(seg, "graticule dec"))

        return g
