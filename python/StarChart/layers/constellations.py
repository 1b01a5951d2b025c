from StarChart.canvas import Group, Text, group_with_class, polyline
from StarChart.context import ChartContext
from StarChart.layers.base import Layer
from StarChart.sampling import drawable_segments


class ConstellationsLayer(Layer):
    """
    Stick figures plus a name at the middle
    of the visible part of each figure
    """

    name = "constellations"

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("constellations")
        threshold = context.layout.split_threshold

        for constellation in context.data.constellations:
            visible = []
            for line in constellation.lines:
                pts = []
                for eq in line:
                    p = context.project_to_pixels(eq)
                    if p is not None:
                        pts.append(p)
                visible.extend(pts)

                for seg in drawable_segments(pts, threshold):
                    g.add(polyline(seg, "constellation"))

            if len(visible) >= 2:
                xs = [p.x for p in visible]
                ys = [p.y for p in visible]
                g.add(
                    Text(
                        x=(min(xs) + max(xs)) * 0.5,
                        y=(min(ys) + max(ys)) * 0.5,
                        content=constellation.name,
                        css_class="constellation-label",
                        anchor="middle",
                        baseline="middle",
                    )
                )
        return g
