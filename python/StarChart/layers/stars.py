from StarChart.canvas import Circle, Group, group_with_class
from StarChart.context import ChartContext
from StarChart.layers.base import Layer
from StarChart.sizing import star_radius


class StarsLayer(Layer):
    name = "stars"

    def render(self, context: ChartContext) -> Group:
        g = group_with_class("stars")
        scale = context.cfg.object_scale

        for star in context.data.stars:
            if star.magnitude > context.cfg.limit_star_mag:
                continue
            p = context.project_to_pixels(star.coords)
            if p is None:
                continue
            g.add(
                Circle(
                    cx=p.x,
                    cy=p.y,
                    r=star_radius(star.magnitude, scale),
                    css_class="star",
                    element_id=star.identifier,
                )
            )
        return g
